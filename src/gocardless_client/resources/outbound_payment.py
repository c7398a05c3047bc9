from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from gocardless_client.resources.base import Resource


class OutboundPaymentStatus(str, Enum):
    VERIFYING = "verifying"
    PENDING_APPROVAL = "pending_approval"
    SCHEDULED = "scheduled"
    EXECUTING = "executing"
    EXECUTED = "executed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class OutboundPaymentLinks(Resource):
    creditor: str | None = None
    customer: str | None = None
    recipient_bank_account: str | None = None


class RecipientBankAccountHolderVerification(Resource):
    actual_account_name: str | None = None
    result: str | None = None
    type: str | None = None


class OutboundPaymentVerifications(Resource):
    recipient_bank_account_holder_verification: RecipientBankAccountHolderVerification | None = None


class OutboundPayment(Resource):
    amount: int | None = None
    created_at: str | None = None
    currency: str | None = None
    description: str | None = None
    execution_date: str | None = None
    id: str | None = None
    is_withdrawal: bool | None = None
    links: OutboundPaymentLinks = Field(default_factory=OutboundPaymentLinks)
    metadata: dict[str, Any] = Field(default_factory=dict)
    reference: str | None = None
    scheme: str | None = None
    status: str | None = None
    verifications: OutboundPaymentVerifications | None = None
