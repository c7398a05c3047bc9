from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from gocardless_client.resources.base import Resource


class MandateStatus(str, Enum):
    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    ACTIVE = "active"
    SUSPENDED_BY_PAYER = "suspended_by_payer"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    CONSUMED = "consumed"
    BLOCKED = "blocked"


class MandateLinks(Resource):
    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None
    new_mandate: str | None = None


class Mandate(Resource):
    created_at: str | None = None
    id: str | None = None
    links: MandateLinks = Field(default_factory=MandateLinks)
    metadata: dict[str, Any] = Field(default_factory=dict)
    next_possible_charge_date: str | None = None
    payments_require_approval: bool | None = None
    reference: str | None = None
    scheme: str | None = None
    status: str | None = None
