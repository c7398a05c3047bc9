from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from gocardless_client.resources.base import Resource


class BillingRequestStatus(str, Enum):
    PENDING = "pending"
    READY_TO_FULFIL = "ready_to_fulfil"
    FULFILLING = "fulfilling"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"


class BillingRequestAction(Resource):
    available_currencies: list[str] = Field(default_factory=list)
    completes_actions: list[str] = Field(default_factory=list)
    required: bool | None = None
    requires_actions: list[str] = Field(default_factory=list)
    status: str | None = None
    type: str | None = None


class BillingRequestMandateRequest(Resource):
    currency: str | None = None
    scheme: str | None = None
    verify: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class BillingRequestPaymentRequest(Resource):
    amount: int | None = None
    app_fee: int | None = None
    currency: str | None = None
    description: str | None = None
    scheme: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class BillingRequestLinks(Resource):
    bank_authorisation: str | None = None
    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None
    customer_billing_detail: str | None = None
    mandate_request: str | None = None
    mandate_request_mandate: str | None = None
    payment_request: str | None = None
    payment_request_payment: str | None = None


class BillingRequest(Resource):
    """A request to collect a mandate and/or a one-off payment from a payer.

    `actions` lists what still has to happen before the request can be
    fulfilled; each action's `status` moves from `pending` to `completed`.
    """

    actions: list[BillingRequestAction] = Field(default_factory=list)
    created_at: str | None = None
    fallback_enabled: bool | None = None
    fallback_occurred: bool | None = None
    id: str | None = None
    links: BillingRequestLinks = Field(default_factory=BillingRequestLinks)
    mandate_request: BillingRequestMandateRequest | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    payment_request: BillingRequestPaymentRequest | None = None
    purpose_code: str | None = None
    resources: dict[str, Any] = Field(default_factory=dict)
    status: str | None = None
