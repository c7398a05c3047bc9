from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from gocardless_client.resources.base import Resource


class EventResourceType(str, Enum):
    BILLING_REQUESTS = "billing_requests"
    CREDITORS = "creditors"
    CUSTOMERS = "customers"
    EXPORTS = "exports"
    INSTALMENT_SCHEDULES = "instalment_schedules"
    MANDATES = "mandates"
    ORGANISATIONS = "organisations"
    OUTBOUND_PAYMENTS = "outbound_payments"
    PAYER_AUTHORISATIONS = "payer_authorisations"
    PAYMENTS = "payments"
    PAYOUTS = "payouts"
    REFUNDS = "refunds"
    SCHEME_IDENTIFIERS = "scheme_identifiers"
    SUBSCRIPTIONS = "subscriptions"


class EventDetails(Resource):
    bank_account_id: str | None = None
    cause: str | None = None
    currency: str | None = None
    description: str | None = None
    item_count: int | None = None
    not_retried_reason: str | None = None
    origin: str | None = None
    property: str | None = None
    reason_code: str | None = None
    scheme: str | None = None
    will_attempt_retry: bool | None = None


class EventSource(Resource):
    name: str | None = None
    type: str | None = None


class Event(Resource):
    action: str | None = None
    created_at: str | None = None
    details: EventDetails = Field(default_factory=EventDetails)
    id: str | None = None
    # Mixed ids keyed by resource name (mandate, payment, payout, ...).
    links: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
    resource_metadata: dict[str, Any] = Field(default_factory=dict)
    resource_type: str | None = None
    source: EventSource | None = None
