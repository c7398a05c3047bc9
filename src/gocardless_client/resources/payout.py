from __future__ import annotations

from enum import Enum

from pydantic import Field

from gocardless_client.resources.base import Resource


class PayoutStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    BOUNCED = "bounced"


class PayoutType(str, Enum):
    MERCHANT = "merchant"
    PARTNER = "partner"


class PayoutLinks(Resource):
    creditor: str | None = None
    creditor_bank_account: str | None = None


class Payout(Resource):
    amount: int | None = None
    arrival_date: str | None = None
    created_at: str | None = None
    currency: str | None = None
    deducted_fees: int | None = None
    id: str | None = None
    links: PayoutLinks = Field(default_factory=PayoutLinks)
    payout_type: str | None = None
    reference: str | None = None
    status: str | None = None
