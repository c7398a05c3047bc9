from __future__ import annotations

from enum import Enum

from gocardless_client.resources.base import Resource


class BlockType(str, Enum):
    EMAIL = "email"
    EMAIL_DOMAIN = "email_domain"
    BANK_ACCOUNT = "bank_account"


class BlockReasonType(str, Enum):
    IDENTITY_FRAUD = "identity_fraud"
    NO_INTENT_TO_PAY = "no_intent_to_pay"
    UNFAIR_CHARGEBACK = "unfair_chargeback"
    OTHER = "other"


class Block(Resource):
    """A block prevents a customer email, email domain or bank account from
    being used to set up mandates or pay."""

    active: bool | None = None
    block_type: str | None = None
    created_at: str | None = None
    id: str | None = None
    reason_description: str | None = None
    reason_type: str | None = None
    resource_reference: str | None = None
    updated_at: str | None = None
