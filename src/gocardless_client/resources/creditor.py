from __future__ import annotations

from pydantic import Field

from gocardless_client.resources.base import Resource


class CreditorLinks(Resource):
    default_aud_payout_account: str | None = None
    default_cad_payout_account: str | None = None
    default_dkk_payout_account: str | None = None
    default_eur_payout_account: str | None = None
    default_gbp_payout_account: str | None = None
    default_nzd_payout_account: str | None = None
    default_sek_payout_account: str | None = None
    default_usd_payout_account: str | None = None


class CreditorSchemeIdentifier(Resource):
    currency: str | None = None
    minimum_advance_notice: int | None = None
    name: str | None = None
    reference: str | None = None
    scheme: str | None = None


class Creditor(Resource):
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    can_create_refunds: bool | None = None
    city: str | None = None
    country_code: str | None = None
    created_at: str | None = None
    id: str | None = None
    links: CreditorLinks = Field(default_factory=CreditorLinks)
    logo_url: str | None = None
    name: str | None = None
    postal_code: str | None = None
    region: str | None = None
    scheme_identifiers: list[CreditorSchemeIdentifier] = Field(default_factory=list)
    verification_status: str | None = None
