from __future__ import annotations

from pydantic import Field

from gocardless_client.resources.base import Resource


class VerificationDetailDirector(Resource):
    city: str | None = None
    country_code: str | None = None
    date_of_birth: str | None = None
    family_name: str | None = None
    given_name: str | None = None
    postal_code: str | None = None
    street: str | None = None


class VerificationDetailLinks(Resource):
    creditor: str | None = None


class VerificationDetail(Resource):
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    company_number: str | None = None
    description: str | None = None
    directors: list[VerificationDetailDirector] = Field(default_factory=list)
    links: VerificationDetailLinks = Field(default_factory=VerificationDetailLinks)
    name: str | None = None
    postal_code: str | None = None
