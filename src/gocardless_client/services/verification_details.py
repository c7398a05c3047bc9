from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.verification_detail import VerificationDetail
from gocardless_client.services.base import BaseService, ListRequest, RequestModel, require


class VerificationDetailDirector(RequestModel):
    city: str | None = None
    country_code: str | None = None
    date_of_birth: str | None = None
    family_name: str | None = None
    given_name: str | None = None
    postal_code: str | None = None
    street: str | None = None


class VerificationDetailCreateLinks(RequestModel):
    creditor: str | None = None


class VerificationDetailCreateRequest(RequestModel):
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    company_number: str | None = None
    description: str | None = None
    directors: list[VerificationDetailDirector] | None = None
    links: VerificationDetailCreateLinks | None = None
    name: str | None = None
    postal_code: str | None = None


class VerificationDetailListRequest(ListRequest):
    # Required by the API.
    creditor: str | None = None


class VerificationDetailResponse(ApiResponse):
    verification_detail: VerificationDetail | None = Field(default=None, alias="verification_details")


class VerificationDetailListResponse(ApiListResponse):
    items_field = "verification_details"

    verification_details: list[VerificationDetail] = Field(default_factory=list)


def _checked(request: VerificationDetailListRequest | None) -> VerificationDetailListRequest:
    request = request or VerificationDetailListRequest()
    require("creditor", request.creditor)
    return request


class VerificationDetailService(BaseService):
    def create(
        self,
        request: VerificationDetailCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> VerificationDetailResponse:
        return self._client.execute(
            "POST",
            "/verification_details",
            request=request or VerificationDetailCreateRequest(),
            payload_key="verification_details",
            response_model=VerificationDetailResponse,
            request_settings=request_settings,
        )

    async def acreate(
        self,
        request: VerificationDetailCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> VerificationDetailResponse:
        return await self._client.aexecute(
            "POST",
            "/verification_details",
            request=request or VerificationDetailCreateRequest(),
            payload_key="verification_details",
            response_model=VerificationDetailResponse,
            request_settings=request_settings,
        )

    def list(
        self,
        request: VerificationDetailListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> VerificationDetailListResponse:
        return self._client.execute(
            "GET",
            "/verification_details",
            request=_checked(request),
            response_model=VerificationDetailListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self,
        request: VerificationDetailListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> VerificationDetailListResponse:
        return await self._client.aexecute(
            "GET",
            "/verification_details",
            request=_checked(request),
            response_model=VerificationDetailListResponse,
            request_settings=request_settings,
        )

    def all(
        self,
        request: VerificationDetailListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> Iterator[VerificationDetail]:
        return self._iterate(_checked(request), lambda r: self.list(r, request_settings))

    def all_pages(
        self,
        request: VerificationDetailListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[list[VerificationDetail]]:
        return self._iterate_pages(_checked(request), lambda r: self.alist(r, request_settings))

    def aall(
        self,
        request: VerificationDetailListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[VerificationDetail]:
        return self._aiterate(_checked(request), lambda r: self.alist(r, request_settings))
