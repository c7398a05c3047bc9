from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.creditor import Creditor
from gocardless_client.services.base import (
    BaseService,
    CreatedAtParam,
    IdempotentRequest,
    ListRequest,
    RequestModel,
    require,
)


class CreditorCreateRequest(IdempotentRequest):
    country_code: str | None = None
    creditor_type: str | None = None
    links: dict[str, str] | None = None
    name: str | None = None


class CreditorListRequest(ListRequest):
    created_at: CreatedAtParam | None = None


class CreditorGetRequest(RequestModel):
    pass


class CreditorUpdateLinks(RequestModel):
    default_aud_payout_account: str | None = None
    default_cad_payout_account: str | None = None
    default_dkk_payout_account: str | None = None
    default_eur_payout_account: str | None = None
    default_gbp_payout_account: str | None = None
    default_nzd_payout_account: str | None = None
    default_sek_payout_account: str | None = None
    default_usd_payout_account: str | None = None


class CreditorUpdateRequest(RequestModel):
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    country_code: str | None = None
    links: CreditorUpdateLinks | None = None
    name: str | None = None
    postal_code: str | None = None
    region: str | None = None


class CreditorResponse(ApiResponse):
    creditor: Creditor | None = Field(default=None, alias="creditors")


class CreditorListResponse(ApiListResponse):
    items_field = "creditors"

    creditors: list[Creditor] = Field(default_factory=list)


class CreditorService(BaseService):
    def create(
        self, request: CreditorCreateRequest | None = None, request_settings: RequestSettings | None = None
    ) -> CreditorResponse:
        return self._client.execute(
            "POST",
            "/creditors",
            request=request or CreditorCreateRequest(),
            payload_key="creditors",
            response_model=CreditorResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate(
        self, request: CreditorCreateRequest | None = None, request_settings: RequestSettings | None = None
    ) -> CreditorResponse:
        return await self._client.aexecute(
            "POST",
            "/creditors",
            request=request or CreditorCreateRequest(),
            payload_key="creditors",
            response_model=CreditorResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def list(
        self, request: CreditorListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> CreditorListResponse:
        return self._client.execute(
            "GET",
            "/creditors",
            request=request or CreditorListRequest(),
            response_model=CreditorListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self, request: CreditorListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> CreditorListResponse:
        return await self._client.aexecute(
            "GET",
            "/creditors",
            request=request or CreditorListRequest(),
            response_model=CreditorListResponse,
            request_settings=request_settings,
        )

    def all(
        self, request: CreditorListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> Iterator[Creditor]:
        return self._iterate(request or CreditorListRequest(), lambda r: self.list(r, request_settings))

    def all_pages(
        self, request: CreditorListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[list[Creditor]]:
        return self._iterate_pages(
            request or CreditorListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self, request: CreditorListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[Creditor]:
        return self._aiterate(request or CreditorListRequest(), lambda r: self.alist(r, request_settings))

    def get(
        self,
        identity: str,
        request: CreditorGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> CreditorResponse:
        return self._client.execute(
            "GET",
            "/creditors/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or CreditorGetRequest(),
            response_model=CreditorResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: CreditorGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> CreditorResponse:
        return await self._client.aexecute(
            "GET",
            "/creditors/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or CreditorGetRequest(),
            response_model=CreditorResponse,
            request_settings=request_settings,
        )

    def update(
        self,
        identity: str,
        request: CreditorUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> CreditorResponse:
        return self._client.execute(
            "PUT",
            "/creditors/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or CreditorUpdateRequest(),
            payload_key="creditors",
            response_model=CreditorResponse,
            request_settings=request_settings,
        )

    async def aupdate(
        self,
        identity: str,
        request: CreditorUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> CreditorResponse:
        return await self._client.aexecute(
            "PUT",
            "/creditors/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or CreditorUpdateRequest(),
            payload_key="creditors",
            response_model=CreditorResponse,
            request_settings=request_settings,
        )
