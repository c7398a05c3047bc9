from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.mandate import Mandate, MandateStatus
from gocardless_client.services.base import (
    BaseService,
    CreatedAtParam,
    IdempotentRequest,
    ListRequest,
    RequestModel,
    require,
)


class MandateCreateLinks(RequestModel):
    creditor: str | None = None
    customer_bank_account: str | None = None


class MandateCreateRequest(IdempotentRequest):
    authorisation_source: str | None = None
    links: MandateCreateLinks | None = None
    metadata: dict[str, str] | None = None
    payer_ip_address: str | None = None
    reference: str | None = None
    scheme: str | None = None


class MandateListRequest(ListRequest):
    created_at: CreatedAtParam | None = None
    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None
    mandate_type: str | None = None
    reference: str | None = None
    scheme: list[str] | None = None
    status: list[MandateStatus] | None = None


class MandateGetRequest(RequestModel):
    pass


class MandateUpdateRequest(RequestModel):
    metadata: dict[str, str] | None = None


class MandateCancelRequest(RequestModel):
    metadata: dict[str, str] | None = None


class MandateReinstateRequest(RequestModel):
    metadata: dict[str, str] | None = None


class MandateResponse(ApiResponse):
    mandate: Mandate | None = Field(default=None, alias="mandates")


class MandateListResponse(ApiListResponse):
    items_field = "mandates"

    mandates: list[Mandate] = Field(default_factory=list)


class MandateService(BaseService):
    def create(
        self, request: MandateCreateRequest | None = None, request_settings: RequestSettings | None = None
    ) -> MandateResponse:
        return self._client.execute(
            "POST",
            "/mandates",
            request=request or MandateCreateRequest(),
            payload_key="mandates",
            response_model=MandateResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate(
        self, request: MandateCreateRequest | None = None, request_settings: RequestSettings | None = None
    ) -> MandateResponse:
        return await self._client.aexecute(
            "POST",
            "/mandates",
            request=request or MandateCreateRequest(),
            payload_key="mandates",
            response_model=MandateResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def list(
        self, request: MandateListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> MandateListResponse:
        return self._client.execute(
            "GET",
            "/mandates",
            request=request or MandateListRequest(),
            response_model=MandateListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self, request: MandateListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> MandateListResponse:
        return await self._client.aexecute(
            "GET",
            "/mandates",
            request=request or MandateListRequest(),
            response_model=MandateListResponse,
            request_settings=request_settings,
        )

    def all(
        self, request: MandateListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> Iterator[Mandate]:
        return self._iterate(request or MandateListRequest(), lambda r: self.list(r, request_settings))

    def all_pages(
        self, request: MandateListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[list[Mandate]]:
        return self._iterate_pages(
            request or MandateListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self, request: MandateListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[Mandate]:
        return self._aiterate(request or MandateListRequest(), lambda r: self.alist(r, request_settings))

    def get(
        self,
        identity: str,
        request: MandateGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return self._client.execute(
            "GET",
            "/mandates/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or MandateGetRequest(),
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: MandateGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return await self._client.aexecute(
            "GET",
            "/mandates/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or MandateGetRequest(),
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    def update(
        self,
        identity: str,
        request: MandateUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return self._client.execute(
            "PUT",
            "/mandates/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or MandateUpdateRequest(),
            payload_key="mandates",
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    async def aupdate(
        self,
        identity: str,
        request: MandateUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return await self._client.aexecute(
            "PUT",
            "/mandates/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or MandateUpdateRequest(),
            payload_key="mandates",
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    def cancel(
        self,
        identity: str,
        request: MandateCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return self._client.execute(
            "POST",
            "/mandates/:identity/actions/cancel",
            payload_key="data",
            url_params={"identity": require("identity", identity)},
            request=request or MandateCancelRequest(),
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    async def acancel(
        self,
        identity: str,
        request: MandateCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return await self._client.aexecute(
            "POST",
            "/mandates/:identity/actions/cancel",
            payload_key="data",
            url_params={"identity": require("identity", identity)},
            request=request or MandateCancelRequest(),
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    def reinstate(
        self,
        identity: str,
        request: MandateReinstateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return self._client.execute(
            "POST",
            "/mandates/:identity/actions/reinstate",
            payload_key="data",
            url_params={"identity": require("identity", identity)},
            request=request or MandateReinstateRequest(),
            response_model=MandateResponse,
            request_settings=request_settings,
        )

    async def areinstate(
        self,
        identity: str,
        request: MandateReinstateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        return await self._client.aexecute(
            "POST",
            "/mandates/:identity/actions/reinstate",
            payload_key="data",
            url_params={"identity": require("identity", identity)},
            request=request or MandateReinstateRequest(),
            response_model=MandateResponse,
            request_settings=request_settings,
        )
