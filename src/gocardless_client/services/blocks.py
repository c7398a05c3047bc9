from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.block import Block, BlockReasonType, BlockType
from gocardless_client.services.base import (
    BaseService,
    CreatedAtParam,
    IdempotentRequest,
    ListRequest,
    RequestModel,
    require,
)


class BlockCreateRequest(IdempotentRequest):
    active: bool | None = None
    block_type: BlockType | None = None
    reason_description: str | None = None
    reason_type: BlockReasonType | None = None
    resource_reference: str | None = None


class BlockListRequest(ListRequest):
    block: str | None = None
    block_type: BlockType | None = None
    created_at: CreatedAtParam | None = None
    reason_type: BlockReasonType | None = None
    updated_at: str | None = None


class BlockGetRequest(RequestModel):
    pass


class BlockDisableRequest(RequestModel):
    pass


class BlockEnableRequest(RequestModel):
    pass


class BlockResponse(ApiResponse):
    block: Block | None = Field(default=None, alias="blocks")


class BlockListResponse(ApiListResponse):
    items_field = "blocks"

    blocks: list[Block] = Field(default_factory=list)


class BlockService(BaseService):
    def create(
        self, request: BlockCreateRequest | None = None, request_settings: RequestSettings | None = None
    ) -> BlockResponse:
        return self._client.execute(
            "POST",
            "/blocks",
            request=request or BlockCreateRequest(),
            payload_key="blocks",
            response_model=BlockResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate(
        self, request: BlockCreateRequest | None = None, request_settings: RequestSettings | None = None
    ) -> BlockResponse:
        return await self._client.aexecute(
            "POST",
            "/blocks",
            request=request or BlockCreateRequest(),
            payload_key="blocks",
            response_model=BlockResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def get(
        self,
        identity: str,
        request: BlockGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BlockResponse:
        return self._client.execute(
            "GET",
            "/blocks/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or BlockGetRequest(),
            response_model=BlockResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: BlockGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BlockResponse:
        return await self._client.aexecute(
            "GET",
            "/blocks/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or BlockGetRequest(),
            response_model=BlockResponse,
            request_settings=request_settings,
        )

    def list(
        self, request: BlockListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> BlockListResponse:
        return self._client.execute(
            "GET",
            "/blocks",
            request=request or BlockListRequest(),
            response_model=BlockListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self, request: BlockListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> BlockListResponse:
        return await self._client.aexecute(
            "GET",
            "/blocks",
            request=request or BlockListRequest(),
            response_model=BlockListResponse,
            request_settings=request_settings,
        )

    def all(
        self, request: BlockListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> Iterator[Block]:
        return self._iterate(request or BlockListRequest(), lambda r: self.list(r, request_settings))

    def all_pages(
        self, request: BlockListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[list[Block]]:
        return self._iterate_pages(
            request or BlockListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self, request: BlockListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[Block]:
        return self._aiterate(request or BlockListRequest(), lambda r: self.alist(r, request_settings))

    def disable(
        self,
        identity: str,
        request: BlockDisableRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BlockResponse:
        return self._client.execute(
            "POST",
            "/blocks/:identity/actions/disable",
            url_params={"identity": require("identity", identity)},
            request=request or BlockDisableRequest(),
            payload_key="data",
            response_model=BlockResponse,
            request_settings=request_settings,
        )

    async def adisable(
        self,
        identity: str,
        request: BlockDisableRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BlockResponse:
        return await self._client.aexecute(
            "POST",
            "/blocks/:identity/actions/disable",
            url_params={"identity": require("identity", identity)},
            request=request or BlockDisableRequest(),
            payload_key="data",
            response_model=BlockResponse,
            request_settings=request_settings,
        )

    def enable(
        self,
        identity: str,
        request: BlockEnableRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BlockResponse:
        return self._client.execute(
            "POST",
            "/blocks/:identity/actions/enable",
            url_params={"identity": require("identity", identity)},
            request=request or BlockEnableRequest(),
            payload_key="data",
            response_model=BlockResponse,
            request_settings=request_settings,
        )

    async def aenable(
        self,
        identity: str,
        request: BlockEnableRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BlockResponse:
        return await self._client.aexecute(
            "POST",
            "/blocks/:identity/actions/enable",
            url_params={"identity": require("identity", identity)},
            request=request or BlockEnableRequest(),
            payload_key="data",
            response_model=BlockResponse,
            request_settings=request_settings,
        )
