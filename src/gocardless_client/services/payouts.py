from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.payout import Payout, PayoutStatus, PayoutType
from gocardless_client.services.base import BaseService, CreatedAtParam, ListRequest, RequestModel, require


class PayoutListRequest(ListRequest):
    created_at: CreatedAtParam | None = None
    creditor: str | None = None
    creditor_bank_account: str | None = None
    currency: str | None = None
    payout_type: PayoutType | None = None
    reference: str | None = None
    status: PayoutStatus | None = None


class PayoutGetRequest(RequestModel):
    pass


class PayoutResponse(ApiResponse):
    payout: Payout | None = Field(default=None, alias="payouts")


class PayoutListResponse(ApiListResponse):
    items_field = "payouts"

    payouts: list[Payout] = Field(default_factory=list)


class PayoutService(BaseService):
    """Payouts are read-only: they are created by GoCardless when funds are paid out."""

    def list(
        self, request: PayoutListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> PayoutListResponse:
        return self._client.execute(
            "GET",
            "/payouts",
            request=request or PayoutListRequest(),
            response_model=PayoutListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self, request: PayoutListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> PayoutListResponse:
        return await self._client.aexecute(
            "GET",
            "/payouts",
            request=request or PayoutListRequest(),
            response_model=PayoutListResponse,
            request_settings=request_settings,
        )

    def all(
        self, request: PayoutListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> Iterator[Payout]:
        return self._iterate(request or PayoutListRequest(), lambda r: self.list(r, request_settings))

    def all_pages(
        self, request: PayoutListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[list[Payout]]:
        return self._iterate_pages(
            request or PayoutListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self, request: PayoutListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[Payout]:
        return self._aiterate(request or PayoutListRequest(), lambda r: self.alist(r, request_settings))

    def get(
        self,
        identity: str,
        request: PayoutGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> PayoutResponse:
        return self._client.execute(
            "GET",
            "/payouts/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or PayoutGetRequest(),
            response_model=PayoutResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: PayoutGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> PayoutResponse:
        return await self._client.aexecute(
            "GET",
            "/payouts/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or PayoutGetRequest(),
            response_model=PayoutResponse,
            request_settings=request_settings,
        )
