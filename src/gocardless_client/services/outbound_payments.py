from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.outbound_payment import OutboundPayment, OutboundPaymentStatus
from gocardless_client.services.base import (
    BaseService,
    IdempotentRequest,
    ListRequest,
    RequestModel,
    require,
)


class OutboundPaymentCreateLinks(RequestModel):
    creditor: str | None = None
    recipient_bank_account: str | None = None


class OutboundPaymentCreateRequest(IdempotentRequest):
    amount: int | None = None
    description: str | None = None
    execution_date: str | None = None
    links: OutboundPaymentCreateLinks | None = None
    metadata: dict[str, str] | None = None
    reference: str | None = None
    scheme: str | None = None


class OutboundPaymentWithdrawLinks(RequestModel):
    creditor: str | None = None


class OutboundPaymentWithdrawRequest(RequestModel):
    amount: int | None = None
    description: str | None = None
    execution_date: str | None = None
    links: OutboundPaymentWithdrawLinks | None = None
    metadata: dict[str, str] | None = None
    reference: str | None = None
    scheme: str | None = None


class OutboundPaymentCancelRequest(RequestModel):
    metadata: dict[str, str] | None = None


class OutboundPaymentApproveRequest(RequestModel):
    pass


class OutboundPaymentGetRequest(RequestModel):
    pass


class OutboundPaymentListRequest(ListRequest):
    created_from: str | None = None
    created_to: str | None = None
    status: OutboundPaymentStatus | None = None


class OutboundPaymentUpdateRequest(RequestModel):
    metadata: dict[str, str] | None = None


class OutboundPaymentResponse(ApiResponse):
    outbound_payment: OutboundPayment | None = Field(default=None, alias="outbound_payments")


class OutboundPaymentListResponse(ApiListResponse):
    items_field = "outbound_payments"

    outbound_payments: list[OutboundPayment] = Field(default_factory=list)


class OutboundPaymentService(BaseService):
    def create(
        self,
        request: OutboundPaymentCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return self._client.execute(
            "POST",
            "/outbound_payments",
            request=request or OutboundPaymentCreateRequest(),
            payload_key="outbound_payments",
            response_model=OutboundPaymentResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate(
        self,
        request: OutboundPaymentCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return await self._client.aexecute(
            "POST",
            "/outbound_payments",
            request=request or OutboundPaymentCreateRequest(),
            payload_key="outbound_payments",
            response_model=OutboundPaymentResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def withdraw(
        self,
        request: OutboundPaymentWithdrawRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        """Pay funds from the creditor's balance out to its own verified account."""
        return self._client.execute(
            "POST",
            "/outbound_payments/withdrawal",
            request=request or OutboundPaymentWithdrawRequest(),
            payload_key="data",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    async def awithdraw(
        self,
        request: OutboundPaymentWithdrawRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return await self._client.aexecute(
            "POST",
            "/outbound_payments/withdrawal",
            request=request or OutboundPaymentWithdrawRequest(),
            payload_key="data",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    def cancel(
        self,
        identity: str,
        request: OutboundPaymentCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return self._client.execute(
            "POST",
            "/outbound_payments/:identity/actions/cancel",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentCancelRequest(),
            payload_key="data",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    async def acancel(
        self,
        identity: str,
        request: OutboundPaymentCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return await self._client.aexecute(
            "POST",
            "/outbound_payments/:identity/actions/cancel",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentCancelRequest(),
            payload_key="data",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    def approve(
        self,
        identity: str,
        request: OutboundPaymentApproveRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return self._client.execute(
            "POST",
            "/outbound_payments/:identity/actions/approve",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentApproveRequest(),
            payload_key="data",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    async def aapprove(
        self,
        identity: str,
        request: OutboundPaymentApproveRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return await self._client.aexecute(
            "POST",
            "/outbound_payments/:identity/actions/approve",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentApproveRequest(),
            payload_key="data",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    def get(
        self,
        identity: str,
        request: OutboundPaymentGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return self._client.execute(
            "GET",
            "/outbound_payments/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentGetRequest(),
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: OutboundPaymentGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return await self._client.aexecute(
            "GET",
            "/outbound_payments/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentGetRequest(),
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    def list(
        self,
        request: OutboundPaymentListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentListResponse:
        return self._client.execute(
            "GET",
            "/outbound_payments",
            request=request or OutboundPaymentListRequest(),
            response_model=OutboundPaymentListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self,
        request: OutboundPaymentListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentListResponse:
        return await self._client.aexecute(
            "GET",
            "/outbound_payments",
            request=request or OutboundPaymentListRequest(),
            response_model=OutboundPaymentListResponse,
            request_settings=request_settings,
        )

    def all(
        self,
        request: OutboundPaymentListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> Iterator[OutboundPayment]:
        return self._iterate(
            request or OutboundPaymentListRequest(), lambda r: self.list(r, request_settings)
        )

    def all_pages(
        self,
        request: OutboundPaymentListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[list[OutboundPayment]]:
        return self._iterate_pages(
            request or OutboundPaymentListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self,
        request: OutboundPaymentListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[OutboundPayment]:
        return self._aiterate(
            request or OutboundPaymentListRequest(), lambda r: self.alist(r, request_settings)
        )

    def update(
        self,
        identity: str,
        request: OutboundPaymentUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return self._client.execute(
            "PUT",
            "/outbound_payments/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentUpdateRequest(),
            payload_key="outbound_payments",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )

    async def aupdate(
        self,
        identity: str,
        request: OutboundPaymentUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> OutboundPaymentResponse:
        return await self._client.aexecute(
            "PUT",
            "/outbound_payments/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or OutboundPaymentUpdateRequest(),
            payload_key="outbound_payments",
            response_model=OutboundPaymentResponse,
            request_settings=request_settings,
        )
