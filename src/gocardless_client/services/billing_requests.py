from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Any

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.billing_request import BillingRequest, BillingRequestStatus
from gocardless_client.services.base import (
    BaseService,
    CreatedAtParam,
    IdempotentRequest,
    ListRequest,
    RequestModel,
    require,
)


class BillingRequestCreateLinks(RequestModel):
    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None


class BillingRequestCreateMandateRequest(RequestModel):
    authorisation_source: str | None = None
    constraints: dict[str, Any] | None = None
    currency: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None
    reference: str | None = None
    scheme: str | None = None
    sweeping: bool | None = None
    verify: str | None = None


class BillingRequestCreatePaymentRequest(RequestModel):
    amount: int | None = None
    app_fee: int | None = None
    currency: str | None = None
    description: str | None = None
    funds_settlement: str | None = None
    metadata: dict[str, str] | None = None
    reference: str | None = None
    retry_if_possible: bool | None = None
    scheme: str | None = None


class BillingRequestCreateRequest(IdempotentRequest):
    fallback_enabled: bool | None = None
    links: BillingRequestCreateLinks | None = None
    mandate_request: BillingRequestCreateMandateRequest | None = None
    metadata: dict[str, str] | None = None
    payment_request: BillingRequestCreatePaymentRequest | None = None
    purpose_code: str | None = None


class BillingRequestCollectCustomerDetailsRequest(RequestModel):
    customer: dict[str, Any] | None = None
    customer_billing_detail: dict[str, Any] | None = None


class BillingRequestCollectBankAccountRequest(RequestModel):
    account_holder_name: str | None = None
    account_number: str | None = None
    account_number_suffix: str | None = None
    account_type: str | None = None
    bank_code: str | None = None
    branch_code: str | None = None
    country_code: str | None = None
    currency: str | None = None
    iban: str | None = None
    metadata: dict[str, str] | None = None
    pay_id: str | None = None


class BillingRequestConfirmPayerDetailsRequest(RequestModel):
    metadata: dict[str, str] | None = None
    payer_requested_dual_signature: bool | None = None


class BillingRequestFulfilRequest(RequestModel):
    metadata: dict[str, str] | None = None


class BillingRequestCancelRequest(RequestModel):
    metadata: dict[str, str] | None = None


class BillingRequestNotifyRequest(RequestModel):
    notification_type: str | None = None
    redirect_uri: str | None = None


class BillingRequestFallbackRequest(RequestModel):
    pass


class BillingRequestChooseCurrencyRequest(RequestModel):
    currency: str | None = None
    metadata: dict[str, str] | None = None


class BillingRequestSelectInstitutionRequest(RequestModel):
    country_code: str | None = None
    institution: str | None = None


class BillingRequestListRequest(ListRequest):
    created_at: CreatedAtParam | None = None
    customer: str | None = None
    status: BillingRequestStatus | None = None


class BillingRequestGetRequest(RequestModel):
    pass


class BillingRequestResponse(ApiResponse):
    billing_request: BillingRequest | None = Field(default=None, alias="billing_requests")


class BillingRequestListResponse(ApiListResponse):
    items_field = "billing_requests"

    billing_requests: list[BillingRequest] = Field(default_factory=list)


class BillingRequestService(BaseService):
    """Billing requests and the actions that move them towards fulfilment.

    Every action posts its request under a `data` key to
    `/billing_requests/:identity/actions/<action>` and returns the updated
    billing request.
    """

    def _action(
        self,
        identity: str,
        action: str,
        request: RequestModel,
        request_settings: RequestSettings | None,
    ) -> BillingRequestResponse:
        return self._client.execute(
            "POST",
            f"/billing_requests/:identity/actions/{action}",
            url_params={"identity": require("identity", identity)},
            request=request,
            payload_key="data",
            response_model=BillingRequestResponse,
            request_settings=request_settings,
        )

    async def _aaction(
        self,
        identity: str,
        action: str,
        request: RequestModel,
        request_settings: RequestSettings | None,
    ) -> BillingRequestResponse:
        return await self._client.aexecute(
            "POST",
            f"/billing_requests/:identity/actions/{action}",
            url_params={"identity": require("identity", identity)},
            request=request,
            payload_key="data",
            response_model=BillingRequestResponse,
            request_settings=request_settings,
        )

    def create(
        self,
        request: BillingRequestCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._client.execute(
            "POST",
            "/billing_requests",
            request=request or BillingRequestCreateRequest(),
            payload_key="billing_requests",
            response_model=BillingRequestResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate(
        self,
        request: BillingRequestCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._client.aexecute(
            "POST",
            "/billing_requests",
            request=request or BillingRequestCreateRequest(),
            payload_key="billing_requests",
            response_model=BillingRequestResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def collect_customer_details(
        self,
        identity: str,
        request: BillingRequestCollectCustomerDetailsRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(
            identity,
            "collect_customer_details",
            request or BillingRequestCollectCustomerDetailsRequest(),
            request_settings,
        )

    async def acollect_customer_details(
        self,
        identity: str,
        request: BillingRequestCollectCustomerDetailsRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity,
            "collect_customer_details",
            request or BillingRequestCollectCustomerDetailsRequest(),
            request_settings,
        )

    def collect_bank_account(
        self,
        identity: str,
        request: BillingRequestCollectBankAccountRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(
            identity,
            "collect_bank_account",
            request or BillingRequestCollectBankAccountRequest(),
            request_settings,
        )

    async def acollect_bank_account(
        self,
        identity: str,
        request: BillingRequestCollectBankAccountRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity,
            "collect_bank_account",
            request or BillingRequestCollectBankAccountRequest(),
            request_settings,
        )

    def confirm_payer_details(
        self,
        identity: str,
        request: BillingRequestConfirmPayerDetailsRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(
            identity,
            "confirm_payer_details",
            request or BillingRequestConfirmPayerDetailsRequest(),
            request_settings,
        )

    async def aconfirm_payer_details(
        self,
        identity: str,
        request: BillingRequestConfirmPayerDetailsRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity,
            "confirm_payer_details",
            request or BillingRequestConfirmPayerDetailsRequest(),
            request_settings,
        )

    def fulfil(
        self,
        identity: str,
        request: BillingRequestFulfilRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(identity, "fulfil", request or BillingRequestFulfilRequest(), request_settings)

    async def afulfil(
        self,
        identity: str,
        request: BillingRequestFulfilRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity, "fulfil", request or BillingRequestFulfilRequest(), request_settings
        )

    def cancel(
        self,
        identity: str,
        request: BillingRequestCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(identity, "cancel", request or BillingRequestCancelRequest(), request_settings)

    async def acancel(
        self,
        identity: str,
        request: BillingRequestCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity, "cancel", request or BillingRequestCancelRequest(), request_settings
        )

    def notify(
        self,
        identity: str,
        request: BillingRequestNotifyRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(identity, "notify", request or BillingRequestNotifyRequest(), request_settings)

    async def anotify(
        self,
        identity: str,
        request: BillingRequestNotifyRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity, "notify", request or BillingRequestNotifyRequest(), request_settings
        )

    def fallback(
        self,
        identity: str,
        request: BillingRequestFallbackRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(
            identity, "fallback", request or BillingRequestFallbackRequest(), request_settings
        )

    async def afallback(
        self,
        identity: str,
        request: BillingRequestFallbackRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity, "fallback", request or BillingRequestFallbackRequest(), request_settings
        )

    def choose_currency(
        self,
        identity: str,
        request: BillingRequestChooseCurrencyRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(
            identity, "choose_currency", request or BillingRequestChooseCurrencyRequest(), request_settings
        )

    async def achoose_currency(
        self,
        identity: str,
        request: BillingRequestChooseCurrencyRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity, "choose_currency", request or BillingRequestChooseCurrencyRequest(), request_settings
        )

    def select_institution(
        self,
        identity: str,
        request: BillingRequestSelectInstitutionRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._action(
            identity,
            "select_institution",
            request or BillingRequestSelectInstitutionRequest(),
            request_settings,
        )

    async def aselect_institution(
        self,
        identity: str,
        request: BillingRequestSelectInstitutionRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._aaction(
            identity,
            "select_institution",
            request or BillingRequestSelectInstitutionRequest(),
            request_settings,
        )

    def list(
        self,
        request: BillingRequestListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestListResponse:
        return self._client.execute(
            "GET",
            "/billing_requests",
            request=request or BillingRequestListRequest(),
            response_model=BillingRequestListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self,
        request: BillingRequestListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestListResponse:
        return await self._client.aexecute(
            "GET",
            "/billing_requests",
            request=request or BillingRequestListRequest(),
            response_model=BillingRequestListResponse,
            request_settings=request_settings,
        )

    def all(
        self,
        request: BillingRequestListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> Iterator[BillingRequest]:
        return self._iterate(
            request or BillingRequestListRequest(), lambda r: self.list(r, request_settings)
        )

    def all_pages(
        self,
        request: BillingRequestListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[list[BillingRequest]]:
        return self._iterate_pages(
            request or BillingRequestListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self,
        request: BillingRequestListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[BillingRequest]:
        return self._aiterate(
            request or BillingRequestListRequest(), lambda r: self.alist(r, request_settings)
        )

    def get(
        self,
        identity: str,
        request: BillingRequestGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return self._client.execute(
            "GET",
            "/billing_requests/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or BillingRequestGetRequest(),
            response_model=BillingRequestResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: BillingRequestGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> BillingRequestResponse:
        return await self._client.aexecute(
            "GET",
            "/billing_requests/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or BillingRequestGetRequest(),
            response_model=BillingRequestResponse,
            request_settings=request_settings,
        )
