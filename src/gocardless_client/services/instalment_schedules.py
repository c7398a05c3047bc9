from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.instalment_schedule import InstalmentSchedule, InstalmentScheduleStatus
from gocardless_client.services.base import (
    BaseService,
    CreatedAtParam,
    IdempotentRequest,
    ListRequest,
    RequestModel,
    require,
)


class InstalmentScheduleCreateLinks(RequestModel):
    mandate: str | None = None


class DatedInstalment(RequestModel):
    amount: int | None = None
    charge_date: str | None = None
    description: str | None = None


class ScheduledInstalments(RequestModel):
    amounts: list[int] | None = None
    interval: int | None = None
    interval_unit: str | None = None
    start_date: str | None = None


class InstalmentScheduleCreateWithDatesRequest(IdempotentRequest):
    app_fee: int | None = None
    currency: str | None = None
    instalments: list[DatedInstalment] | None = None
    links: InstalmentScheduleCreateLinks | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    payment_reference: str | None = None
    retry_if_possible: bool | None = None
    total_amount: int | None = None


class InstalmentScheduleCreateWithScheduleRequest(IdempotentRequest):
    app_fee: int | None = None
    currency: str | None = None
    instalments: ScheduledInstalments | None = None
    links: InstalmentScheduleCreateLinks | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    payment_reference: str | None = None
    retry_if_possible: bool | None = None
    total_amount: int | None = None


class InstalmentScheduleListRequest(ListRequest):
    created_at: CreatedAtParam | None = None
    customer: str | None = None
    mandate: str | None = None
    status: list[InstalmentScheduleStatus] | None = None


class InstalmentScheduleGetRequest(RequestModel):
    pass


class InstalmentScheduleUpdateRequest(RequestModel):
    metadata: dict[str, str] | None = None


class InstalmentScheduleCancelRequest(RequestModel):
    pass


class InstalmentScheduleResponse(ApiResponse):
    instalment_schedule: InstalmentSchedule | None = Field(default=None, alias="instalment_schedules")


class InstalmentScheduleListResponse(ApiListResponse):
    items_field = "instalment_schedules"

    instalment_schedules: list[InstalmentSchedule] = Field(default_factory=list)


class InstalmentScheduleService(BaseService):
    """Instalment schedules, created either from explicit dates or from an interval."""

    def create_with_dates(
        self,
        request: InstalmentScheduleCreateWithDatesRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return self._client.execute(
            "POST",
            "/instalment_schedules",
            request=request or InstalmentScheduleCreateWithDatesRequest(),
            payload_key="instalment_schedules",
            response_model=InstalmentScheduleResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate_with_dates(
        self,
        request: InstalmentScheduleCreateWithDatesRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return await self._client.aexecute(
            "POST",
            "/instalment_schedules",
            request=request or InstalmentScheduleCreateWithDatesRequest(),
            payload_key="instalment_schedules",
            response_model=InstalmentScheduleResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def create_with_schedule(
        self,
        request: InstalmentScheduleCreateWithScheduleRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return self._client.execute(
            "POST",
            "/instalment_schedules",
            request=request or InstalmentScheduleCreateWithScheduleRequest(),
            payload_key="instalment_schedules",
            response_model=InstalmentScheduleResponse,
            fetch_by_id=lambda id_: self.get(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    async def acreate_with_schedule(
        self,
        request: InstalmentScheduleCreateWithScheduleRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return await self._client.aexecute(
            "POST",
            "/instalment_schedules",
            request=request or InstalmentScheduleCreateWithScheduleRequest(),
            payload_key="instalment_schedules",
            response_model=InstalmentScheduleResponse,
            fetch_by_id=lambda id_: self.aget(id_, request_settings=request_settings),
            request_settings=request_settings,
        )

    def list(
        self,
        request: InstalmentScheduleListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleListResponse:
        return self._client.execute(
            "GET",
            "/instalment_schedules",
            request=request or InstalmentScheduleListRequest(),
            response_model=InstalmentScheduleListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self,
        request: InstalmentScheduleListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleListResponse:
        return await self._client.aexecute(
            "GET",
            "/instalment_schedules",
            request=request or InstalmentScheduleListRequest(),
            response_model=InstalmentScheduleListResponse,
            request_settings=request_settings,
        )

    def all(
        self,
        request: InstalmentScheduleListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> Iterator[InstalmentSchedule]:
        return self._iterate(
            request or InstalmentScheduleListRequest(), lambda r: self.list(r, request_settings)
        )

    def all_pages(
        self,
        request: InstalmentScheduleListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[list[InstalmentSchedule]]:
        return self._iterate_pages(
            request or InstalmentScheduleListRequest(), lambda r: self.alist(r, request_settings)
        )

    def aall(
        self,
        request: InstalmentScheduleListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[InstalmentSchedule]:
        return self._aiterate(
            request or InstalmentScheduleListRequest(), lambda r: self.alist(r, request_settings)
        )

    def get(
        self,
        identity: str,
        request: InstalmentScheduleGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return self._client.execute(
            "GET",
            "/instalment_schedules/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or InstalmentScheduleGetRequest(),
            response_model=InstalmentScheduleResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: InstalmentScheduleGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return await self._client.aexecute(
            "GET",
            "/instalment_schedules/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or InstalmentScheduleGetRequest(),
            response_model=InstalmentScheduleResponse,
            request_settings=request_settings,
        )

    def update(
        self,
        identity: str,
        request: InstalmentScheduleUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return self._client.execute(
            "PUT",
            "/instalment_schedules/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or InstalmentScheduleUpdateRequest(),
            payload_key="instalment_schedules",
            response_model=InstalmentScheduleResponse,
            request_settings=request_settings,
        )

    async def aupdate(
        self,
        identity: str,
        request: InstalmentScheduleUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return await self._client.aexecute(
            "PUT",
            "/instalment_schedules/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or InstalmentScheduleUpdateRequest(),
            payload_key="instalment_schedules",
            response_model=InstalmentScheduleResponse,
            request_settings=request_settings,
        )

    def cancel(
        self,
        identity: str,
        request: InstalmentScheduleCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return self._client.execute(
            "POST",
            "/instalment_schedules/:identity/actions/cancel",
            url_params={"identity": require("identity", identity)},
            request=request or InstalmentScheduleCancelRequest(),
            payload_key="data",
            response_model=InstalmentScheduleResponse,
            request_settings=request_settings,
        )

    async def acancel(
        self,
        identity: str,
        request: InstalmentScheduleCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> InstalmentScheduleResponse:
        return await self._client.aexecute(
            "POST",
            "/instalment_schedules/:identity/actions/cancel",
            url_params={"identity": require("identity", identity)},
            request=request or InstalmentScheduleCancelRequest(),
            payload_key="data",
            response_model=InstalmentScheduleResponse,
            request_settings=request_settings,
        )
