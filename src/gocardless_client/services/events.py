from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from pydantic import Field

from gocardless_client.request_settings import RequestSettings
from gocardless_client.resources.base import ApiListResponse, ApiResponse
from gocardless_client.resources.event import Event, EventResourceType
from gocardless_client.services.base import BaseService, CreatedAtParam, ListRequest, RequestModel, require


class EventListRequest(ListRequest):
    action: str | None = None
    billing_request: str | None = None
    created_at: CreatedAtParam | None = None
    creditor: str | None = None
    include: str | None = None
    instalment_schedule: str | None = None
    mandate: str | None = None
    outbound_payment: str | None = None
    parent_event: str | None = None
    payment: str | None = None
    payout: str | None = None
    refund: str | None = None
    resource_type: EventResourceType | None = None
    subscription: str | None = None


class EventGetRequest(RequestModel):
    pass


class EventResponse(ApiResponse):
    event: Event | None = Field(default=None, alias="events")


class EventListResponse(ApiListResponse):
    items_field = "events"

    events: list[Event] = Field(default_factory=list)


class EventService(BaseService):
    def list(
        self, request: EventListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> EventListResponse:
        return self._client.execute(
            "GET",
            "/events",
            request=request or EventListRequest(),
            response_model=EventListResponse,
            request_settings=request_settings,
        )

    async def alist(
        self, request: EventListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> EventListResponse:
        return await self._client.aexecute(
            "GET",
            "/events",
            request=request or EventListRequest(),
            response_model=EventListResponse,
            request_settings=request_settings,
        )

    def all(
        self, request: EventListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> Iterator[Event]:
        return self._iterate(request or EventListRequest(), lambda r: self.list(r, request_settings))

    def all_pages(
        self, request: EventListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[list[Event]]:
        return self._iterate_pages(request or EventListRequest(), lambda r: self.alist(r, request_settings))

    def aall(
        self, request: EventListRequest | None = None, request_settings: RequestSettings | None = None
    ) -> AsyncIterator[Event]:
        return self._aiterate(request or EventListRequest(), lambda r: self.alist(r, request_settings))

    def get(
        self,
        identity: str,
        request: EventGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> EventResponse:
        return self._client.execute(
            "GET",
            "/events/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or EventGetRequest(),
            response_model=EventResponse,
            request_settings=request_settings,
        )

    async def aget(
        self,
        identity: str,
        request: EventGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> EventResponse:
        return await self._client.aexecute(
            "GET",
            "/events/:identity",
            url_params={"identity": require("identity", identity)},
            request=request or EventGetRequest(),
            response_model=EventResponse,
            request_settings=request_settings,
        )
