from __future__ import annotations

import datetime
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from gocardless_client.errors import MisconfiguredRequestError
from gocardless_client.pagination import Page, aiterate_all, iterate_all, iterate_all_paged
from gocardless_client.resources.base import ApiListResponse

if TYPE_CHECKING:
    from gocardless_client.client import GoCardlessClient

ListRequestT = TypeVar("ListRequestT", bound="ListRequest")


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class IdempotentRequest(RequestModel):
    """Create-type request. The client fills in a key when none is given."""

    idempotency_key: str | None = Field(default=None, exclude=True)


class CreatedAtParam(RequestModel):
    greater_than: datetime.datetime | None = Field(default=None, alias="gt")
    greater_than_or_equal: datetime.datetime | None = Field(default=None, alias="gte")
    less_than: datetime.datetime | None = Field(default=None, alias="lt")
    less_than_or_equal: datetime.datetime | None = Field(default=None, alias="lte")


class ListRequest(RequestModel):
    """Query parameters shared by every cursor-paginated list endpoint."""

    after: str | None = None
    before: str | None = None
    limit: int | None = None


def require(name: str, value: Any) -> Any:
    if value is None or value == "":
        raise MisconfiguredRequestError(f"{name} is required")
    return value


class BaseService:
    def __init__(self, client: GoCardlessClient) -> None:
        self._client = client

    @staticmethod
    def _iterate(
        request: ListRequestT, list_page: Callable[[ListRequestT], ApiListResponse]
    ) -> Iterator[Any]:
        return iterate_all(request, lambda r: list_page(r).page())

    @staticmethod
    def _iterate_pages(
        request: ListRequestT, alist_page: Callable[[ListRequestT], Awaitable[ApiListResponse]]
    ) -> AsyncIterator[list[Any]]:
        async def fetch(r: ListRequestT) -> Page[Any]:
            return (await alist_page(r)).page()

        return iterate_all_paged(request, fetch)

    @staticmethod
    def _aiterate(
        request: ListRequestT, alist_page: Callable[[ListRequestT], Awaitable[ApiListResponse]]
    ) -> AsyncIterator[Any]:
        async def fetch(r: ListRequestT) -> Page[Any]:
            return (await alist_page(r)).page()

        return aiterate_all(request, fetch)
