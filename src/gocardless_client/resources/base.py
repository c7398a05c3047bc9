from __future__ import annotations

from typing import Any, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, Field

from gocardless_client.pagination import Page


class Resource(BaseModel):
    """Base for API resources. Unknown fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Cursors(BaseModel):
    before: str | None = None
    after: str | None = None


class ListMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    cursors: Cursors = Field(default_factory=Cursors)
    limit: int | None = None


class ApiResponse(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, arbitrary_types_allowed=True)

    # The raw HTTP response, attached by the client after parsing.
    response: httpx.Response | None = Field(default=None, exclude=True)


class ApiListResponse(ApiResponse):
    """Envelope of a list endpoint: the items under `items_field` plus `meta`."""

    items_field: ClassVar[str]

    meta: ListMeta = Field(default_factory=ListMeta)

    @property
    def items(self) -> list[Any]:
        return list(getattr(self, self.items_field) or [])

    def page(self) -> Page[Any]:
        return Page(items=self.items, after=self.meta.cursors.after)
