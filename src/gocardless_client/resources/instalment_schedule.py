from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from gocardless_client.resources.base import Resource


class InstalmentScheduleStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    CREATION_FAILED = "creation_failed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    ERRORED = "errored"


class InstalmentScheduleLinks(Resource):
    customer: str | None = None
    mandate: str | None = None
    payments: list[str] = Field(default_factory=list)


class InstalmentSchedule(Resource):
    created_at: str | None = None
    currency: str | None = None
    id: str | None = None
    links: InstalmentScheduleLinks = Field(default_factory=InstalmentScheduleLinks)
    metadata: dict[str, Any] = Field(default_factory=dict)
    name: str | None = None
    # Keyed by the index of the failing instalment.
    payment_errors: dict[str, Any] = Field(default_factory=dict)
    status: str | None = None
    total_amount: int | None = None
