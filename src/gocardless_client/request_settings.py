from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx


@dataclass
class RequestSettings:
    """Per-call overrides for a single API request.

    `customise_request` runs last, on every attempt, after headers and signing
    have been applied.
    """

    headers: dict[str, str] = field(default_factory=dict)
    customise_request: Callable[[httpx.Request], None] | None = None
    number_of_retries_on_timeout: int | None = None
    wait_between_retries: float | None = None


@dataclass(frozen=True)
class RequestSigningSettings:
    public_key_id: str
    private_key_pem: str
