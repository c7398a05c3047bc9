from __future__ import annotations

import datetime
import inspect
import json
import logging
import platform
import re
import threading
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from tenacity import AsyncRetrying, Retrying, retry_if_exception, stop_after_attempt, wait_fixed

from gocardless_client import __version__
from gocardless_client.config import Settings, env_defaults
from gocardless_client.errors import (
    STATUS_ERROR_TYPES,
    ApiErrorResponse,
    InvalidStateException,
    MisconfiguredRequestError,
    generic_exception,
    is_idempotency_conflict,
    to_exception,
)
from gocardless_client.request_settings import RequestSettings, RequestSigningSettings
from gocardless_client.resources.base import ApiResponse
from gocardless_client.services import (
    BillingRequestService,
    BlockService,
    CreditorService,
    EventService,
    InstalmentScheduleService,
    MandateService,
    OutboundPaymentService,
    PayoutService,
    VerificationDetailService,
)
from gocardless_client.signing import read_private_key_pem, sign_request

logger = logging.getLogger(__name__)

API_VERSION = "2015-07-06"
CLIENT_LIBRARY = "gocardless-python-client"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

Method = Literal["GET", "POST", "PUT", "DELETE"]
ResponseT = TypeVar("ResponseT", bound=ApiResponse)


def _is_retryable_exception(exc: BaseException) -> bool:
    # Timeouts and connection failures only. Anything that reached the server and
    # came back with a status is final; retrying it is the caller's decision.
    return isinstance(exc, httpx.TransportError)


def _log_retry(retry_state: Any) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Transport error on attempt %d, retrying: %r", retry_state.attempt_number, exc
    )


def _cleanup_platform(value: str) -> str:
    return re.sub(r"[;:#()~]", "-", value)


def user_agent() -> str:
    return (
        f"{CLIENT_LIBRARY}/{__version__} python/{platform.python_version()} "
        f"{_cleanup_platform(platform.platform())}"
    )


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    return str(value)


def flatten_query(data: dict[str, Any], prefix: str | None = None) -> list[tuple[str, str]]:
    """Flatten a dumped request into query pairs; nested objects become `key[inner]`."""
    params: list[tuple[str, str]] = []
    for key, value in data.items():
        if value is None:
            continue
        name = f"{prefix}[{key}]" if prefix else key
        if isinstance(value, dict):
            params.extend(flatten_query(value, name))
        else:
            params.append((name, stringify(value)))
    return params


def expand_path(path: str, url_params: dict[str, Any] | None) -> str:
    for key, value in (url_params or {}).items():
        path = path.replace(f":{key}", quote(stringify(value), safe=""))
    return path


@dataclass
class GoCardlessClient:
    """Entry point into the API.

    Holds the access token and the HTTP transports, and exposes one service per
    resource (`client.mandates`, `client.payouts`, ...). Every service call goes
    through `execute` or `aexecute`.
    """

    access_token: str
    base_url: str = "https://api.gocardless.com"
    http_client: httpx.Client | None = None
    async_http_client: httpx.AsyncClient | None = None
    error_on_idempotency_conflict: bool = False
    request_signing: RequestSigningSettings | None = None
    timeout: float = 30.0
    number_of_retries_on_timeout: int = 2
    wait_between_retries: float = 0.5

    _owns_client: bool = field(default=False, init=False, repr=False)
    _owns_async_client: bool = field(default=False, init=False, repr=False)
    _transport_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

        self.billing_requests = BillingRequestService(self)
        self.blocks = BlockService(self)
        self.creditors = CreditorService(self)
        self.events = EventService(self)
        self.instalment_schedules = InstalmentScheduleService(self)
        self.mandates = MandateService(self)
        self.outbound_payments = OutboundPaymentService(self)
        self.payouts = PayoutService(self)
        self.verification_details = VerificationDetailService(self)

    @classmethod
    def create(cls, access_token: str, environment: str = "live", **kwargs: Any) -> "GoCardlessClient":
        return cls(access_token=access_token, base_url=env_defaults(environment).base_url, **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoCardlessClient":
        if not settings.access_token:
            raise MisconfiguredRequestError("GOCARDLESS_ACCESS_TOKEN is not set")
        base_url = settings.base_url or env_defaults(settings.environment).base_url

        signing: RequestSigningSettings | None = None
        if settings.signing_key_id and settings.signing_private_key_path:
            signing = RequestSigningSettings(
                public_key_id=settings.signing_key_id,
                private_key_pem=read_private_key_pem(settings.signing_private_key_path),
            )

        return cls(
            access_token=settings.access_token,
            base_url=base_url,
            error_on_idempotency_conflict=settings.error_on_idempotency_conflict,
            request_signing=signing,
            timeout=settings.timeout_seconds,
            number_of_retries_on_timeout=settings.retries_on_timeout,
            wait_between_retries=settings.wait_between_retries,
        )

    # -------- Transport lifecycle --------

    def _get_client(self) -> httpx.Client:
        with self._transport_lock:
            if self.http_client is None:
                self.http_client = httpx.Client(timeout=httpx.Timeout(self.timeout))
                self._owns_client = True
            return self.http_client

    def _get_async_client(self) -> httpx.AsyncClient:
        with self._transport_lock:
            if self.async_http_client is None:
                self.async_http_client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
                self._owns_async_client = True
            return self.async_http_client

    def close(self) -> None:
        if self._owns_client and self.http_client is not None:
            self.http_client.close()
            self.http_client = None
            self._owns_client = False

    async def aclose(self) -> None:
        if self._owns_async_client and self.async_http_client is not None:
            await self.async_http_client.aclose()
            self.async_http_client = None
            self._owns_async_client = False

    def __enter__(self) -> "GoCardlessClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "GoCardlessClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -------- Request building --------

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": user_agent(),
            "GoCardless-Version": API_VERSION,
            "GoCardless-Client-Version": __version__,
            "GoCardless-Client-Library": CLIENT_LIBRARY,
            "Authorization": f"Bearer {self.access_token}",
        }

    def _build_request(
        self,
        transport: httpx.Client | httpx.AsyncClient,
        method: Method,
        path: str,
        *,
        url_params: dict[str, Any] | None,
        request: BaseModel | None,
        payload_key: str | None,
        request_settings: RequestSettings | None,
    ) -> httpx.Request:
        url = f"{self.base_url}{expand_path(path, url_params)}"
        headers = self._default_headers()

        params: list[tuple[str, str]] | None = None
        content: bytes | None = None
        if method == "GET":
            if request is not None:
                params = flatten_query(request.model_dump(by_alias=True, exclude_none=True)) or None
        elif request is not None and payload_key:
            body = {payload_key: request.model_dump(mode="json", by_alias=True, exclude_none=True)}
            content = json.dumps(body, indent=2).encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE

        idempotency_key = getattr(request, "idempotency_key", None)
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key

        if request_settings is not None:
            headers.update(request_settings.headers)

        http_request = transport.build_request(
            method, url, params=params, content=content, headers=headers
        )
        if self.request_signing is not None:
            sign_request(http_request, self.request_signing)
        if request_settings is not None and request_settings.customise_request is not None:
            request_settings.customise_request(http_request)
        return http_request

    @staticmethod
    def _ensure_idempotency_key(request: BaseModel | None) -> None:
        # Generated once per call so every retry carries the same key.
        if request is not None and hasattr(request, "idempotency_key"):
            if not request.idempotency_key:
                request.idempotency_key = str(uuid.uuid4())

    def _retry_kwargs(self, request_settings: RequestSettings | None) -> dict[str, Any]:
        retries = self.number_of_retries_on_timeout
        wait = self.wait_between_retries
        if request_settings is not None:
            if request_settings.number_of_retries_on_timeout is not None:
                retries = request_settings.number_of_retries_on_timeout
            if request_settings.wait_between_retries is not None:
                wait = request_settings.wait_between_retries
        return {
            "wait": wait_fixed(wait),
            "stop": stop_after_attempt(retries + 1),
            "retry": retry_if_exception(_is_retryable_exception),
            "before_sleep": _log_retry,
            "reraise": True,
        }

    # -------- Response handling --------

    def _handle_response(self, resp: httpx.Response, response_model: type[ResponseT]) -> ResponseT:
        if resp.is_success:
            try:
                data = resp.json() if resp.content else {}
                result = response_model.model_validate(data or {})
            except ValueError:
                raise generic_exception(resp) from None
            result.response = resp
            return result

        try:
            error_response = ApiErrorResponse.model_validate(resp.json())
        except ValueError:
            logger.warning("Unparseable error response: status=%s", resp.status_code)
            raise generic_exception(resp) from None

        if not error_response.error.code:
            error_response.error.code = resp.status_code
        override = STATUS_ERROR_TYPES.get(error_response.error.code)
        if override is not None:
            error_response.error.type = override
        error_response.response = resp
        logger.warning(
            "API error: status=%s type=%s request_id=%s",
            resp.status_code,
            error_response.error.type.value,
            error_response.error.request_id,
        )
        raise to_exception(error_response)

    def _conflicting_id(self, exc: InvalidStateException, fetch_by_id: Any) -> str | None:
        if fetch_by_id is None or self.error_on_idempotency_conflict:
            return None
        conflicting_id = is_idempotency_conflict(exc)
        if conflicting_id is not None:
            logger.info("Idempotent creation conflict, fetching existing resource %s", conflicting_id)
        return conflicting_id

    # -------- Execution --------

    def execute(
        self,
        method: Method,
        path: str,
        *,
        response_model: type[ResponseT],
        url_params: dict[str, Any] | None = None,
        request: BaseModel | None = None,
        payload_key: str | None = None,
        fetch_by_id: Callable[[str], ResponseT] | None = None,
        request_settings: RequestSettings | None = None,
    ) -> ResponseT:
        self._ensure_idempotency_key(request)

        def send_once() -> ResponseT:
            transport = self._get_client()
            http_request = self._build_request(
                transport,
                method,
                path,
                url_params=url_params,
                request=request,
                payload_key=payload_key,
                request_settings=request_settings,
            )
            logger.debug("%s %s", method, http_request.url)
            return self._handle_response(transport.send(http_request), response_model)

        try:
            return Retrying(**self._retry_kwargs(request_settings))(send_once)
        except InvalidStateException as exc:
            conflicting_id = self._conflicting_id(exc, fetch_by_id)
            if conflicting_id is None:
                raise
            return fetch_by_id(conflicting_id)

    async def aexecute(
        self,
        method: Method,
        path: str,
        *,
        response_model: type[ResponseT],
        url_params: dict[str, Any] | None = None,
        request: BaseModel | None = None,
        payload_key: str | None = None,
        fetch_by_id: Callable[[str], Awaitable[ResponseT]] | None = None,
        request_settings: RequestSettings | None = None,
    ) -> ResponseT:
        self._ensure_idempotency_key(request)

        async def send_once() -> ResponseT:
            transport = self._get_async_client()
            http_request = self._build_request(
                transport,
                method,
                path,
                url_params=url_params,
                request=request,
                payload_key=payload_key,
                request_settings=request_settings,
            )
            logger.debug("%s %s", method, http_request.url)
            return self._handle_response(await transport.send(http_request), response_model)

        try:
            return await AsyncRetrying(**self._retry_kwargs(request_settings))(send_once)
        except InvalidStateException as exc:
            conflicting_id = self._conflicting_id(exc, fetch_by_id)
            if conflicting_id is None:
                raise
            result = fetch_by_id(conflicting_id)
            if inspect.isawaitable(result):
                result = await result
            return result
