from __future__ import annotations

from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict, Field

GENERIC_ERROR_MESSAGE = (
    "Something went wrong with this request. Please check the ResponseMessage property."
)


class ApiErrorType(str, Enum):
    AUTHENTICATION_FAILED = "authentication_failed"
    GOCARDLESS = "gocardless"
    INVALID_API_USAGE = "invalid_api_usage"
    INVALID_STATE = "invalid_state"
    VALIDATION_FAILED = "validation_failed"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    RATE_LIMIT_REACHED = "rate_limit_reached"


# Status codes whose error type is fixed regardless of what the body says.
STATUS_ERROR_TYPES: dict[int, ApiErrorType] = {
    401: ApiErrorType.AUTHENTICATION_FAILED,
    403: ApiErrorType.INSUFFICIENT_PERMISSIONS,
    429: ApiErrorType.RATE_LIMIT_REACHED,
}


class ErrorDetail(BaseModel):
    """A single entry of `error.errors`.

    Plain errors carry `reason`/`message`/`links`; validation errors carry
    `field`/`message`/`request_pointer`.
    """

    model_config = ConfigDict(extra="allow")

    reason: str | None = None
    message: str | None = None
    links: dict[str, str] | None = None
    field: str | None = None
    request_pointer: str | None = None


class ApiError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None
    documentation_url: str | None = None
    type: ApiErrorType = ApiErrorType.GOCARDLESS
    request_id: str | None = None
    code: int = 0
    errors: list[ErrorDetail] = Field(default_factory=list)


class ApiErrorResponse(BaseModel):
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    error: ApiError

    response: httpx.Response | None = Field(default=None, exclude=True)


class GoCardlessError(Exception):
    """Base class for everything this library raises on purpose."""


class MisconfiguredRequestError(GoCardlessError, ValueError):
    """A required identity or filter was missing; raised before any I/O."""


class InvalidSignatureError(GoCardlessError):
    """A webhook or request signature did not verify."""


class ApiException(GoCardlessError):
    def __init__(self, error_response: ApiErrorResponse) -> None:
        super().__init__(error_response.error.message or GENERIC_ERROR_MESSAGE)
        self.error_response = error_response
        self.response = error_response.response

    @property
    def type(self) -> ApiErrorType:
        return self.error_response.error.type

    @property
    def code(self) -> int:
        return self.error_response.error.code

    @property
    def request_id(self) -> str | None:
        return self.error_response.error.request_id

    @property
    def documentation_url(self) -> str | None:
        return self.error_response.error.documentation_url

    @property
    def errors(self) -> list[ErrorDetail]:
        return self.error_response.error.errors

    @property
    def message(self) -> str:
        return str(self)


class InternalException(ApiException):
    pass


class InvalidApiUsageException(ApiException):
    pass


class AuthenticationFailedException(InvalidApiUsageException):
    pass


class InsufficientPermissionsException(InvalidApiUsageException):
    pass


class RateLimitReachedException(InvalidApiUsageException):
    pass


class InvalidStateException(ApiException):
    pass


class ValidationFailedException(ApiException):
    pass


_EXCEPTION_BY_TYPE: dict[ApiErrorType, type[ApiException]] = {
    ApiErrorType.GOCARDLESS: InternalException,
    ApiErrorType.INVALID_API_USAGE: InvalidApiUsageException,
    ApiErrorType.AUTHENTICATION_FAILED: AuthenticationFailedException,
    ApiErrorType.INSUFFICIENT_PERMISSIONS: InsufficientPermissionsException,
    ApiErrorType.RATE_LIMIT_REACHED: RateLimitReachedException,
    ApiErrorType.INVALID_STATE: InvalidStateException,
    ApiErrorType.VALIDATION_FAILED: ValidationFailedException,
}


def to_exception(error_response: ApiErrorResponse) -> ApiException:
    return _EXCEPTION_BY_TYPE[error_response.error.type](error_response)


def generic_exception(response: httpx.Response) -> ApiException:
    """Exception for error bodies that are not the API's JSON error shape."""
    return ApiException(
        ApiErrorResponse(
            error=ApiError(
                code=response.status_code,
                type=ApiErrorType.GOCARDLESS,
                message=GENERIC_ERROR_MESSAGE,
            ),
            response=response,
        )
    )


def is_idempotency_conflict(exc: ApiException) -> str | None:
    """Return the conflicting resource id if `exc` is an idempotent creation conflict."""
    if not isinstance(exc, InvalidStateException) or not exc.errors:
        return None
    first = exc.errors[0]
    if first.reason != "idempotent_creation_conflict" or not first.links:
        return None
    return first.links.get("conflicting_resource_id")
