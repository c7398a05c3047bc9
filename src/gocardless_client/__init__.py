__version__ = "1.0.0"

from gocardless_client.client import GoCardlessClient  # noqa: E402
from gocardless_client.errors import (  # noqa: E402
    ApiErrorType,
    ApiException,
    AuthenticationFailedException,
    GoCardlessError,
    InsufficientPermissionsException,
    InternalException,
    InvalidApiUsageException,
    InvalidSignatureError,
    InvalidStateException,
    MisconfiguredRequestError,
    RateLimitReachedException,
    ValidationFailedException,
)
from gocardless_client.pagination import Page, aiterate_all, iterate_all, iterate_all_paged  # noqa: E402
from gocardless_client.request_settings import RequestSettings, RequestSigningSettings  # noqa: E402
from gocardless_client.webhooks import parse_webhook  # noqa: E402

__all__ = [
    "ApiErrorType",
    "ApiException",
    "AuthenticationFailedException",
    "GoCardlessClient",
    "GoCardlessError",
    "InsufficientPermissionsException",
    "InternalException",
    "InvalidApiUsageException",
    "InvalidSignatureError",
    "InvalidStateException",
    "MisconfiguredRequestError",
    "Page",
    "RateLimitReachedException",
    "RequestSettings",
    "RequestSigningSettings",
    "ValidationFailedException",
    "aiterate_all",
    "iterate_all",
    "iterate_all_paged",
    "parse_webhook",
]
