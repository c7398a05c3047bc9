from __future__ import annotations

import hashlib
import hmac
import logging

from pydantic import BaseModel, Field

from gocardless_client.errors import InvalidSignatureError
from gocardless_client.resources.event import Event

logger = logging.getLogger(__name__)


class WebhookPayload(BaseModel):
    events: list[Event] = Field(default_factory=list)


def compute_signature(body: str | bytes, webhook_secret: str) -> str:
    raw = body.encode("utf-8") if isinstance(body, str) else body
    return hmac.new(webhook_secret.encode("utf-8"), raw, hashlib.sha256).hexdigest()


def verify_webhook_signature(body: str | bytes, webhook_secret: str, signature_header: str) -> None:
    expected = compute_signature(body, webhook_secret)
    received = (signature_header or "").strip().lower().encode("utf-8")
    if not hmac.compare_digest(expected.encode("ascii"), received):
        raise InvalidSignatureError("Webhook signature does not match the request body")


def parse_webhook(body: str | bytes, webhook_secret: str, signature_header: str) -> list[Event]:
    """Verify a webhook's `Webhook-Signature` header and return its events.

    The body must be the raw request body exactly as received; re-serialised
    JSON will not match the signature.
    """
    verify_webhook_signature(body, webhook_secret, signature_header)
    payload = WebhookPayload.model_validate_json(body)
    logger.debug("Parsed webhook with %d events", len(payload.events))
    return payload.events
