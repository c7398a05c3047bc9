from __future__ import annotations

import json
import logging
from contextlib import aclosing
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from gocardless_client.client import GoCardlessClient
from gocardless_client.config import Settings
from gocardless_client.errors import GoCardlessError, MisconfiguredRequestError
from gocardless_client.services.base import ListRequest
from gocardless_client.services.billing_requests import BillingRequestListRequest
from gocardless_client.services.blocks import BlockListRequest
from gocardless_client.services.creditors import CreditorListRequest
from gocardless_client.services.events import EventListRequest
from gocardless_client.services.instalment_schedules import InstalmentScheduleListRequest
from gocardless_client.services.mandates import MandateListRequest
from gocardless_client.services.outbound_payments import OutboundPaymentListRequest
from gocardless_client.services.payouts import PayoutListRequest
from gocardless_client.services.verification_details import VerificationDetailListRequest
from gocardless_client.webhooks import parse_webhook

logger = logging.getLogger("gocardless_client")

LIST_REQUESTS: dict[str, type[ListRequest]] = {
    "billing_requests": BillingRequestListRequest,
    "blocks": BlockListRequest,
    "creditors": CreditorListRequest,
    "events": EventListRequest,
    "instalment_schedules": InstalmentScheduleListRequest,
    "mandates": MandateListRequest,
    "outbound_payments": OutboundPaymentListRequest,
    "payouts": PayoutListRequest,
    "verification_details": VerificationDetailListRequest,
}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def parse_filters(pairs: Sequence[str]) -> dict[str, str]:
    filters: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise MisconfiguredRequestError(f"Filter must look like key=value, got {pair!r}")
        filters[key.strip()] = value.strip()
    return filters


async def list_resources(
    client: GoCardlessClient,
    resource: str,
    *,
    filters: dict[str, str] | None = None,
    page_size: int | None = None,
    max_items: int | None = None,
) -> int:
    """Print every item of `resource` as one JSON line, following cursors until exhausted."""
    request = LIST_REQUESTS[resource].model_validate({**(filters or {}), "limit": page_size})
    service = getattr(client, resource)

    count = 0
    async with aclosing(service.aall(request)) as items:
        async for item in items:
            print(json.dumps(item.model_dump(mode="json", exclude_none=True)))
            count += 1
            if max_items is not None and count >= max_items:
                break
    logger.info("Listed %d %s", count, resource)
    return count


def show_webhook(settings: Settings, body_path: str, signature: str) -> int:
    if not settings.webhook_secret:
        raise MisconfiguredRequestError("GOCARDLESS_WEBHOOK_SECRET is not set")
    body = Path(body_path).read_bytes()
    events = parse_webhook(body, settings.webhook_secret, signature)
    for event in events:
        print(f"{event.id} {event.resource_type} {event.action}")
    return len(events)


async def run_app(
    *,
    mode: str,
    resource: str | None = None,
    filters: Sequence[str] = (),
    page_size: int | None = None,
    max_items: int | None = None,
    webhook_file: str | None = None,
    signature: str | None = None,
) -> int:
    settings = Settings.load()
    configure_logging(settings)

    try:
        if mode == "webhook":
            show_webhook(settings, webhook_file or "", signature or "")
            return 0

        client = GoCardlessClient.from_settings(settings)
        logger.info("GoCardless env=%s base_url=%s", settings.environment, client.base_url)
        async with client:
            await list_resources(
                client,
                resource or "",
                filters=parse_filters(filters),
                page_size=page_size,
                max_items=max_items,
            )
        return 0
    except (GoCardlessError, ValidationError) as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
