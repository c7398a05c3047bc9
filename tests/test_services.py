"""Tests for the resource services.

Tests cover:
- Paging through list endpoints with all/aall/all_pages
- Required filters checked before any request is sent
- Endpoint paths and payload keys for actions
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

import json
import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from gocardless_client import GoCardlessClient, InternalException, MisconfiguredRequestError, Page, iterate_all
from gocardless_client.resources.mandate import Mandate
from gocardless_client.services.billing_requests import (
    BillingRequestChooseCurrencyRequest,
    BillingRequestCreateRequest,
    BillingRequestCreatePaymentRequest,
)
from gocardless_client.services.blocks import BlockCreateRequest
from gocardless_client.services.instalment_schedules import (
    DatedInstalment,
    InstalmentScheduleCreateLinks,
    InstalmentScheduleCreateWithDatesRequest,
)
from gocardless_client.services.mandates import MandateListRequest
from gocardless_client.services.outbound_payments import OutboundPaymentWithdrawRequest
from gocardless_client.services.verification_details import VerificationDetailListRequest


def paged_handler(
    resource: str, pages: dict[str | None, tuple[list[str], str | None]], seen: list[httpx.Request]
) -> Callable[[httpx.Request], httpx.Response]:
    """Serve `pages` keyed by the `after` query parameter."""

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        ids, after = pages[request.url.params.get("after")]
        return httpx.Response(
            200,
            json={
                resource: [{"id": id_} for id_ in ids],
                "meta": {"cursors": {"before": None, "after": after}, "limit": 2},
            },
        )

    return handler


PAGES: dict[str | None, tuple[list[str], str | None]] = {
    None: (["1", "2"], "2"),
    "2": (["3", "4"], "4"),
    "4": (["5"], None),
}


def sync_client(handler: Callable[[httpx.Request], httpx.Response]) -> GoCardlessClient:
    return GoCardlessClient(
        access_token="test-token",
        base_url="https://api.example.test",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def async_client(handler: Callable[[httpx.Request], httpx.Response]) -> GoCardlessClient:
    return GoCardlessClient(
        access_token="test-token",
        base_url="https://api.example.test",
        async_http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestListAll:
    """Following cursors through a real list endpoint."""

    def test_all_follows_cursors(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(paged_handler("mandates", PAGES, seen))

        ids = [m.id for m in client.mandates.all(MandateListRequest(limit=2))]

        assert ids == ["1", "2", "3", "4", "5"]
        assert [r.url.params.get("after") for r in seen] == [None, "2", "4"]
        assert all(r.url.params["limit"] == "2" for r in seen)

    def test_all_does_not_touch_caller_request(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(paged_handler("mandates", PAGES, seen))
        request = MandateListRequest(limit=2)

        list(client.mandates.all(request))
        assert request.after is None

    def test_all_is_lazy(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(paged_handler("payouts", PAGES, seen))

        items = client.payouts.all()
        assert seen == []
        assert next(items).id == "1"
        assert len(seen) == 1

    @pytest.mark.asyncio
    async def test_aall_follows_cursors(self) -> None:
        seen: list[httpx.Request] = []
        client = async_client(paged_handler("events", PAGES, seen))

        async with client:
            ids = [e.id async for e in client.events.aall()]
        assert ids == ["1", "2", "3", "4", "5"]

    @pytest.mark.asyncio
    async def test_all_pages_yields_page_lists(self) -> None:
        seen: list[httpx.Request] = []
        client = async_client(paged_handler("creditors", PAGES, seen))

        async with client:
            pages = [[c.id for c in page] async for page in client.creditors.all_pages()]
        assert pages == [["1", "2"], ["3", "4"], ["5"]]

    def test_api_error_mid_iteration_stops_it(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("after") == "2":
                return httpx.Response(
                    500,
                    json={"error": {"type": "gocardless", "code": 500, "message": "oops", "errors": []}},
                )
            return httpx.Response(
                200, json={"blocks": [{"id": "1"}, {"id": "2"}], "meta": {"cursors": {"after": "2"}}}
            )

        client = sync_client(handler)
        got: list[str | None] = []
        with pytest.raises(InternalException, match="oops"):
            for block in client.blocks.all():
                got.append(block.id)
        assert got == ["1", "2"]


class TestVerificationDetails:
    def test_list_requires_creditor(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        client = sync_client(handler)
        with pytest.raises(MisconfiguredRequestError):
            client.verification_details.list()

    def test_all_requires_creditor_before_iteration(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        client = sync_client(handler)
        with pytest.raises(MisconfiguredRequestError):
            client.verification_details.all(VerificationDetailListRequest())
        with pytest.raises(MisconfiguredRequestError):
            client.verification_details.aall()

    def test_all_with_creditor(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(paged_handler("verification_details", PAGES, seen))

        items = list(client.verification_details.all(VerificationDetailListRequest(creditor="CR1")))
        assert len(items) == 5
        assert all(r.url.params["creditor"] == "CR1" for r in seen)


class TestEndpoints:
    @staticmethod
    def _recorder(resource: str, seen: list[httpx.Request]) -> Callable[[httpx.Request], httpx.Response]:
        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={resource: {"id": "X1"}})

        return handler

    @staticmethod
    def _body(request: httpx.Request) -> dict[str, Any]:
        return json.loads(request.content)

    def test_block_create_and_disable(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(self._recorder("blocks", seen))

        client.blocks.create(BlockCreateRequest(block_type="email", resource_reference="a@example.com"))
        client.blocks.disable("BLC1")

        assert seen[0].url.path == "/blocks"
        assert self._body(seen[0]) == {
            "blocks": {"block_type": "email", "resource_reference": "a@example.com"}
        }
        assert seen[1].url.path == "/blocks/BLC1/actions/disable"
        assert self._body(seen[1]) == {"data": {}}

    def test_instalment_schedule_with_dates(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(self._recorder("instalment_schedules", seen))

        result = client.instalment_schedules.create_with_dates(
            InstalmentScheduleCreateWithDatesRequest(
                currency="GBP",
                name="Bike",
                total_amount=300,
                instalments=[
                    DatedInstalment(amount=100, charge_date="2024-06-01"),
                    DatedInstalment(amount=200, charge_date="2024-07-01"),
                ],
                links=InstalmentScheduleCreateLinks(mandate="MD1"),
            )
        )

        assert result.instalment_schedule is not None
        assert "Idempotency-Key" in seen[0].headers
        body = self._body(seen[0])["instalment_schedules"]
        assert body["instalments"][1] == {"amount": 200, "charge_date": "2024-07-01"}
        assert body["links"] == {"mandate": "MD1"}

    def test_outbound_payment_withdraw_is_not_idempotent(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(self._recorder("outbound_payments", seen))

        client.outbound_payments.withdraw(OutboundPaymentWithdrawRequest(amount=500, scheme="faster_payments"))

        assert seen[0].url.path == "/outbound_payments/withdrawal"
        assert "Idempotency-Key" not in seen[0].headers
        assert self._body(seen[0]) == {"data": {"amount": 500, "scheme": "faster_payments"}}

    def test_billing_request_flow(self) -> None:
        seen: list[httpx.Request] = []
        client = sync_client(self._recorder("billing_requests", seen))

        client.billing_requests.create(
            BillingRequestCreateRequest(
                payment_request=BillingRequestCreatePaymentRequest(amount=1000, currency="GBP")
            )
        )
        client.billing_requests.choose_currency(
            "BRQ1", BillingRequestChooseCurrencyRequest(currency="EUR")
        )
        client.billing_requests.fulfil("BRQ1")

        assert [r.url.path for r in seen] == [
            "/billing_requests",
            "/billing_requests/BRQ1/actions/choose_currency",
            "/billing_requests/BRQ1/actions/fulfil",
        ]
        assert self._body(seen[0]) == {
            "billing_requests": {"payment_request": {"amount": 1000, "currency": "GBP"}}
        }
        assert self._body(seen[1]) == {"data": {"currency": "EUR"}}

    @pytest.mark.asyncio
    async def test_async_action(self) -> None:
        seen: list[httpx.Request] = []
        client = async_client(self._recorder("mandates", seen))

        async with client:
            result = await client.mandates.areinstate("MD1")
        assert result.mandate is not None and result.mandate.id == "X1"
        assert seen[0].url.path == "/mandates/MD1/actions/reinstate"


class _MandatePagesHandler(BaseHTTPRequestHandler):
    """Two pages of mandates over a real socket, keyed by `after`."""

    protocol_version = "HTTP/1.1"
    pages: dict[str | None, tuple[list[str], str | None]] = {
        None: (["MD1", "MD2"], "MD2"),
        "MD2": (["MD3"], None),
    }

    def do_GET(self) -> None:  # noqa: N802
        query = parse_qs(urlsplit(self.path).query)
        ids, after = self.pages[query.get("after", [None])[0]]
        body = json.dumps(
            {"mandates": [{"id": id_} for id_ in ids], "meta": {"cursors": {"after": after}}}
        ).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        pass


@pytest.fixture
def mandate_server() -> Iterator[str]:
    server = ThreadingHTTPServer(("127.0.0.1", 0), _MandatePagesHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


class TestBlockingIterationOverAsyncClient:
    def test_pooled_connections_survive_across_pages(self, mandate_server: str) -> None:
        client = GoCardlessClient(access_token="test-token", base_url=mandate_server)

        async def fetch(request: MandateListRequest) -> Page[Mandate]:
            return (await client.mandates.alist(request)).page()

        ids = [m.id for m in iterate_all(MandateListRequest(), fetch)]
        assert ids == ["MD1", "MD2", "MD3"]
