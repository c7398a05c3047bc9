"""Tests for webhook signature verification and parsing."""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

import json

import pytest

from gocardless_client import InvalidSignatureError, parse_webhook
from gocardless_client.resources.event import EventResourceType
from gocardless_client.webhooks import compute_signature

SECRET = "ElfJ-3tF9I_zutNVK2lBABQrw8kL5z_b"

BODY = json.dumps(
    {
        "events": [
            {
                "id": "EV123",
                "created_at": "2024-05-01T12:00:00.000Z",
                "action": "cancelled",
                "resource_type": "mandates",
                "links": {"mandate": "MD123"},
                "details": {
                    "origin": "bank",
                    "cause": "bank_account_disabled",
                    "description": "Customer's bank account closed",
                    "scheme": "bacs",
                    "reason_code": "ADDACS-B",
                },
                "metadata": {},
            },
            {
                "id": "EV456",
                "created_at": "2024-05-01T12:00:01.000Z",
                "action": "paid",
                "resource_type": "payouts",
                "links": {"payout": "PO123"},
                "details": {"origin": "gocardless", "cause": "payout_paid"},
            },
        ]
    }
)


class TestParseWebhook:
    def test_valid_signature_returns_events(self) -> None:
        signature = compute_signature(BODY, SECRET)
        events = parse_webhook(BODY, SECRET, signature)

        assert [e.id for e in events] == ["EV123", "EV456"]
        first = events[0]
        assert first.resource_type == EventResourceType.MANDATES
        assert first.links["mandate"] == "MD123"
        assert first.details.cause == "bank_account_disabled"
        assert first.details.reason_code == "ADDACS-B"

    def test_accepts_bytes_body_and_uppercase_header(self) -> None:
        signature = compute_signature(BODY, SECRET).upper()
        events = parse_webhook(BODY.encode("utf-8"), SECRET, f" {signature} ")
        assert len(events) == 2

    def test_wrong_signature_raises(self) -> None:
        with pytest.raises(InvalidSignatureError):
            parse_webhook(BODY, SECRET, compute_signature(BODY, "other-secret"))

    def test_modified_body_raises(self) -> None:
        signature = compute_signature(BODY, SECRET)
        with pytest.raises(InvalidSignatureError):
            parse_webhook(BODY.replace("EV123", "EV999"), SECRET, signature)

    def test_missing_header_raises(self) -> None:
        with pytest.raises(InvalidSignatureError):
            parse_webhook(BODY, SECRET, "")

    def test_non_ascii_header_is_rejected_not_crashed(self) -> None:
        with pytest.raises(InvalidSignatureError):
            parse_webhook(b'{"events": []}', SECRET, "café")
