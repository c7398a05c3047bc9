"""Tests for request signing (ECDSA P-256 over SHA-512)."""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from gocardless_client import GoCardlessClient, InvalidSignatureError, RequestSigningSettings
from gocardless_client.services.outbound_payments import OutboundPaymentCreateRequest
from gocardless_client.signing import (
    create_request_signature,
    hash_with_sha256,
    load_ec_private_key,
    sign_request,
    verify_signature,
)


@pytest.fixture(scope="module")
def key_pair() -> tuple[str, str]:
    private_key = ec.generate_private_key(ec.SECP256R1())
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")
    return private_pem, public_pem


class TestSignatureBase:
    def test_hash_with_sha256(self) -> None:
        assert hash_with_sha256("test content") == "auinVVUgn9bEQVfArtgBbnY/9DWhnPGG92hjFAFD/3I="

    def test_signature_input_without_body(self, key_pair: tuple[str, str]) -> None:
        private_pem, _ = key_pair
        sig, sig_input = create_request_signature(
            private_pem,
            method="get",
            host="api.example.test",
            request_target="/outbound_payments/OUT1",
            key_id="KEY1",
            created="1700000000",
            nonce="nonce-1",
        )
        assert sig_input == (
            'sig-1=("@method" "@authority" "@request-target");'
            'keyid="KEY1";created=1700000000;nonce="nonce-1"'
        )
        assert sig.content_digest is None
        assert sig.signature_base.splitlines() == [
            '"@method": GET',
            '"@authority": api.example.test',
            '"@request-target": /outbound_payments/OUT1',
            '"@signature-params": ("@method" "@authority" "@request-target");'
            'keyid="KEY1";created=1700000000;nonce="nonce-1"',
        ]

    def test_signature_base_with_body(self, key_pair: tuple[str, str]) -> None:
        private_pem, _ = key_pair
        sig, sig_input = create_request_signature(
            private_pem,
            method="POST",
            host="api.example.test",
            request_target="/outbound_payments",
            key_id="KEY1",
            content=b"test content",
            content_type="application/json",
            created="1700000000",
            nonce="nonce-1",
        )
        assert '"content-digest" "content-type" "content-length"' in sig_input
        assert sig.content_digest_header == "sha256=:auinVVUgn9bEQVfArtgBbnY/9DWhnPGG92hjFAFD/3I=:"
        lines = sig.signature_base.splitlines()
        assert lines[3] == '"content-digest": sha256=:auinVVUgn9bEQVfArtgBbnY/9DWhnPGG92hjFAFD/3I=:'
        assert lines[4] == '"content-type": application/json'
        assert lines[5] == '"content-length": 12'

    def test_gc_signature_format(self, key_pair: tuple[str, str]) -> None:
        private_pem, _ = key_pair
        sig, _ = create_request_signature(
            private_pem,
            method="GET",
            host="api.example.test",
            request_target="/",
            key_id="KEY1",
        )
        assert sig.gc_signature.startswith("sig-1=:")
        assert sig.gc_signature.endswith(":")
        assert "#" not in sig.gc_signature


class TestSignAndVerify:
    def test_signature_verifies_with_public_key(self, key_pair: tuple[str, str]) -> None:
        private_pem, public_pem = key_pair
        sig, _ = create_request_signature(
            private_pem,
            method="POST",
            host="api.example.test",
            request_target="/outbound_payments",
            key_id="KEY1",
            content=b'{"outbound_payments": {}}',
        )
        verify_signature(public_pem, sig.signature, sig.signature_base)

    def test_tampered_base_fails(self, key_pair: tuple[str, str]) -> None:
        private_pem, public_pem = key_pair
        sig, _ = create_request_signature(
            private_pem,
            method="POST",
            host="api.example.test",
            request_target="/outbound_payments",
            key_id="KEY1",
        )
        with pytest.raises(InvalidSignatureError):
            verify_signature(public_pem, sig.signature, sig.signature_base + "x")

    def test_rejects_non_ec_key(self) -> None:
        rsa_pem = rsa.generate_private_key(public_exponent=65537, key_size=2048).private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        with pytest.raises(ValueError, match="EC private key"):
            load_ec_private_key(rsa_pem)

    def test_pem_is_found_inside_surrounding_text(self, key_pair: tuple[str, str]) -> None:
        private_pem, _ = key_pair
        key = load_ec_private_key(f"key for sandbox:\n{private_pem}\n-- end of paste")
        assert isinstance(key, ec.EllipticCurvePrivateKey)

    def test_sign_request_sets_headers(self, key_pair: tuple[str, str]) -> None:
        private_pem, public_pem = key_pair
        settings = RequestSigningSettings(public_key_id="KEY1", private_key_pem=private_pem)
        request = httpx.Request(
            "POST",
            "https://api.example.test/outbound_payments",
            content=b"test content",
            headers={"Content-Type": "application/json"},
        )
        sign_request(request, settings, created="1700000000", nonce="nonce-1")

        assert request.headers["Content-Digest"] == "sha256=:auinVVUgn9bEQVfArtgBbnY/9DWhnPGG92hjFAFD/3I=:"
        assert request.headers["Gc-Signature-Input"].endswith('keyid="KEY1";created=1700000000;nonce="nonce-1"')

        # Rebuild the same base and check the header's signature against it.
        expected, _ = create_request_signature(
            private_pem,
            method="POST",
            host="api.example.test",
            request_target="/outbound_payments",
            key_id="KEY1",
            content=b"test content",
            content_type="application/json",
            created="1700000000",
            nonce="nonce-1",
        )
        signature = request.headers["Gc-Signature"].removeprefix("sig-1=:").removesuffix(":")
        verify_signature(public_pem, signature, expected.signature_base)

    def test_client_signs_outgoing_requests(self, key_pair: tuple[str, str]) -> None:
        private_pem, _ = key_pair
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"outbound_payments": {"id": "OUT1", "amount": 100}})

        client = GoCardlessClient(
            access_token="test-token",
            base_url="https://api.example.test",
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
            request_signing=RequestSigningSettings(public_key_id="KEY1", private_key_pem=private_pem),
        )
        result = client.outbound_payments.create(OutboundPaymentCreateRequest(amount=100, reference="R1"))

        assert result.outbound_payment is not None and result.outbound_payment.id == "OUT1"
        headers = seen[0].headers
        assert headers["Gc-Signature"].startswith("sig-1=:")
        assert 'keyid="KEY1"' in headers["Gc-Signature-Input"]
        assert headers["Content-Digest"].startswith("sha256=:")
