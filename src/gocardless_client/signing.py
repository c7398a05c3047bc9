from __future__ import annotations

import base64
import datetime
import hashlib
import re
import uuid
from dataclasses import dataclass

import httpx
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from gocardless_client.errors import InvalidSignatureError
from gocardless_client.request_settings import RequestSigningSettings

DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"


def load_ec_private_key(pem: str | bytes) -> ec.EllipticCurvePrivateKey:
    raw = pem.encode("utf-8") if isinstance(pem, str) else pem

    # Keys pasted from the dashboard sometimes carry extra text around the PEM block.
    m = re.search(
        rb"-----BEGIN ([A-Z ]+)-----[\s\S]+?-----END \1-----",
        raw,
    )
    key = serialization.load_pem_private_key(m.group(0) if m else raw, password=None)
    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise ValueError("Request signing requires an EC private key")
    return key


def read_private_key_pem(path: str) -> str:
    with open(path, "r", encoding="utf-8") as key_file:
        return key_file.read()


def hash_with_sha256(value: str | bytes) -> str:
    raw = value.encode("utf-8") if isinstance(value, str) else value
    return base64.b64encode(hashlib.sha256(raw).digest()).decode("ascii")


def signature_params(*, key_id: str, created: str, nonce: str, include_content: bool) -> str:
    components = '"@method" "@authority" "@request-target"'
    if include_content:
        components += ' "content-digest" "content-type" "content-length"'
    return f'({components});keyid="{key_id}";created={created};nonce="{nonce}"'


@dataclass(frozen=True)
class RequestSignature:
    signature_base: str
    signature: str
    content_digest: str | None

    @property
    def gc_signature(self) -> str:
        return f"sig-1=:{self.signature}:"

    @property
    def content_digest_header(self) -> str | None:
        if self.content_digest is None:
            return None
        return f"sha256=:{self.content_digest}:"


def create_request_signature(
    private_key_pem: str,
    *,
    method: str,
    host: str,
    request_target: str,
    key_id: str,
    content: bytes | None = None,
    content_type: str = DEFAULT_CONTENT_TYPE,
    created: str | None = None,
    nonce: str | None = None,
) -> tuple[RequestSignature, str]:
    """Build and sign the signature base for one request.

    Returns the signature and the matching `Gc-Signature-Input` header value.
    `created` is seconds since the epoch in UTC.
    """
    created = created or str(int(datetime.datetime.now(datetime.timezone.utc).timestamp()))
    nonce = nonce or str(uuid.uuid4())

    digest = hash_with_sha256(content) if content else None
    params = signature_params(
        key_id=key_id, created=created, nonce=nonce, include_content=digest is not None
    )

    lines = [
        f'"@method": {method.upper()}',
        f'"@authority": {host}',
        f'"@request-target": {request_target}',
    ]
    if digest is not None:
        lines += [
            f'"content-digest": sha256=:{digest}:',
            f'"content-type": {content_type}',
            f'"content-length": {len(content or b"")}',
        ]
    lines.append(f'"@signature-params": {params}')
    signature_base = "\n".join(lines)

    private_key = load_ec_private_key(private_key_pem)
    raw_sig = private_key.sign(signature_base.encode("utf-8"), ec.ECDSA(hashes.SHA512()))
    sig = RequestSignature(
        signature_base=signature_base,
        signature=base64.b64encode(raw_sig).decode("ascii"),
        content_digest=digest,
    )
    return sig, f"sig-1={params}"


def verify_signature(public_key_pem: str, signature: str, signature_base: str) -> None:
    public_key = serialization.load_pem_public_key(public_key_pem.encode("utf-8"))
    if not isinstance(public_key, ec.EllipticCurvePublicKey):
        raise ValueError("Signature verification requires an EC public key")
    try:
        public_key.verify(
            base64.b64decode(signature),
            signature_base.encode("utf-8"),
            ec.ECDSA(hashes.SHA512()),
        )
    except InvalidSignature:
        raise InvalidSignatureError("Signature verification failed") from None


def sign_request(
    request: httpx.Request,
    settings: RequestSigningSettings,
    *,
    created: str | None = None,
    nonce: str | None = None,
) -> None:
    content = request.content or None
    content_type = request.headers.get("Content-Type", DEFAULT_CONTENT_TYPE)
    target = request.url.raw_path.decode("ascii")

    sig, sig_input = create_request_signature(
        settings.private_key_pem,
        method=request.method,
        host=request.url.host,
        request_target=target,
        key_id=settings.public_key_id,
        content=content,
        content_type=content_type,
        created=created,
        nonce=nonce,
    )
    request.headers["Gc-Signature"] = sig.gc_signature
    request.headers["Gc-Signature-Input"] = sig_input
    if sig.content_digest_header is not None:
        request.headers["Content-Digest"] = sig.content_digest_header
