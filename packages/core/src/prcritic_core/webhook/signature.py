"""Webhook signature verification (GitHub's X-Hub-Signature-256 scheme)."""

from __future__ import annotations

import hashlib
import hmac

from prcritic_core.errors import AuthError

SIGNATURE_PREFIX = "sha256="


def compute_signature(body: bytes | str, secret: str) -> str:
    """Return the ``sha256=<hex>`` token GitHub would send for this body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), msg=body, digestmod=hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(body: bytes | str, signature: str, secret: str) -> bool:
    """Check ``signature`` against the HMAC of the raw, untouched body.

    The body must be the exact bytes received: hashing a re-encoded or
    JSON round-tripped payload will never match.
    """
    expected = compute_signature(body, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def require_signature(body: bytes | str, signature: str | None, secret: str | None) -> None:
    """Raise AuthError unless a secret is configured and the signature is present and valid.

    An empty secret is refused outright: HMAC with an empty key is computable
    by anyone.
    """
    if not secret:
        raise AuthError("Webhook secret not configured")
    if not signature:
        raise AuthError("No signature provided")
    if not verify_signature(body, signature, secret):
        raise AuthError("Invalid signature")
