"""Verification of signed webhook payloads."""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from typing import Optional, Union

log = logging.getLogger(__name__)

_PREFIX_LEN = len("sha1=")


class SignedPayloadError(Exception):
    """The payload signature is missing, malformed or wrong."""

    def __init__(self) -> None:
        super().__init__("failed to validate payload")


def assert_signed(
    signature: str,
    payload: Union[bytes, str],
    secret: Optional[str] = None,
) -> None:
    """Check an HMAC-SHA1 ``sha1=<hex>`` signature of ``payload``.

    The secret falls back to the ``GITHUB_WEBHOOK_SECRET`` environment variable.
    Raises ``SignedPayloadError`` when the signature does not match.
    """
    if len(signature) < _PREFIX_LEN:
        raise SignedPayloadError()
    encoded = signature[_PREFIX_LEN:]
    try:
        expected = bytes.fromhex(encoded)
    except ValueError as exc:
        log.debug("hex decode failed for %r: %s", encoded, exc)
        raise SignedPayloadError() from exc

    if secret is None:
        secret = os.environ.get("GITHUB_WEBHOOK_SECRET")
        if secret is None:
            raise RuntimeError("Missing GITHUB_WEBHOOK_SECRET")

    if isinstance(payload, str):
        payload = payload.encode()
    digest = hmac.new(secret.encode(), payload, hashlib.sha1).digest()
    if not hmac.compare_digest(digest, expected):
        raise SignedPayloadError()