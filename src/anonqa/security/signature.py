"""Slack request signature verification (HMAC-SHA256 with a replay window).

Slack signs every request with the app's signing secret.
See: https://api.slack.com/authentication/verifying-requests-from-slack
"""

from __future__ import annotations

import hashlib
import hmac
import time
from collections.abc import Callable

SIGNATURE_VERSION = "v0"
REPLAY_WINDOW_SECONDS = 300

TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_HEADER = "X-Slack-Signature"


def _as_bytes(value: bytes | str) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_signature(timestamp: int | str, raw_body: bytes | str, signing_secret: str) -> str:
    """Render the expected ``v0=<hex>`` signature for a timestamp and raw body."""
    base_string = f"{SIGNATURE_VERSION}:{timestamp}:".encode("utf-8") + _as_bytes(raw_body)
    digest = hmac.new(_as_bytes(signing_secret), base_string, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def verify_signature(
    timestamp: int | str | None,
    raw_body: bytes | str | None,
    signature: str | None,
    signing_secret: str | None,
    now: float,
) -> bool:
    """Return True if ``signature`` is a fresh, valid Slack signature.

    Args:
        timestamp: Value of the X-Slack-Request-Timestamp header.
        raw_body: Request body exactly as received, before any parsing.
        signature: Value of the X-Slack-Signature header.
        signing_secret: Shared signing secret.
        now: Current wall-clock time in seconds since epoch.

    Returns:
        False for stale timestamps, bad signatures and malformed input.
        Never raises.
    """
    if not signing_secret or not signature or timestamp is None:
        return False
    try:
        if abs(now - int(timestamp)) > REPLAY_WINDOW_SECONDS:
            return False
        expected = compute_signature(timestamp, raw_body or b"", signing_secret)
        return hmac.compare_digest(expected.encode("utf-8"), _as_bytes(signature))
    except Exception:
        # Fail closed: malformed headers or body never abort the request pipeline
        return False


class SignatureVerifier:
    """Verifies Slack signatures with an injected secret and clock.

    Holds no mutable state, so a single instance is shared by all requests.
    """

    def __init__(self, signing_secret: str, clock: Callable[[], float] = time.time):
        self._signing_secret = signing_secret
        self._clock = clock

    @property
    def configured(self) -> bool:
        return bool(self._signing_secret)

    def sign(self, timestamp: int | str, raw_body: bytes | str) -> str:
        """Compute the signature Slack would send for this request."""
        return compute_signature(timestamp, raw_body, self._signing_secret)

    def verify(
        self,
        timestamp: int | str | None,
        raw_body: bytes | str | None,
        signature: str | None,
    ) -> bool:
        return verify_signature(
            timestamp,
            raw_body,
            signature,
            self._signing_secret,
            now=self._clock(),
        )
