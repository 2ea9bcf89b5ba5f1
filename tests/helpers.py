"""Helpers for building signed slash-command requests."""

import time
from urllib.parse import urlencode

from anonqa.errors.exceptions import SlackAPIError
from anonqa.security.signature import SIGNATURE_HEADER, TIMESTAMP_HEADER, compute_signature

SIGNING_SECRET = "test-signing-secret"
TARGET_CHANNEL = "C0ANONQA"


class FakeSlackClient:
    """Records posted messages instead of calling the Slack Web API."""

    def __init__(self, error: SlackAPIError | None = None):
        self.error = error
        self.posted: list[dict] = []

    async def post_message(self, channel: str, text: str) -> dict:
        if self.error is not None:
            raise self.error
        self.posted.append({"channel": channel, "text": text})
        return {"ok": True, "channel": channel, "ts": "1700000000.000100"}


def signed_headers(
    body: bytes,
    secret: str = SIGNING_SECRET,
    timestamp: int | None = None,
    content_type: str = "application/x-www-form-urlencoded",
) -> dict[str, str]:
    """Headers Slack would send for ``body``."""
    ts = int(time.time()) if timestamp is None else timestamp
    return {
        "Content-Type": content_type,
        TIMESTAMP_HEADER: str(ts),
        SIGNATURE_HEADER: compute_signature(ts, body, secret),
    }


def command_body(text: str, **extra: str) -> bytes:
    fields = {
        "command": "/anon-qa",
        "text": text,
        "user_id": "U123SECRET",
        "team_id": "T123",
        "channel_id": "C999",
        "response_url": "https://hooks.slack.com/commands/T123/1/abc",
    }
    fields.update(extra)
    return urlencode(fields).encode("utf-8")
