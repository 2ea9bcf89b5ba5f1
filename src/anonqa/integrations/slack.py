"""Slack Web API client for posting relayed messages with the bot token."""

from __future__ import annotations

import logging

import httpx

from anonqa.errors.exceptions import SlackAPIError

logger = logging.getLogger(__name__)


class SlackClient:
    """Minimal async client for ``chat.postMessage``.

    Unlike incoming webhooks, the Web API answers HTTP 200 even for most
    failures and reports them as ``{"ok": false, "error": "..."}``, so the
    payload is checked as well as the status code.
    """

    def __init__(
        self,
        bot_token: str,
        api_base_url: str = "https://slack.com/api",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._bot_token = bot_token
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._bot_token}",
            "Content-Type": "application/json; charset=utf-8",
        }

    async def post_message(self, channel: str, text: str) -> dict:
        """Post ``text`` to ``channel`` with link and media unfurling disabled.

        Returns:
            The decoded Slack response payload.

        Raises:
            SlackAPIError: On transport failure, non-2xx status or ``ok: false``.
        """
        payload = {
            "channel": channel,
            "text": text,
            "unfurl_links": False,
            "unfurl_media": False,
        }
        url = f"{self._api_base_url}/chat.postMessage"

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error("Slack chat.postMessage request failed: %s", exc)
            raise SlackAPIError(f"Slack request failed: {exc}") from exc

        if response.status_code >= 300:
            logger.warning("Slack chat.postMessage returned HTTP %s", response.status_code)
            raise SlackAPIError(f"Slack returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise SlackAPIError("Slack returned a non-JSON response") from exc

        if not isinstance(data, dict):
            logger.warning("Slack chat.postMessage returned a %s payload", type(data).__name__)
            raise SlackAPIError("Slack returned an unexpected payload")

        if not data.get("ok", False):
            slack_error = data.get("error", "unknown_error")
            logger.warning("Slack chat.postMessage rejected: %s", slack_error)
            raise SlackAPIError("Slack rejected the message", slack_error=slack_error)

        logger.info("Slack message posted (channel=%s, ts=%s)", channel, data.get("ts"))
        return data
