"""Slack slash command handler that relays ``/anon-qa`` messages anonymously."""

import json
import logging
from urllib.parse import parse_qs

from fastapi import APIRouter, Request

from anonqa.dependencies import CommentaryDep, SettingsDep, SlackClientDep, VerifierDep
from anonqa.errors.exceptions import AuthenticationError, SlackAPIError, ValidationError
from anonqa.models.slack import SlackResponse, SlashCommand
from anonqa.security.signature import SIGNATURE_HEADER, TIMESTAMP_HEADER
from anonqa.services.relay import (
    MSG_MISSING_TEXT,
    MSG_NOT_CONFIGURED,
    MSG_POST_FAILED,
    MSG_SENT,
    ephemeral,
    format_relay_message,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Slack"])


def _parse_command(body: bytes, content_type: str) -> SlashCommand:
    """Decode a verified slash command body (form-encoded, or JSON)."""
    try:
        text_body = body.decode("utf-8")
        if "application/json" in content_type.lower():
            data = json.loads(text_body) if text_body else {}
            if not isinstance(data, dict):
                raise ValueError("JSON body must be an object")
        else:
            parsed = parse_qs(text_body, keep_blank_values=True)
            data = {key: values[0] for key, values in parsed.items() if values}
        return SlashCommand.model_validate(data)
    except ValueError as exc:
        raise ValidationError("Invalid slash command payload") from exc


@router.post("/slack/commands/anon-qa", response_model=SlackResponse)
async def handle_anon_qa(
    request: Request,
    settings: SettingsDep,
    verifier: VerifierDep,
    slack_client: SlackClientDep,
    commentary: CommentaryDep,
) -> SlackResponse:
    """Relay the submitted text to the target channel without the sender's identity.

    The raw body is read before any decoding so the signature is checked over
    the exact bytes Slack signed.
    """
    body = await request.body()

    if not verifier.verify(
        request.headers.get(TIMESTAMP_HEADER),
        body,
        request.headers.get(SIGNATURE_HEADER),
    ):
        raise AuthenticationError()

    command = _parse_command(body, request.headers.get("content-type", ""))

    if not command.has_text:
        return ephemeral(MSG_MISSING_TEXT)

    if slack_client is None or not settings.slack_target_channel:
        logger.error("Missing Slack bot token or target channel")
        return ephemeral(MSG_NOT_CONFIGURED)

    ai_commentary = await commentary.get_commentary(command.text)
    message = format_relay_message(command.text, ai_commentary)

    try:
        await slack_client.post_message(settings.slack_target_channel, message)
    except SlackAPIError as exc:
        logger.error("Error posting to Slack: %s", exc.slack_error or exc.message)
        return ephemeral(MSG_POST_FAILED)

    logger.info("Anonymous message relayed (commentary=%s)", ai_commentary is not None)
    return ephemeral(MSG_SENT)
