"""Formatting of relayed messages and the user-facing slash-command replies."""

from anonqa.models.slack import SlackResponse

MSG_MISSING_TEXT = "❌ Please provide a message. Usage: `/anon-qa Your message here`"
MSG_NOT_CONFIGURED = "❌ Bot is not properly configured. Please contact admin."
MSG_SENT = "✅ Your message has been sent anonymously."
MSG_POST_FAILED = "❌ Failed to post message. Please try again later."


def format_relay_message(text: str, commentary: str | None = None) -> str:
    """Build the channel message; commentary is appended when present."""
    message = f"\U0001f512 *Anonymous message:*\n\n{text}"
    if commentary:
        message += f"\n\n---\n\U0001f4ca *AI Commentary:*\n{commentary}"
    return message


def ephemeral(text: str) -> SlackResponse:
    return SlackResponse(response_type="ephemeral", text=text)
