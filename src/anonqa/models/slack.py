"""Slack slash-command payloads and responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


class SlashCommand(BaseModel):
    """Decoded body of a slash-command request.

    Slack sends many more fields (``token``, ``trigger_id``, ``api_app_id``...);
    they are ignored. Sender identity fields are kept only for completeness and
    are never forwarded to the target channel.
    """

    model_config = ConfigDict(extra="ignore")

    command: str = ""
    text: str = ""
    user_id: str | None = None
    team_id: str | None = None
    channel_id: str | None = None
    response_url: str | None = None

    @field_validator("command", "text", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @property
    def has_text(self) -> bool:
        return bool(self.text and self.text.strip())


class SlackResponse(BaseModel):
    """Immediate response to a slash command."""

    response_type: Literal["ephemeral", "in_channel"] = "ephemeral"
    text: str
