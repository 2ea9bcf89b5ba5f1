"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from anonqa.config import Settings
from anonqa.integrations.slack import SlackClient
from anonqa.security.signature import SignatureVerifier
from anonqa.services.commentary import CommentaryService


def get_settings(request: Request) -> Settings:
    """Return the settings the app was created with."""
    return request.app.state.settings


def get_signature_verifier(request: Request) -> SignatureVerifier:
    return request.app.state.signature_verifier


def get_slack_client(request: Request) -> SlackClient | None:
    """Return the Slack client, or None when no bot token is configured."""
    return request.app.state.slack_client


def get_commentary_service(request: Request) -> CommentaryService:
    return request.app.state.commentary_service


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
VerifierDep = Annotated[SignatureVerifier, Depends(get_signature_verifier)]
SlackClientDep = Annotated[SlackClient | None, Depends(get_slack_client)]
CommentaryDep = Annotated[CommentaryService, Depends(get_commentary_service)]
