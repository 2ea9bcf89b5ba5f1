"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from anonqa import __version__
from anonqa.config import Settings, settings as default_settings
from anonqa.integrations.slack import SlackClient
from anonqa.logging_config import configure_logging
from anonqa.security.signature import SignatureVerifier
from anonqa.services.commentary import create_commentary_service

# Configure logging at import time
configure_logging(log_level=default_settings.log_level, json_output=not default_settings.dev_mode)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration state and shutdown."""
    settings: Settings = app.state.settings
    if not app.state.signature_verifier.configured:
        logger.warning("SLACK_SIGNING_SECRET not configured, all slash commands will be rejected")
    if not settings.relay_configured:
        logger.warning("SLACK_BOT_TOKEN or SLACK_TARGET_CHANNEL not configured")
    logger.info(
        "Anonymous QA Bot started (commentary=%s)",
        "enabled" if app.state.commentary_service.enabled else "disabled",
    )
    yield
    logger.info("Anonymous QA Bot shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators are built once from ``settings`` and kept on ``app.state``;
    routes reach them through the providers in ``anonqa.dependencies``.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Anonymous QA Bot",
        version=__version__,
        description="Relays anonymous Slack slash-command messages to a channel.",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.signature_verifier = SignatureVerifier(settings.slack_signing_secret)
    app.state.slack_client = (
        SlackClient(
            settings.slack_bot_token,
            api_base_url=settings.slack_api_base_url,
            timeout=settings.slack_timeout_seconds,
        )
        if settings.slack_bot_token
        else None
    )
    app.state.commentary_service = create_commentary_service(
        settings.openai_api_key,
        model=settings.openai_model,
        max_tokens=settings.openai_max_tokens,
        temperature=settings.openai_temperature,
    )

    from anonqa.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from anonqa.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Import and mount routers
    from anonqa.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
