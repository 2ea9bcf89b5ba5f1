"""Master API router."""

from fastapi import APIRouter

from anonqa.api.routes import health, slack_commands

api_router = APIRouter()
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(slack_commands.router)
