"""Health check endpoints."""

from fastapi import APIRouter

from anonqa import __version__

router = APIRouter()


@router.get("/")
async def root():
    """Return a simple liveness message."""
    return {"status": "ok", "message": "Anonymous QA Bot is running"}


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "anon-qa-bot", "version": __version__}
