"""API routes for the BGIN multi-agent hub."""

from fastapi import APIRouter

from .chat import router as chat_router
from .conference import router as conference_router
from .discourse import router as discourse_router
from .status import router as status_router

api_router = APIRouter(prefix="/api")

api_router.include_router(chat_router)
api_router.include_router(status_router)
api_router.include_router(conference_router)
api_router.include_router(discourse_router)

__all__ = ["api_router"]
