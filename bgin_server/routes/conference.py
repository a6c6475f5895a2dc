"""Conference schedule routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..logging_config import get_logger
from ..services.conference import get_session, initialize_session, list_sessions, list_tracks
from ..services.transcripts import TranscriptStore, TranscriptStoreError, get_transcript_store
from ..utils.responses import error_response, failure_response

logger = get_logger(__name__)

router = APIRouter(prefix="/conference", tags=["conference"])


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(by_alias=True)


@router.get("/tracks")
async def get_tracks() -> Dict[str, Any]:
    tracks = [_dump(track) for track in list_tracks()]
    return {"success": True, "tracks": tracks, "total": len(tracks)}


@router.get("/tracks/{track_id}/sessions")
async def get_track_sessions(track_id: str) -> Dict[str, Any]:
    """Sessions in one track; an unknown track simply has none."""
    sessions = [_dump(session) for session in list_sessions(track_id)]
    return {"success": True, "trackId": track_id, "sessions": sessions, "total": len(sessions)}


@router.get("/sessions")
async def get_sessions() -> Dict[str, Any]:
    sessions = [_dump(session) for session in list_sessions()]
    return {"success": True, "sessions": sessions, "total": len(sessions)}


@router.get("/sessions/{session_id}")
async def get_conference_session(session_id: str):
    session = get_session(session_id)
    if session is None:
        return error_response("Conference session not found", status_code=404)
    return {"success": True, "session": _dump(session)}


@router.post("/sessions/{session_id}/init")
async def init_conference_session(session_id: str, store: TranscriptStore = Depends(get_transcript_store)):
    """Start the session's chat with a welcome message and save it as a new transcript."""

    session = get_session(session_id)
    if session is None:
        return error_response("Conference session not found", status_code=404)

    try:
        result = initialize_session(session, store)
    except TranscriptStoreError as e:
        logger.error(f"Error initializing conference session: {e}")
        return failure_response("Failed to initialize conference session", e)

    return {
        "success": True,
        "message": "Conference session chat initialized",
        "session": _dump(session),
        "filename": result.saved.filename,
        "messages": result.messages,
        "metadata": result.metadata,
    }


__all__ = ["router"]
