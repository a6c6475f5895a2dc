"""Conference schedule registry."""

from .models import ConferenceSession, ConferenceTrack
from .registry import (
    CONFERENCE_SESSIONS,
    CONFERENCE_TRACKS,
    SessionInitResult,
    get_session,
    initialize_session,
    list_sessions,
    list_tracks,
)

__all__ = [
    "CONFERENCE_SESSIONS",
    "CONFERENCE_TRACKS",
    "ConferenceSession",
    "ConferenceTrack",
    "SessionInitResult",
    "get_session",
    "initialize_session",
    "list_sessions",
    "list_tracks",
]
