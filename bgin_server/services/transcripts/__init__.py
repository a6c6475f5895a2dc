"""Chat transcript persistence."""

from .store import (
    InvalidTranscriptNameError,
    LoadResult,
    MissingFieldsError,
    SaveResult,
    TranscriptNotFoundError,
    TranscriptStore,
    TranscriptStoreError,
    TranscriptSummary,
    get_transcript_store,
)

__all__ = [
    "InvalidTranscriptNameError",
    "LoadResult",
    "MissingFieldsError",
    "SaveResult",
    "TranscriptNotFoundError",
    "TranscriptStore",
    "TranscriptStoreError",
    "TranscriptSummary",
    "get_transcript_store",
]
