"""File-backed transcript storage: one JSON document per save, never updated in place.

Files are named ``{projectId}_{sessionId}_{epochMillis}.json``. Loading "the"
transcript for a project/session pair means reading the newest matching file;
older snapshots stay on disk and remain visible through ``list_all``.
"""

import json
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ...config import get_settings
from ...logging_config import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = "1.0.0"
TRANSCRIPT_SUFFIX = ".json"

_RECORD_FIELDS = {
    "projectId": str,
    "sessionId": str,
    "messages": list,
    "metadata": dict,
    "savedAt": str,
}


class TranscriptStoreError(Exception):
    """A filesystem or parse failure while touching the transcript directory."""


class MissingFieldsError(ValueError):
    """Required save fields were absent or empty."""

    def __init__(self, missing: List[str]):
        super().__init__(f"Missing required fields: {', '.join(missing)}")
        self.missing = missing


class InvalidTranscriptNameError(ValueError):
    """An id would produce a filename outside the storage directory."""

    def __init__(self, filename: str):
        super().__init__(f"Invalid projectId or sessionId: {filename}")
        self.filename = filename


class TranscriptNotFoundError(LookupError):
    """No transcript file with the requested name exists."""

    def __init__(self, filename: str):
        super().__init__(f"Chat file not found: {filename}")
        self.filename = filename


@dataclass
class SaveResult:
    filename: str
    project_id: str
    session_id: str
    message_count: int


@dataclass
class LoadResult:
    messages: List[Any] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    saved_at: Optional[str] = None
    filename: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.filename is not None


@dataclass
class TranscriptSummary:
    filename: str
    project_id: Optional[str]
    session_id: Optional[str]
    message_count: int
    saved_at: Optional[str]
    last_modified: str
    metadata: Dict[str, Any]


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def _utc_iso(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _from_millis(stamp: int) -> datetime:
    return datetime.fromtimestamp(stamp // 1000, tz=timezone.utc) + timedelta(milliseconds=stamp % 1000)


def is_bare_filename(name: str) -> bool:
    """True when ``name`` addresses a file directly inside the storage directory."""
    return bool(name) and name not in {".", ".."} and "\\" not in name and Path(name).name == name


def transcript_prefix(project_id: str, session_id: str) -> str:
    return f"{project_id}_{session_id}_"


def transcript_filename(project_id: str, session_id: str, stamp: int) -> str:
    return f"{transcript_prefix(project_id, session_id)}{stamp}{TRANSCRIPT_SUFFIX}"


class TranscriptStore:
    """Append-only directory of chat transcript snapshots."""

    def __init__(self, storage_dir: Path, clock: Callable[[], int] = epoch_millis):
        self.storage_dir = Path(storage_dir)
        self.clock = clock

    def _ensure_dir(self) -> None:
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TranscriptStoreError(f"Cannot create storage directory {self.storage_dir}: {e}") from e

    def _read(self, path: Path) -> Dict[str, Any]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TranscriptStoreError(f"Failed to read {path.name}: {e}") from e
        if not isinstance(data, dict):
            raise TranscriptStoreError(f"Failed to read {path.name}: not a transcript object")
        for key, expected in _RECORD_FIELDS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, expected):
                raise TranscriptStoreError(f"Failed to read {path.name}: {key} has the wrong type")
        return data

    def _json_files(self) -> List[Path]:
        self._ensure_dir()
        try:
            return [p for p in self.storage_dir.iterdir() if p.name.endswith(TRANSCRIPT_SUFFIX) and p.is_file()]
        except OSError as e:
            raise TranscriptStoreError(f"Failed to list {self.storage_dir}: {e}") from e

    def save(
        self,
        project_id: str,
        session_id: str,
        messages: Optional[List[Any]],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> SaveResult:
        """Write a new snapshot file and return its name."""

        missing = []
        if not project_id:
            missing.append("projectId")
        if not session_id:
            missing.append("sessionId")
        # An empty conversation is a valid snapshot
        if messages is None:
            missing.append("messages")
        if missing:
            raise MissingFieldsError(missing)

        now_ms = self.clock()
        filename = transcript_filename(project_id, session_id, now_ms)
        if not is_bare_filename(filename):
            raise InvalidTranscriptNameError(filename)

        self._ensure_dir()
        record = {
            "projectId": project_id,
            "sessionId": session_id,
            "messages": messages,
            "metadata": metadata or {},
            "savedAt": _utc_iso(_from_millis(now_ms)),
            "version": FORMAT_VERSION,
        }

        path = self.storage_dir / filename
        try:
            path.write_text(json.dumps(record, indent=2, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise TranscriptStoreError(f"Failed to save chat: {e}") from e

        logger.info(f"💾 Saved {len(messages)} messages to {filename}")
        return SaveResult(
            filename=filename,
            project_id=project_id,
            session_id=session_id,
            message_count=len(messages),
        )

    def matching_files(self, project_id: str, session_id: str) -> List[Tuple[int, str]]:
        """(timestamp, filename) pairs for one project/session, newest first."""

        prefix = transcript_prefix(project_id, session_id)
        matches = []
        for path in self._json_files():
            name = path.name
            if not name.startswith(prefix):
                continue
            stamp = name[len(prefix):-len(TRANSCRIPT_SUFFIX)]
            if stamp.isdigit():
                matches.append((int(stamp), name))
        matches.sort(reverse=True)
        return matches

    def load_latest(self, project_id: str, session_id: str) -> LoadResult:
        """Read the newest snapshot for a project/session; empty result when none exists."""

        matches = self.matching_files(project_id, session_id)
        if not matches:
            logger.info(f"No saved chats for {project_id}/{session_id}")
            return LoadResult()

        _, filename = matches[0]
        data = self._read(self.storage_dir / filename)
        logger.info(f"📂 Loaded {filename}")
        return LoadResult(
            messages=data.get("messages") or [],
            metadata=data.get("metadata") or {},
            saved_at=data.get("savedAt"),
            filename=filename,
        )

    def list_all(self) -> List[TranscriptSummary]:
        """Summaries of every stored transcript, most recently modified first."""

        entries = []
        for path in self._json_files():
            data = self._read(path)
            try:
                mtime = path.stat().st_mtime
            except OSError as e:
                raise TranscriptStoreError(f"Failed to stat {path.name}: {e}") from e
            entries.append((mtime, TranscriptSummary(
                filename=path.name,
                project_id=data.get("projectId"),
                session_id=data.get("sessionId"),
                message_count=len(data.get("messages") or []),
                saved_at=data.get("savedAt"),
                last_modified=_utc_iso(datetime.fromtimestamp(mtime, tz=timezone.utc)),
                metadata=data.get("metadata") or {},
            )))

        entries.sort(key=lambda entry: entry[0], reverse=True)
        return [summary for _, summary in entries]

    def delete(self, filename: str) -> None:
        """Remove one transcript file by name."""

        if not is_bare_filename(filename):
            raise TranscriptNotFoundError(filename)

        path = self.storage_dir / filename
        if not path.is_file():
            raise TranscriptNotFoundError(filename)

        try:
            path.unlink()
        except FileNotFoundError as e:
            raise TranscriptNotFoundError(filename) from e
        except OSError as e:
            raise TranscriptStoreError(f"Failed to delete {filename}: {e}") from e

        logger.info(f"🗑️ Deleted {filename}")


@lru_cache(maxsize=1)
def get_transcript_store() -> TranscriptStore:
    """Get the store rooted at the configured chat storage directory."""
    return TranscriptStore(get_settings().chat_storage_dir)
