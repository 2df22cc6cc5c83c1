"""Persistence layer for the operator console snapshot."""

from __future__ import annotations

import json
import logging
import sqlite3
import tempfile
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from fixtureops.config.defaults import default_document, default_state
from fixtureops.config.environment import DEFAULT_DB_PATH, env_db_path
from fixtureops.models import COLLECTION_MODELS, SportsState


logger = logging.getLogger(__name__)

STORAGE_KEY = "agentic_sports_state_v1"


def merge_with_defaults(parsed: Mapping[str, Any]) -> SportsState:
    """Shallow-merge a parsed document over the seed document.

    Parsed collections win; collections missing from ``parsed`` fall back to
    seed data. Unknown top-level fields are dropped. Raises pydantic's
    ``ValidationError`` when the merged document does not have the expected
    shape.
    """

    merged = default_document()
    for name in COLLECTION_MODELS:
        if name in parsed:
            merged[name] = parsed[name]
    return SportsState.model_validate(merged)


def parse_document(raw: str | None, *, source: str = "storage") -> SportsState:
    """Decode a serialized snapshot, recovering with seed data on any failure."""

    if not raw:
        return default_state()
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Failed to parse snapshot from %s, using initial data: %s", source, exc)
        return default_state()
    if not isinstance(parsed, dict):
        logger.warning(
            "Snapshot from %s is a %s, not an object; using initial data",
            source,
            type(parsed).__name__,
        )
        return default_state()
    try:
        return merge_with_defaults(parsed)
    except ValidationError as exc:
        logger.warning(
            "Snapshot from %s has an unexpected shape, using initial data (%d errors)",
            source,
            exc.error_count(),
        )
        return default_state()


def serialize(state: SportsState) -> str:
    return json.dumps(state.to_document())


class SnapshotRepository:
    """SQLite-backed single-key store for the serialized snapshot."""

    def __init__(self, db_path: Path | str = DEFAULT_DB_PATH, *, key: str = STORAGE_KEY):
        self.key = key
        self._use_uri = False
        env_db = env_db_path()
        if env_db:
            if env_db.startswith("file:"):
                self.db_path: Path | str = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _use_fallback(self, exc: Exception) -> Path:
        fallback_dir = Path(tempfile.gettempdir()) / "fixtureops-runtime"
        fallback_dir.mkdir(parents=True, exist_ok=True)
        fallback = fallback_dir / "fixtureops.sqlite"
        logger.warning("Cannot use %s (%s); falling back to %s", self.db_path, exc, fallback)
        self.db_path = fallback
        self._use_uri = False
        return fallback

    def _connect(self) -> sqlite3.Connection:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            else:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        except (sqlite3.OperationalError, OSError) as exc:
            conn = sqlite3.connect(self._use_fallback(exc))
            self._create_schema(conn)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        try:
            with self._connect() as conn:
                self._create_schema(conn)
        except sqlite3.DatabaseError as exc:
            # Not a SQLite database; carry on with the fallback file.
            self._use_fallback(exc)
            with self._connect() as conn:
                self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS documents (
                key TEXT PRIMARY KEY,
                payload TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

    def read_raw(self) -> Optional[str]:
        with self._connect() as conn:
            row = conn.execute("SELECT payload FROM documents WHERE key = ?", (self.key,)).fetchone()
        if row is None:
            return None
        return row["payload"]

    def load(self) -> SportsState:
        """Return the stored snapshot, or seed data when absent or unreadable."""

        try:
            raw = self.read_raw()
        except sqlite3.DatabaseError as exc:
            logger.warning("Failed to read snapshot from %s, using initial data: %s", self.db_path, exc)
            return default_state()
        return parse_document(raw, source=str(self.db_path))

    def write(self, state: SportsState) -> None:
        """Overwrite the stored document, raising on failure."""

        payload = serialize(state)
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO documents (key, payload, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET payload = excluded.payload, updated_at = excluded.updated_at
                """,
                (self.key, payload, now),
            )
            conn.commit()

    def save(self, state: SportsState) -> None:
        """Best-effort :meth:`write`. Failures are logged, never raised."""

        try:
            self.write(state)
        except (sqlite3.Error, OSError, TypeError, ValueError):
            logger.exception("Failed to save snapshot to %s", self.db_path)

    def clear(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM documents WHERE key = ?", (self.key,))
            conn.commit()


class SnapshotWriter:
    """Write-behind queue: saves run on one worker thread in dispatch order."""

    def __init__(self, repository: SnapshotRepository):
        self.repository = repository
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fixtureops-save")
        self._pending: List[Future] = []
        self._lock = Lock()
        self._closed = False

    def submit(self, state: SportsState) -> None:
        with self._lock:
            if self._closed:
                logger.warning("Snapshot writer is closed; dropping save")
                return
            self._pending = [future for future in self._pending if not future.done()]
            self._pending.append(self._executor.submit(self.repository.save, state))

    def flush(self, timeout: float | None = None) -> None:
        with self._lock:
            pending = list(self._pending)
        if pending:
            wait(pending, timeout=timeout)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=True)


__all__ = [
    "STORAGE_KEY",
    "SnapshotRepository",
    "SnapshotWriter",
    "merge_with_defaults",
    "parse_document",
    "serialize",
]
