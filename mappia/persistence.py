"""SQLite persistence for user preferences (the onboarding flag)."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path

from mappia.config import DB_PATH

logger = logging.getLogger(__name__)

ONBOARDING_COMPLETE_KEY = "onboarding_complete"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _connect() -> sqlite3.Connection:
    db_file = Path(DB_PATH)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(db_file)


def bootstrap_schema() -> None:
    """Create persistence schema if it does not already exist."""
    with closing(_connect()) as conn, conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS preferences (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )


def get_preference(key: str, default: str | None = None) -> str | None:
    with closing(_connect()) as conn:
        row = conn.execute("SELECT value FROM preferences WHERE key = ?", (key,)).fetchone()
    if row is None:
        return default
    return str(row[0])


def set_preference(key: str, value: str) -> None:
    """Insert or overwrite a preference value."""
    with closing(_connect()) as conn, conn:
        conn.execute(
            """
            INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (key, value, _utc_now_iso()),
        )


def is_onboarding_complete() -> bool:
    return get_preference(ONBOARDING_COMPLETE_KEY, "0") == "1"


def mark_onboarding_complete() -> None:
    set_preference(ONBOARDING_COMPLETE_KEY, "1")
    logger.info("onboarding_complete saved path=%s", DB_PATH)
