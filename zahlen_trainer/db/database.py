from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from zahlen_trainer.config import settings

logger = logging.getLogger(__name__)

def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn

@contextmanager
def get_conn() -> Iterator[sqlite3.Connection]:
    conn = _connect(settings.DB_PATH)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()

def _table_has_column(conn: sqlite3.Connection, table: str, column: str) -> bool:
    rows = conn.execute(f"PRAGMA table_info({table});").fetchall()
    return any(r["name"] == column for r in rows)

def _try_add_column(conn: sqlite3.Connection, table: str, column: str, col_def: str) -> None:
    """Small helper for schema evolution of databases created by older versions."""
    if _table_has_column(conn, table, column):
        return
    logger.info("Adding column %s.%s", table, column)
    conn.execute(f"ALTER TABLE {table} ADD COLUMN {column} {col_def};")

def init_db() -> None:
    settings.DB_PATH.parent.mkdir(parents=True, exist_ok=True)

    with get_conn() as conn:
        # WAL lets readers keep going while a record is being written.
        conn.execute("PRAGMA journal_mode = WAL;")

        # ---- Practice history ----
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS practice_history (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                timestamp TEXT NOT NULL,
                number REAL NOT NULL,
                german_word TEXT NOT NULL,
                user_answer REAL NOT NULL,
                is_correct INTEGER NOT NULL,
                settings TEXT NOT NULL DEFAULT '{}'
            );
            """
        )
        # Records written before answer timing existed have no time_spent.
        _try_add_column(conn, "practice_history", "time_spent", "INTEGER NOT NULL DEFAULT 0")

        conn.execute("CREATE INDEX IF NOT EXISTS idx_practice_is_correct ON practice_history(is_correct);")

    logger.info("Database ready at %s", settings.DB_PATH)
