from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from typing import Any, List

from zahlen_trainer.db.database import get_conn
from zahlen_trainer.models.practice import PracticeRecord

_COLUMNS = "id, timestamp, number, german_word, user_answer, is_correct, time_spent, settings"

def _to_record(r: sqlite3.Row) -> PracticeRecord:
    return PracticeRecord(
        id=r["id"], timestamp=r["timestamp"], number=r["number"], german_word=r["german_word"],
        user_answer=r["user_answer"], is_correct=bool(r["is_correct"]), time_spent=r["time_spent"],
        settings=json.loads(r["settings"]) if r["settings"] else {},
    )

class PracticeRepo:
    def add(self, number: float, german_word: str, user_answer: float, is_correct: bool,
            time_spent: int, settings: dict[str, Any]) -> PracticeRecord:
        now = datetime.now(timezone.utc).isoformat()
        with get_conn() as conn:
            cur = conn.execute(
                """INSERT INTO practice_history
                     (timestamp, number, german_word, user_answer, is_correct, time_spent, settings)
                     VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (now, number, german_word, user_answer, int(is_correct), time_spent,
                 json.dumps(settings, ensure_ascii=False)),
            )
            row = conn.execute(f"SELECT {_COLUMNS} FROM practice_history WHERE id = ?", (cur.lastrowid,)).fetchone()
        return _to_record(row)

    def list_recent(self, limit: int = 50, offset: int = 0) -> List[PracticeRecord]:
        with get_conn() as conn:
            rows = conn.execute(
                f"""SELECT {_COLUMNS} FROM practice_history
                     ORDER BY id DESC LIMIT ? OFFSET ?""",
                (limit, offset),
            ).fetchall()
        return [_to_record(r) for r in rows]

    def count(self) -> int:
        with get_conn() as conn:
            row = conn.execute("SELECT COUNT(*) AS n FROM practice_history").fetchone()
        return int(row["n"])

    def prune(self, keep: int) -> int:
        """Delete everything but the ``keep`` newest records."""
        with get_conn() as conn:
            cur = conn.execute(
                """DELETE FROM practice_history WHERE id NOT IN
                     (SELECT id FROM practice_history ORDER BY id DESC LIMIT ?)""",
                (keep,),
            )
        return cur.rowcount

    def clear(self) -> int:
        with get_conn() as conn:
            cur = conn.execute("DELETE FROM practice_history")
        return cur.rowcount

    def aggregate(self) -> sqlite3.Row:
        with get_conn() as conn:
            return conn.execute(
                """SELECT
                     COUNT(*) AS total,
                     SUM(CASE WHEN is_correct = 1 THEN 1 ELSE 0 END) AS correct,
                     SUM(CASE WHEN is_correct = 0 THEN 1 ELSE 0 END) AS incorrect,
                     AVG(CASE WHEN is_correct = 1 AND time_spent > 0 THEN time_spent END) AS avg_correct_time,
                     AVG(CASE WHEN is_correct = 0 AND time_spent > 0 THEN time_spent END) AS avg_incorrect_time
                   FROM practice_history"""
            ).fetchone()
