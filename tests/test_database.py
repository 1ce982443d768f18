from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from zahlen_trainer.config import Settings
from zahlen_trainer.data.practice_repo import PracticeRepo
from zahlen_trainer.db import database
from zahlen_trainer.db.database import init_db


def test_init_is_idempotent(db_path: Path) -> None:
    init_db()
    assert PracticeRepo().count() == 0


def test_old_table_gets_time_spent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "old.db"
    conn = sqlite3.connect(path)
    conn.execute(
        """CREATE TABLE practice_history (
             id INTEGER PRIMARY KEY AUTOINCREMENT,
             timestamp TEXT NOT NULL,
             number REAL NOT NULL,
             german_word TEXT NOT NULL,
             user_answer REAL NOT NULL,
             is_correct INTEGER NOT NULL,
             settings TEXT NOT NULL DEFAULT '{}'
           )"""
    )
    conn.execute(
        "INSERT INTO practice_history (timestamp, number, german_word, user_answer, is_correct) "
        "VALUES ('2024-01-01T00:00:00+00:00', 5, 'fünf', 5, 1)"
    )
    conn.commit()
    conn.close()

    monkeypatch.setattr(database, "settings", Settings(DB_PATH=path))
    init_db()

    [record] = PracticeRepo().list_recent()
    assert record.german_word == "fünf"
    assert record.time_spent == 0
    assert record.settings == {}


def test_failed_write_rolls_back(db_path: Path) -> None:
    with pytest.raises(sqlite3.IntegrityError):
        with database.get_conn() as conn:
            conn.execute(
                "INSERT INTO practice_history (timestamp, number, german_word, user_answer, is_correct) "
                "VALUES ('t', 1, 'eins', 1, 1)"
            )
            conn.execute("INSERT INTO practice_history (timestamp) VALUES (NULL)")
    assert PracticeRepo().count() == 0
