"""Shared pytest fixtures for the drill tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from zahlen_trainer.config import Settings
from zahlen_trainer.data.practice_repo import PracticeRepo
from zahlen_trainer.db import database
from zahlen_trainer.db.database import init_db
from zahlen_trainer.service.number_generator import NumberGenerator
from zahlen_trainer.service.practice_service import PracticeService


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every connection at a fresh SQLite file with the schema created."""
    path = tmp_path / "practice_history.db"
    monkeypatch.setattr(database, "settings", Settings(DB_PATH=path))
    init_db()
    return path


@pytest.fixture
def generator() -> NumberGenerator:
    return NumberGenerator(random.Random(1234))


@pytest.fixture
def service(db_path: Path, generator: NumberGenerator) -> PracticeService:
    return PracticeService(PracticeRepo(), generator, history_limit=5)


@pytest.fixture
def client(db_path: Path) -> TestClient:
    # Not entered as a context manager, so startup leaves logging alone.
    from zahlen_trainer.main import app

    return TestClient(app)
