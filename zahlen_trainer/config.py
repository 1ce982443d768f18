from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path

def _env_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    return Path(value) if value else default

@dataclass(frozen=True)
class Settings:
    DB_PATH: Path = field(default_factory=lambda: _env_path(
        "ZAHLEN_DB_PATH", Path(__file__).resolve().parent.parent / "practice_history.db"
    ))
    # The oldest practice records are pruned beyond this count.
    HISTORY_LIMIT: int = 1000
    HOST: str = "127.0.0.1"
    PORT: int = field(default_factory=lambda: int(os.environ.get("PORT", "3001")))
    LOG_LEVEL: str = field(default_factory=lambda: os.environ.get("ZAHLEN_LOG_LEVEL", "INFO"))
    LOG_JSON: bool = False

settings = Settings()
