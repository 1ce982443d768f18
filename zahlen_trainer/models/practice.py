from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GenerationSettings:
    """Range and precision of the numbers handed out for practice.

    ``decimal_places`` only matters when ``allow_decimal`` is set.
    """
    min: int = 0
    max: int = 100
    allow_decimal: bool = False
    decimal_places: int = 1

    def to_json(self) -> dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "allowDecimal": self.allow_decimal,
            "decimalPlaces": self.decimal_places,
        }


@dataclass(frozen=True)
class NumberResult:
    number: int | float
    german_word: str
    settings: GenerationSettings


@dataclass(frozen=True)
class PracticeRecord:
    """One answered exercise, as stored in ``practice_history``."""
    id: int
    timestamp: str
    number: float
    german_word: str
    user_answer: float
    is_correct: bool
    time_spent: int
    settings: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HistoryPage:
    records: list[PracticeRecord]
    total: int
    has_more: bool


@dataclass(frozen=True)
class PracticeStats:
    total: int
    correct: int
    incorrect: int
    accuracy: int
    avg_correct_time: int
    avg_incorrect_time: int
