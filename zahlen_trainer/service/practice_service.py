from __future__ import annotations

import logging
from typing import Any, Optional

from zahlen_trainer.data.practice_repo import PracticeRepo
from zahlen_trainer.models.practice import GenerationSettings, HistoryPage, NumberResult, PracticeRecord, PracticeStats
from zahlen_trainer.service import answer_checker
from zahlen_trainer.service.number_generator import NumberGenerator

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 200


class PracticeError(ValueError):
    pass


class PracticeService:
    """Service layer for number drills, answer checking and practice history.

    Keep validation/business logic here; keep SQL in PracticeRepo.
    """

    def __init__(self, repo: PracticeRepo, generator: Optional[NumberGenerator] = None, history_limit: int = 1000):
        self.repo = repo
        self.generator = generator or NumberGenerator()
        self.history_limit = history_limit

    # -------------
    # Drill
    # -------------
    def new_number(self, gen: GenerationSettings) -> NumberResult:
        result = self.generator.generate_german(gen)
        logger.debug("Generated %s (%s)", result.number, result.german_word)
        return result

    def check_answer(self, user_answer: float, correct_answer: float) -> bool:
        return answer_checker.is_correct(user_answer, correct_answer)

    # -------------
    # History
    # -------------
    def save_record(self, number: float, german_word: str, user_answer: float, is_correct: bool,
                    time_spent: int = 0, settings: dict[str, Any] | None = None) -> PracticeRecord:
        if time_spent < 0:
            raise PracticeError("Time spent cannot be negative.")
        record = self.repo.add(number, german_word.strip(), user_answer, is_correct, time_spent, settings or {})
        pruned = self.repo.prune(self.history_limit)
        if pruned:
            logger.info("Pruned %d old practice records", pruned)
        return record

    def list_history(self, limit: int = 50, offset: int = 0) -> HistoryPage:
        if not (1 <= limit <= MAX_PAGE_SIZE):
            raise PracticeError(f"Limit must be 1..{MAX_PAGE_SIZE}.")
        if offset < 0:
            raise PracticeError("Offset cannot be negative.")
        total = self.repo.count()
        records = self.repo.list_recent(limit, offset)
        return HistoryPage(records=records, total=total, has_more=offset + limit < total)

    def clear_history(self) -> int:
        deleted = self.repo.clear()
        logger.info("Cleared %d practice records", deleted)
        return deleted

    def statistics(self) -> PracticeStats:
        row = self.repo.aggregate()
        total = row["total"] or 0
        correct = row["correct"] or 0
        return PracticeStats(
            total=total,
            correct=correct,
            incorrect=row["incorrect"] or 0,
            accuracy=round(correct / total * 100) if total else 0,
            avg_correct_time=round(row["avg_correct_time"] or 0),
            avg_incorrect_time=round(row["avg_incorrect_time"] or 0),
        )
