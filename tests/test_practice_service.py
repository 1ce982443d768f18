from __future__ import annotations

import pytest

from zahlen_trainer.models.practice import GenerationSettings
from zahlen_trainer.service.number_generator import SettingsError
from zahlen_trainer.service.practice_service import PracticeError, PracticeService


def _answer(service: PracticeService, number: float, answer: float, time_spent: int = 0):
    return service.save_record(
        number=number,
        german_word="x",
        user_answer=answer,
        is_correct=service.check_answer(answer, number),
        time_spent=time_spent,
        settings={"min": 0, "max": 100},
    )


class TestDrill:
    def test_new_number_in_range(self, service: PracticeService) -> None:
        result = service.new_number(GenerationSettings(min=100, max=120))
        assert 100 <= result.number <= 120
        assert result.german_word.startswith("einhundert")

    def test_new_number_rejects_bad_settings(self, service: PracticeService) -> None:
        with pytest.raises(SettingsError):
            service.new_number(GenerationSettings(min=10, max=5))

    def test_check_answer(self, service: PracticeService) -> None:
        assert service.check_answer(12.5, 12.5)
        assert not service.check_answer(12, 13)


class TestHistory:
    def test_save_record_roundtrip(self, service: PracticeService) -> None:
        record = service.save_record(
            number=21, german_word=" einundzwanzig ", user_answer=21, is_correct=True,
            time_spent=1500, settings={"min": 0, "max": 100, "allowDecimal": False},
        )
        assert record.id > 0
        assert record.german_word == "einundzwanzig"
        assert record.is_correct is True
        assert record.time_spent == 1500
        assert record.settings == {"min": 0, "max": 100, "allowDecimal": False}
        assert record.timestamp.endswith("+00:00")

    def test_negative_time_rejected(self, service: PracticeService) -> None:
        with pytest.raises(PracticeError):
            _answer(service, 1, 1, time_spent=-1)

    def test_newest_first_paging(self, service: PracticeService) -> None:
        for n in range(4):
            _answer(service, n, n)
        page = service.list_history(limit=3, offset=0)
        assert [r.number for r in page.records] == [3, 2, 1]
        assert page.total == 4
        assert page.has_more is True

        page = service.list_history(limit=3, offset=3)
        assert [r.number for r in page.records] == [0]
        assert page.has_more is False

    def test_history_is_pruned_to_limit(self, service: PracticeService) -> None:
        for n in range(8):
            _answer(service, n, n)
        page = service.list_history(limit=50)
        assert page.total == 5
        assert [r.number for r in page.records] == [7, 6, 5, 4, 3]

    @pytest.mark.parametrize(("limit", "offset"), [(0, 0), (201, 0), (10, -1)])
    def test_bad_paging_rejected(self, service: PracticeService, limit: int, offset: int) -> None:
        with pytest.raises(PracticeError):
            service.list_history(limit=limit, offset=offset)

    def test_clear(self, service: PracticeService) -> None:
        _answer(service, 1, 1)
        _answer(service, 2, 3)
        assert service.clear_history() == 2
        assert service.list_history().total == 0


class TestStatistics:
    def test_empty(self, service: PracticeService) -> None:
        stats = service.statistics()
        assert (stats.total, stats.correct, stats.incorrect, stats.accuracy) == (0, 0, 0, 0)
        assert stats.avg_correct_time == 0
        assert stats.avg_incorrect_time == 0

    def test_counts_and_averages(self, service: PracticeService) -> None:
        _answer(service, 1, 1, time_spent=1000)
        _answer(service, 2, 2, time_spent=2000)
        _answer(service, 3, 3, time_spent=0)
        _answer(service, 4, 5, time_spent=4000)
        stats = service.statistics()
        assert stats.total == 4
        assert stats.correct == 3
        assert stats.incorrect == 1
        assert stats.accuracy == 75
        # Untimed answers do not drag the average down.
        assert stats.avg_correct_time == 1500
        assert stats.avg_incorrect_time == 4000
