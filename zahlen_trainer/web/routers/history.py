from __future__ import annotations
from fastapi import APIRouter

from zahlen_trainer.models.practice import PracticeRecord
from zahlen_trainer.web.dependencies import practice_service
from zahlen_trainer.web.schemas import RecordRequest

router = APIRouter(prefix="/api")

def _record_json(r: PracticeRecord) -> dict:
    return {
        "id": r.id,
        "timestamp": r.timestamp,
        "number": r.number,
        "germanWord": r.german_word,
        "userAnswer": r.user_answer,
        "isCorrect": r.is_correct,
        "timeSpent": r.time_spent,
        "settings": r.settings,
    }

@router.post("/history")
def save_record(body: RecordRequest):
    record = practice_service.save_record(
        number=body.number,
        german_word=body.german_word,
        user_answer=body.user_answer,
        is_correct=body.is_correct,
        time_spent=body.time_spent,
        settings=body.settings,
    )
    return {"success": True, "record": _record_json(record)}

@router.get("/history")
def list_history(limit: int = 50, offset: int = 0):
    page = practice_service.list_history(limit=limit, offset=offset)
    return {"records": [_record_json(r) for r in page.records], "total": page.total, "hasMore": page.has_more}

@router.delete("/history")
def clear_history():
    deleted = practice_service.clear_history()
    return {"success": True, "deleted": deleted}

@router.get("/stats")
def statistics():
    s = practice_service.statistics()
    return {
        "total": s.total,
        "correct": s.correct,
        "incorrect": s.incorrect,
        "accuracy": s.accuracy,
        "avgCorrectTime": s.avg_correct_time,
        "avgIncorrectTime": s.avg_incorrect_time,
    }
