from __future__ import annotations
from fastapi import APIRouter, Query

from zahlen_trainer.models.practice import GenerationSettings
from zahlen_trainer.web.dependencies import practice_service
from zahlen_trainer.web.schemas import CheckRequest

router = APIRouter(prefix="/api")

@router.get("/number")
def random_number(
    min: int = 0,
    max: int = 100,
    decimal: bool = False,
    decimal_places: int = Query(1, alias="decimalPlaces"),
):
    """Random number plus its German words; the browser speaks ``germanWord``.

    Invalid ranges raise SettingsError, which main.py turns into a 400.
    """
    gen = GenerationSettings(min=min, max=max, allow_decimal=decimal, decimal_places=decimal_places)
    result = practice_service.new_number(gen)
    return {"number": result.number, "germanWord": result.german_word, "settings": result.settings.to_json()}

@router.post("/check")
def check_answer(body: CheckRequest):
    return {
        "isCorrect": practice_service.check_answer(body.answer, body.correct_answer),
        "userAnswer": body.answer,
        "correctAnswer": body.correct_answer,
    }
