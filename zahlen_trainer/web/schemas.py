from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CheckRequest(BaseModel):
    """Answer submitted for a generated number. Numeric strings are accepted."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    answer: float
    correct_answer: float = Field(alias="correctAnswer")


class RecordRequest(BaseModel):
    """An answered exercise sent by the frontend for the history."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    number: float
    german_word: str = Field("", alias="germanWord")
    user_answer: float = Field(alias="userAnswer")
    is_correct: bool = Field(alias="isCorrect")
    time_spent: int = Field(0, alias="timeSpent")
    settings: dict[str, Any] = Field(default_factory=dict)
