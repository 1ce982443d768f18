from __future__ import annotations

import random
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from zahlen_trainer.models.practice import GenerationSettings, NumberResult
from zahlen_trainer.service.german_numbers import MAX_NUMBER, MIN_NUMBER, number_to_words


class SettingsError(ValueError):
    pass


def validate_settings(gen: GenerationSettings) -> None:
    if gen.min < MIN_NUMBER or gen.max > MAX_NUMBER or gen.min > gen.max:
        raise SettingsError(
            f"Invalid range: make sure min >= {MIN_NUMBER}, max <= {MAX_NUMBER} and min <= max."
        )
    if gen.allow_decimal and gen.decimal_places not in (1, 2):
        raise SettingsError("Decimal places must be 1 or 2.")


def round_half_away(value: float, places: int) -> float:
    """Round to ``places`` digits, ties going away from zero (2.25 -> 2.3)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class NumberGenerator:
    """Picks practice numbers.

    The random source is injected so tests can pass a seeded ``random.Random``.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, min: int = 0, max: int = 100, allow_decimal: bool = False, decimal_places: int = 1) -> int | float:
        validate_settings(GenerationSettings(min, max, allow_decimal, decimal_places))
        if allow_decimal:
            return round_half_away(self.rng.uniform(min, max), decimal_places)
        return self.rng.randint(min, max)

    def generate_german(self, gen: GenerationSettings) -> NumberResult:
        number = self.generate(gen.min, gen.max, gen.allow_decimal, gen.decimal_places)
        return NumberResult(number=number, german_word=number_to_words(number), settings=gen)
