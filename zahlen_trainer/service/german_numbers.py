"""German number words for 0..1000, using standard spelling stems (sechzehn, siebzehn, einundzwanzig)."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal]

MIN_NUMBER = 0
MAX_NUMBER = 1000

BASIC_NUMBERS: dict[int, str] = {
    0: "null",
    1: "eins",
    2: "zwei",
    3: "drei",
    4: "vier",
    5: "fünf",
    6: "sechs",
    7: "sieben",
    8: "acht",
    9: "neun",
    10: "zehn",
    11: "elf",
    12: "zwölf",
}

TENS: dict[int, str] = {
    20: "zwanzig",
    30: "dreißig",
    40: "vierzig",
    50: "fünfzig",
    60: "sechzig",
    70: "siebzig",
    80: "achtzig",
    90: "neunzig",
}

# Digit stems that change inside compounds: "einundzwanzig", "sechzehn", "siebzehn".
_UND_STEMS: dict[int, str] = {1: "ein"}
_TEEN_STEMS: dict[int, str] = {6: "sech", 7: "sieb"}

SEPARATOR = " Komma "


class NumberRangeError(ValueError):
    pass


def integer_to_words(num: int) -> str:
    """Spell a whole number between 0 and 1000 as one German compound word."""
    if num < MIN_NUMBER or num > MAX_NUMBER:
        raise NumberRangeError(f"Number must be between {MIN_NUMBER} and {MAX_NUMBER}, got {num}.")

    if num <= 12:
        return BASIC_NUMBERS[num]

    if num <= 19:
        ones = num - 10
        return _TEEN_STEMS.get(ones, BASIC_NUMBERS[ones]) + "zehn"

    if num <= 99:
        ones = num % 10
        tens_word = TENS[num - ones]
        if ones == 0:
            return tens_word
        return _UND_STEMS.get(ones, BASIC_NUMBERS[ones]) + "und" + tens_word

    if num <= 999:
        hundreds, remainder = divmod(num, 100)
        result = "einhundert" if hundreds == 1 else BASIC_NUMBERS[hundreds] + "hundert"
        if remainder:
            result += integer_to_words(remainder)
        return result

    return "eintausend"


def decimal_digits_to_words(digits: str) -> str:
    """Read fractional digits one by one: ``"14"`` -> ``"eins vier"``."""
    return " ".join(BASIC_NUMBERS[int(d)] for d in digits)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"Expected a number, got {type(value).__name__}.")
    if isinstance(value, float):
        # repr() gives the shortest string that round-trips, i.e. the digits a user sees.
        return Decimal(repr(value))
    return Decimal(value)


def number_to_words(value: Number) -> str:
    """Convert ``value`` (0..1000, optionally with decimals) to German words.

    Whole numbers become a single compound word. Decimals are read as the
    integer part, "Komma", then every fractional digit on its own, e.g.
    ``3.14`` -> ``"drei Komma eins vier"``. A ``Decimal`` keeps trailing
    zeros, so ``Decimal("3.10")`` ends in ``"eins null"``.

    Raises NumberRangeError for non-finite values and anything outside 0..1000.
    """
    dec = _to_decimal(value)
    if not dec.is_finite():
        raise NumberRangeError(f"Number must be finite, got {value!r}.")
    if dec < MIN_NUMBER or dec > MAX_NUMBER:
        raise NumberRangeError(f"Number must be between {MIN_NUMBER} and {MAX_NUMBER}, got {value!r}.")

    integer_part = int(dec)
    if dec == integer_part:
        return integer_to_words(integer_part)

    fraction = format(dec, "f").partition(".")[2]
    return integer_to_words(integer_part) + SEPARATOR + decimal_digits_to_words(fraction)
