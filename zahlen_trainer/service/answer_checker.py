from __future__ import annotations

# Absorbs float noise such as "3.1" typed by the user vs. a generated 3.1.
TOLERANCE = 0.001

def is_correct(user_answer: float, correct_answer: float) -> bool:
    return abs(user_answer - correct_answer) < TOLERANCE
