"""Pressure score for a goal-alignment verdict (lower = more genuine interest)."""

EXCELLENT_MATCH = "Excellent Match"
GOOD_FOUNDATION = "Good Foundation"
REQUIRES_REFLECTION = "Requires Reflection"

VALIDATION_STATUSES = frozenset({EXCELLENT_MATCH, GOOD_FOUNDATION, REQUIRES_REFLECTION})

_PRESSURE_SCORES = {
    EXCELLENT_MATCH: 20,
    GOOD_FOUNDATION: 50,
    REQUIRES_REFLECTION: 80,
}

DEFAULT_PRESSURE_SCORE = 50


def score_from_status(status) -> int:
    return _PRESSURE_SCORES.get(status, DEFAULT_PRESSURE_SCORE) if isinstance(status, str) else DEFAULT_PRESSURE_SCORE
