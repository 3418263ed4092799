"""
Heuristic sleep quality score.

Used when a session is ended without an explicit quality score.

Scoring
-------
Base score 50, then:

- duration 7-9h: +30; 6-7h or 9-10h: +20; anything else: +10
- each of caffeine / screen_time / stress: -10
- each of exercise / meditation / reading: +10

The result is clamped to 0-100.
"""

from typing import Iterable

NEGATIVE_ACTIVITIES = frozenset({"caffeine", "screen_time", "stress"})
POSITIVE_ACTIVITIES = frozenset({"exercise", "meditation", "reading"})

_BASE_SCORE = 50


def _duration_points(duration_minutes: int) -> int:
    if 420 <= duration_minutes <= 540:
        return 30
    if 360 <= duration_minutes < 420 or 540 < duration_minutes <= 600:
        return 20
    return 10


def calculate_sleep_quality(duration_minutes: int, activities: Iterable[str]) -> int:
    """Score a night of sleep from its duration and the day's activities."""
    score = _BASE_SCORE + _duration_points(duration_minutes)
    for activity in activities:
        if activity in NEGATIVE_ACTIVITIES:
            score -= 10
        elif activity in POSITIVE_ACTIVITIES:
            score += 10
    return max(0, min(100, score))
