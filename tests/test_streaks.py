"""Tests for streak calculation over the visible window."""

from datetime import date
from itertools import product

from habitweek.domain.dates import compute_window
from habitweek.domain.streaks import compute_streak
from habitweek.models.habit import Habit

WINDOW = compute_window(date(2024, 1, 15))


def _habit(*keys, **overrides):
    log = {key: True for key in keys}
    log.update(overrides)
    return Habit(id="h1", name="Run", log=log)


def test_three_day_streak_ending_today():
    habit = _habit("2024-01-13", "2024-01-14", "2024-01-15")

    assert compute_streak(habit, WINDOW.keys) == 3


def test_gap_yesterday_stops_scan():
    habit = _habit("2024-01-13", "2024-01-15")

    assert compute_streak(habit, WINDOW.keys) == 1


def test_today_missing_is_zero():
    habit = _habit("2024-01-12", "2024-01-13", "2024-01-14")

    assert compute_streak(habit, WINDOW.keys) == 0


def test_full_week():
    habit = _habit(*WINDOW.keys)

    assert compute_streak(habit, WINDOW.keys) == 7


def test_days_outside_window_do_not_count():
    habit = _habit("2024-01-08", *WINDOW.keys)

    assert compute_streak(habit, WINDOW.keys) == 7


def test_false_entry_counts_as_missing():
    habit = Habit(id="h1", name="Run", log={"2024-01-14": False, "2024-01-15": True})

    assert compute_streak(habit, WINDOW.keys) == 1


def test_streak_is_bounded_and_matches_trailing_run():
    for pattern in product([False, True], repeat=len(WINDOW.keys)):
        keys = [k for k, done in zip(WINDOW.keys, pattern) if done]
        streak = compute_streak(_habit(*keys), WINDOW.keys)

        assert 0 <= streak <= len(WINDOW.keys)
        expected = 0
        for done in reversed(pattern):
            if not done:
                break
            expected += 1
        assert streak == expected
