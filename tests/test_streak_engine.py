from datetime import datetime, timedelta, timezone

import pytest

from historybits.streaks.engine import compute_streak, elapsed_windows


NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def ago(**kwargs) -> datetime:
    return NOW - timedelta(**kwargs)


def test_ninety_seconds_counts_as_one_window_and_increments():
    result = compute_streak(5, ago(seconds=90), NOW)
    assert result.new_streak == 6
    assert result.streak_lost is False
    assert result.previous_streak == 5


def test_three_minutes_resets_and_reports_loss():
    result = compute_streak(5, ago(minutes=3), NOW)
    assert result.new_streak == 1
    assert result.streak_lost is True


def test_reset_from_zero_is_not_a_loss():
    result = compute_streak(0, ago(minutes=10), NOW)
    assert result.new_streak == 1
    assert result.streak_lost is False


@pytest.mark.parametrize("seconds", [0, 1, 30, 59])
def test_same_window_leaves_streak_unchanged(seconds):
    result = compute_streak(4, ago(seconds=seconds), NOW)
    assert result.new_streak == 4
    assert result.streak_lost is False


@pytest.mark.parametrize("seconds", [60, 61, 119])
def test_exactly_one_window_increments(seconds):
    result = compute_streak(2, ago(seconds=seconds), NOW)
    assert result.new_streak == 3
    assert result.streak_lost is False


def test_two_windows_already_resets():
    result = compute_streak(9, ago(seconds=120), NOW)
    assert result.new_streak == 1
    assert result.streak_lost is True


def test_last_login_always_becomes_now():
    for previous, last in [(0, ago(days=3)), (3, ago(seconds=70)), (3, ago(seconds=5))]:
        assert compute_streak(previous, last, NOW).last_login == NOW


def test_missing_last_login_starts_a_new_streak():
    result = compute_streak(0, None, NOW)
    assert result.new_streak == 1
    assert result.streak_lost is False


def test_naive_timestamps_are_treated_as_utc():
    naive = (NOW - timedelta(seconds=90)).replace(tzinfo=None)
    assert elapsed_windows(naive, NOW) == 1
    assert compute_streak(1, naive, NOW).new_streak == 2


def test_clock_skew_is_a_no_op():
    result = compute_streak(3, NOW + timedelta(minutes=5), NOW)
    assert result.new_streak == 3
    assert result.streak_lost is False
