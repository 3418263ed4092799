"""Tests for the heuristic sleep quality score."""

import pytest

from dreamweaver.services.sleep_scoring import calculate_sleep_quality


class TestDuration:
    @pytest.mark.parametrize(
        "minutes, expected",
        [(480, 80), (420, 80), (540, 80), (400, 70), (560, 70), (300, 60), (700, 60), (0, 60)],
    )
    def test_duration_bands(self, minutes, expected):
        assert calculate_sleep_quality(minutes, []) == expected


class TestActivities:
    def test_negative_activities(self):
        assert calculate_sleep_quality(480, ["caffeine", "screen_time"]) == 60

    def test_positive_activities(self):
        assert calculate_sleep_quality(480, ["exercise"]) == 90

    def test_unknown_activities_ignored(self):
        assert calculate_sleep_quality(480, ["gardening"]) == 80

    def test_clamped_to_range(self):
        assert calculate_sleep_quality(480, ["exercise", "meditation", "reading"]) == 100
        assert calculate_sleep_quality(0, ["caffeine", "screen_time", "stress"] * 3) == 0
