"""
Tests for the attendance projection engine.
"""
import pytest

from aura.engines.projection import (
    AttendanceProjectionEngine,
    parse_count,
    project,
    project_threshold,
)
from aura.models import ThresholdProjection


class TestParseCount:
    def test_valid_count(self):
        assert parse_count("18/20") == (18, 20)

    def test_whitespace_tolerated(self):
        assert parse_count(" 18 / 20 ") == (18, 20)

    @pytest.mark.parametrize("count", ["0/10", "10/0", "0/0", "abc", "", "18/20/3", "-5/20", "5.5/20"])
    def test_unusable_counts_return_none(self, count):
        assert parse_count(count) is None

    def test_non_string_returns_none(self):
        assert parse_count(None) is None
        assert parse_count(18) is None


class TestProject:
    def test_returns_three_thresholds_in_order(self):
        result = project("18/20")
        assert list(result) == ["90%", "80%", "75%"]

    def test_exactly_at_target_is_achieved(self):
        """18/20 is exactly 90%: no slack and nothing owed."""
        result = project("18/20")
        assert result["90%"] == ThresholdProjection(0, 0)
        assert result["90%"].achieved

    def test_above_target_can_skip(self):
        result = project("18/20")
        assert result["80%"] == ThresholdProjection(can_skip=2, must_attend=0)
        assert result["75%"] == ThresholdProjection(can_skip=3, must_attend=0)

    def test_below_target_must_attend(self):
        result = project("5/20")
        assert result["90%"] == ThresholdProjection(can_skip=0, must_attend=13)
        assert result["80%"] == ThresholdProjection(can_skip=0, must_attend=11)
        assert result["75%"] == ThresholdProjection(can_skip=0, must_attend=10)

    def test_must_attend_rounds_up(self):
        # 75% of 21 is 15.75 -> 16 needed
        assert project("10/21")["75%"].must_attend == 6

    def test_can_skip_rounds_down(self):
        # 19 - 20 * 0.75 = 4
        assert project("19/20")["75%"].can_skip == 4
        # 7 - 9 * 0.75 = 0.25 -> floor 0
        assert project("7/9")["75%"].can_skip == 0

    def test_at_most_one_field_nonzero(self):
        for count in ["1/3", "2/3", "9/10", "45/50", "30/31", "12/40"]:
            for projection in project(count).values():
                assert projection.can_skip >= 0 and projection.must_attend >= 0
                assert not (projection.can_skip and projection.must_attend)

    @pytest.mark.parametrize("count", ["0/10", "10/0", "abc"])
    def test_malformed_returns_none(self, count):
        assert project(count) is None

    def test_idempotent(self):
        assert project("14/20") == project("14/20")

    def test_custom_thresholds(self):
        assert list(project("14/20", thresholds=(60,))) == ["60%"]


class TestProjectThreshold:
    def test_full_attendance(self):
        assert project_threshold(20, 20, 90) == ThresholdProjection(can_skip=2)

    def test_one_short(self):
        assert project_threshold(14, 20, 75) == ThresholdProjection(must_attend=1)


class TestAttendanceProjectionEngine:
    def test_engine_uses_its_thresholds(self):
        engine = AttendanceProjectionEngine(thresholds=(50, 100))
        result = engine.project("10/20")
        assert list(result) == ["50%", "100%"]
        assert result["50%"].achieved
        assert result["100%"].must_attend == 10

    def test_engine_malformed(self):
        assert AttendanceProjectionEngine().project("nope") is None
