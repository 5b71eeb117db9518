"""
Tests for the local intent resolver: branch order, day/hour parsing,
subject matching and the NoLocalMatch signal.
"""
import pytest
from factories import make_record

from aura.config import HELP_MESSAGE, NO_DATA_MESSAGE
from aura.engines.intent import IntentResolver
from aura.models import Answer, NoLocalMatch


@pytest.fixture
def resolver():
    return IntentResolver()


def _text(result):
    assert isinstance(result, Answer), f"expected an Answer, got {result!r}"
    return result.text


# ─── No data ──────────────────────────────────────────────────────────────────

class TestNoRecord:
    def test_missing_record_short_circuits(self, resolver):
        assert resolver.resolve("what's my 3rd hour on tuesday", None) == Answer(NO_DATA_MESSAGE)

    def test_missing_record_even_for_unknown_questions(self, resolver):
        assert resolver.resolve("tell me a joke", None) == Answer(NO_DATA_MESSAGE)


# ─── Timetable branch ─────────────────────────────────────────────────────────

class TestTimetableBranch:
    def test_ordinal_hour_is_one_based(self, resolver, record):
        result = resolver.resolve("what's my 3rd hour on tuesday", record)
        assert _text(result) == "Your 3rd hour on Tuesday is C."

    def test_hour_without_suffix(self, resolver, record):
        assert _text(resolver.resolve("tuesday 1 hour", record)) == "Your 1 hour on Tuesday is A."

    def test_query_case_ignored(self, resolver, record):
        assert _text(resolver.resolve("What's my 2nd HOUR on TUESDAY?", record)).endswith("is B.")

    def test_hour_out_of_range(self, resolver, record):
        result = resolver.resolve("what's my 5th hour on tuesday", record)
        assert _text(result) == "I don't have information about that hour on Tuesday."

    def test_zeroth_hour_out_of_range(self, resolver, record):
        result = resolver.resolve("0th hour on tuesday", record)
        assert "don't have information" in _text(result)

    def test_full_day_listing(self, resolver, record):
        result = resolver.resolve("show my schedule for tuesday", record)
        assert _text(result) == "Your schedule for Tuesday is:\n1. A\n2. B\n3. C\n4. D"

    def test_full_day_keeps_raw_slots(self, resolver, record):
        text = _text(resolver.resolve("monday timetable", record))
        assert "1. CS101 - Data Structures[Theory]" in text
        assert "3. No Class" in text

    def test_lowercase_timetable_keys(self, resolver):
        record = make_record(timetable={"tuesday": ["X", "Y"]})
        assert _text(resolver.resolve("2nd hour tuesday", record)) == "Your 2nd hour on Tuesday is Y."

    def test_day_missing_from_timetable_falls_through(self, resolver, record):
        assert isinstance(resolver.resolve("what class do i have on friday", record), NoLocalMatch)

    def test_dayless_query_falls_through_to_generative(self, resolver, record):
        assert isinstance(resolver.resolve("what's my next class", record), NoLocalMatch)

    def test_dayless_query_reaches_later_branches(self, resolver, record):
        text = _text(resolver.resolve("class attendance", record))
        assert text.startswith("Here's your attendance breakdown:")

    def test_weekday_without_keyword_is_not_timetable(self, resolver, record):
        assert isinstance(resolver.resolve("is tuesday a holiday", record), NoLocalMatch)


# ─── Attendance branch ────────────────────────────────────────────────────────

class TestAttendanceBranch:
    def test_subject_code_match(self, resolver, record):
        text = _text(resolver.resolve("my attendance for CS101", record))
        assert "85%" in text
        assert text == "Your attendance for CS101 is 85%."

    def test_subject_code_case_insensitive(self, resolver, record):
        assert "25%" in _text(resolver.resolve("attendance in ma201?", record))

    def test_subject_name_match(self, resolver, record):
        text = _text(resolver.resolve("what's my attendance for discrete mathematics", record))
        assert text == "Your attendance for MA201 is 25%."

    def test_full_listing(self, resolver, record):
        text = _text(resolver.resolve("show my attendance", record))
        assert text == (
            "Here's your attendance breakdown:\n"
            "CS101: 85%\n"
            "MA201: 25%\n"
            "HS101: N/A"
        )

    def test_longer_code_wins_over_its_prefix(self, resolver):
        record = make_record(subjects={"CS1": "50%", "CS101": "77%"})
        assert _text(resolver.resolve("attendance for cs101", record)) == "Your attendance for CS101 is 77%."
        assert _text(resolver.resolve("attendance for cs1", record)) == "Your attendance for CS1 is 50%."

    def test_bare_percentage_wire_format(self, resolver):
        record = make_record(subjects={"CS101": "77%"})
        assert _text(resolver.resolve("cs101 attendance", record)) == "Your attendance for CS101 is 77%."


# ─── Daily status branch ──────────────────────────────────────────────────────

class TestDailyStatusBranch:
    def test_lists_dates_in_numeric_order(self, resolver, record):
        text = _text(resolver.resolve("was i absent this week", record))
        lines = text.split("\n")
        assert lines[0] == "Here's your daily attendance record:"
        assert lines[1].startswith("Day 1:")
        assert lines[2].startswith("Day 2:")
        assert lines[3].startswith("Day 10:")

    def test_statuses_comma_joined(self, resolver, record):
        text = _text(resolver.resolve("when was i present", record))
        assert "Day 2: Absent, Absent, Present, Present, Present, Present" in text

    def test_attendance_branch_takes_precedence(self, resolver, record):
        """'daily attendance' also contains 'attendance', which is checked first."""
        text = _text(resolver.resolve("show daily attendance", record))
        assert text.startswith("Here's your attendance breakdown:")


# ─── Help and no match ────────────────────────────────────────────────────────

class TestHelpAndNoMatch:
    def test_help(self, resolver, record):
        assert resolver.resolve("help", record) == Answer(HELP_MESSAGE)

    def test_what_can_you_do(self, resolver, record):
        assert resolver.resolve("What can you do?", record) == Answer(HELP_MESSAGE)

    def test_unrelated_question(self, resolver, record):
        assert resolver.resolve("who won the match yesterday", record) == NoLocalMatch()

    def test_empty_query(self, resolver, record):
        assert isinstance(resolver.resolve("", record), NoLocalMatch)

    def test_resolution_is_repeatable(self, resolver, record):
        q = "what's my 3rd hour on tuesday"
        assert resolver.resolve(q, record) == resolver.resolve(q, record)

    def test_explicit_directory_used(self, resolver, record):
        from aura.models import SubjectDirectory
        directory = SubjectDirectory({"CS101": "Algorithms"})
        text = _text(resolver.resolve("attendance in algorithms", record, directory))
        assert text == "Your attendance for CS101 is 85%."
