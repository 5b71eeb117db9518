"""
Timetable parsing.

This module turns the scraper's free-text timetable slots into the
SubjectDirectory and provides the display orderings used by the UI.
"""

import re

from ..config import NO_CLASS, WEEKDAYS
from ..models import SubjectDirectory

# "CS301 - Operating Systems[Theory]" -> ("CS301", "Operating Systems")
SLOT_PATTERN = re.compile(r"^([A-Z]+\d+)\s*-\s*(.+?)(?:\s*\[[^\]]*\].*)?$")

_NUMBER_TOKEN = re.compile(r"\d+")


class TimetableParser:
    """
    Parses timetable slot strings.

    SLOT FORMAT:
    A slot is either empty, "No Class", or "<CODE> - <Full Name>" with an
    optional bracketed qualifier such as "[Theory]" or "[Lab]". The code is
    a run of capitals followed by digits.

    The first slot seen for a code decides its display name; later slots
    for the same code (e.g. its lab session) don't rename it.
    """

    @staticmethod
    def parse_slot(slot: str):
        """Return (code, name) for a subject slot, or None."""
        if not slot:
            return None
        match = SLOT_PATTERN.match(slot.strip())
        if not match:
            return None
        return match.group(1), match.group(2).strip()

    @classmethod
    def build_directory(cls, timetable: dict) -> SubjectDirectory:
        """Scan every slot of every day and collect code -> name."""
        entries = {}
        for slots in (timetable or {}).values():
            for slot in slots:
                parsed = cls.parse_slot(slot)
                if parsed and parsed[0] not in entries:
                    entries[parsed[0]] = parsed[1]
        return SubjectDirectory(entries)

    @classmethod
    def display_subject(cls, slot: str) -> str:
        """Format a slot for display: the subject's name, or "No Class"."""
        if not slot or slot.strip() == NO_CLASS:
            return NO_CLASS
        parsed = cls.parse_slot(slot)
        return parsed[1] if parsed else slot

    @staticmethod
    def ordered_days(timetable: dict) -> list:
        """Timetable days in week order; unrecognised day names go last."""
        order = {day.lower(): i for i, day in enumerate(WEEKDAYS)}
        return sorted(
            timetable or {},
            key=lambda day: (order.get(day.strip().lower(), len(order)), day),
        )

    @staticmethod
    def ordered_dates(daily_attendance: dict) -> list:
        """
        Date labels ordered by their first embedded number.

        The scraper's keys arrive in arbitrary order ("Day 10", "Day 2", ...).
        Labels without a number go last, alphabetically.
        """
        def sort_key(label):
            token = _NUMBER_TOKEN.search(label)
            if token:
                return (0, int(token.group()), label)
            return (1, 0, label)

        return sorted(daily_attendance or {}, key=sort_key)

    @staticmethod
    def find_day(timetable: dict, day: str):
        """Case-insensitive lookup of a weekday's slots; None if absent."""
        if not timetable:
            return None
        if day in timetable:
            return timetable[day]
        wanted = day.lower()
        for key, slots in timetable.items():
            if key.strip().lower() == wanted:
                return slots
        return None
