"""
Local Intent Resolver.

This module answers free-text questions directly from the student's
AttendanceRecord when it can, and says so explicitly when it can't.

RESOLUTION ORDER (first branch that answers wins):
--------------------------------------------------
1. No record at all            -> fixed "no data" answer
2. Timetable keywords + a day  -> one period, or the whole day
3. "attendance"                -> one subject's percentage, or all of them
4. Present/absent/daily        -> every date's period statuses
5. Help                        -> capability description
6. Anything else               -> NoLocalMatch (caller uses the generative fallback)

A timetable question without a recognisable weekday doesn't stop at
branch 2; the later branches still get their chance.
"""

import logging
import re
from typing import Optional

from ..config import (
    ATTENDANCE_KEYWORDS,
    DAILY_STATUS_KEYWORDS,
    HELP_KEYWORDS,
    HELP_MESSAGE,
    NO_DATA_MESSAGE,
    TIMETABLE_KEYWORDS,
    WEEKDAYS,
)
from ..data.parser import TimetableParser
from ..models import Answer, AttendanceRecord, NoLocalMatch, Resolution, SubjectDirectory

logger = logging.getLogger(__name__)

# "3rd hour", "3 hour", "10th  hour"
HOUR_PATTERN = re.compile(r"(\d+)(st|nd|rd|th)?\s*hour")


def _contains_any(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


class IntentResolver:
    """
    Deterministic query router over structured attendance data.

    The resolver keeps no state between calls: resolve() is a function of
    the query, the record and the subject directory only. Pass the
    directory in when you already have one for the record; otherwise it
    is derived from the record's timetable.

    Usage:
        resolver = IntentResolver()
        result = resolver.resolve("what's my 3rd hour on tuesday", record)
        if isinstance(result, Answer):
            print(result.text)
        else:
            ...  # NoLocalMatch: ask the generative backend
    """

    def resolve(self, query: str, record: Optional[AttendanceRecord],
                directory: Optional[SubjectDirectory] = None) -> Resolution:
        if record is None:
            return Answer(NO_DATA_MESSAGE)

        text = (query or "").strip().lower()
        if directory is None:
            directory = TimetableParser.build_directory(record.timetable)

        for branch in (
            self._timetable_answer,
            self._attendance_answer,
            self._daily_status_answer,
            self._help_answer,
        ):
            answer = branch(text, record, directory)
            if answer is not None:
                logger.debug("Query resolved locally by %s", branch.__name__)
                return answer

        logger.debug("No local match for query")
        return NoLocalMatch()

    # -------------------------------------------------------------------------
    # Branches: each returns an Answer, or None to let the next branch try
    # -------------------------------------------------------------------------

    def _timetable_answer(self, text: str, record: AttendanceRecord,
                          directory: SubjectDirectory) -> Optional[Answer]:
        if not _contains_any(text, TIMETABLE_KEYWORDS):
            return None

        day = next((d for d in WEEKDAYS if d.lower() in text), None)
        if day is None:
            return None
        slots = TimetableParser.find_day(record.timetable, day)
        if slots is None:
            return None

        hour_match = HOUR_PATTERN.search(text)
        if hour_match:
            index = int(hour_match.group(1)) - 1
            if 0 <= index < len(slots):
                return Answer(f"Your {hour_match.group(0)} on {day} is {slots[index]}.")
            return Answer(f"I don't have information about that hour on {day}.")

        periods = "\n".join(f"{i}. {slot}" for i, slot in enumerate(slots, 1))
        return Answer(f"Your schedule for {day} is:\n{periods}")

    def _attendance_answer(self, text: str, record: AttendanceRecord,
                           directory: SubjectDirectory) -> Optional[Answer]:
        if not _contains_any(text, ATTENDANCE_KEYWORDS):
            return None

        subjects = record.subject_attendance
        code = self._match_subject(text, subjects, directory)
        if code is not None:
            return Answer(f"Your attendance for {code} is {subjects[code].percentage}.")

        breakdown = "\n".join(f"{c}: {summary.percentage}" for c, summary in subjects.items())
        return Answer(f"Here's your attendance breakdown:\n{breakdown}")

    @staticmethod
    def _match_subject(text: str, subjects: dict, directory: SubjectDirectory) -> Optional[str]:
        """
        Subject code named in the query: by code first, then by display name.

        Longer codes are tried first so "cs101" isn't claimed by "CS1".
        Codes of equal length keep the record's order.
        """
        for code in sorted(subjects, key=len, reverse=True):
            if code and code.lower() in text:
                return code
        for code in subjects:
            name = directory.name_for(code)
            if name and name.lower() in text:
                return code
        return None

    def _daily_status_answer(self, text: str, record: AttendanceRecord,
                             directory: SubjectDirectory) -> Optional[Answer]:
        if not _contains_any(text, DAILY_STATUS_KEYWORDS):
            return None

        daily = record.daily_attendance
        lines = "\n".join(
            f"{date}: {', '.join(daily[date])}" for date in TimetableParser.ordered_dates(daily)
        )
        return Answer(f"Here's your daily attendance record:\n{lines}")

    def _help_answer(self, text: str, record: AttendanceRecord,
                     directory: SubjectDirectory) -> Optional[Answer]:
        if _contains_any(text, HELP_KEYWORDS):
            return Answer(HELP_MESSAGE)
        return None
