"""
Attendance data models.

Contains the AttendanceRecord snapshot delivered by the scraping service
and the SubjectDirectory derived from its timetable.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SubjectAttendance:
    """
    Attendance summary for one subject.

    Attributes:
        count: "<attended>/<total>" (e.g., "18/20"), or None when the backend
               only reported a percentage
        percentage: Display percentage (e.g., "90%") or "N/A"
    """
    count: Optional[str]
    percentage: str

    @classmethod
    def from_wire(cls, value) -> "SubjectAttendance":
        """Accept both {count, percentage} objects and bare percentage strings."""
        if isinstance(value, Mapping):
            count = value.get("count")
            percentage = value.get("percentage", "N/A")
            return cls(
                count=str(count) if count is not None else None,
                percentage=str(percentage) if percentage is not None else "N/A",
            )
        return cls(count=None, percentage=str(value) if value is not None else "N/A")

    def to_wire(self) -> dict:
        return {"count": self.count, "percentage": self.percentage}


def _section(data: dict, name: str) -> Mapping:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"'{name}' must be an object, got {type(value).__name__}")
    return value


def _string_list(section: str, key, values) -> list:
    """Per-period strings for one day; null entries become ""."""
    if values is None:
        return []
    if not isinstance(values, list):
        raise ValueError(
            f"'{section}' entry {key!r} must be a list, got {type(values).__name__}"
        )
    return [str(v) if v is not None else "" for v in values]


@dataclass
class AttendanceRecord:
    """
    Normalized snapshot of a student's attendance and weekly timetable.

    This is the core data unit that flows through the system. Field names
    mirror the scraper's JSON keys (daily_attendance, subject_attendance,
    timetable) so a record can round-trip to the backend unchanged.

    Example:
        daily_attendance: {"Day 1 (02-09)": ["Present", "Absent", ...]}
        subject_attendance: {"CS301": SubjectAttendance("18/20", "90%")}
        timetable: {"Monday": ["CS301 - Operating Systems[Theory]", "", ...]}
    """
    daily_attendance: dict = field(default_factory=dict)    # date label -> [status per period]
    subject_attendance: dict = field(default_factory=dict)  # code -> SubjectAttendance
    timetable: dict = field(default_factory=dict)           # weekday -> [slot per period]

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        """
        Build a record from the scraper's JSON payload.

        Missing or null sections and null days read as empty.

        Raises:
            ValueError: a section isn't an object, or a day isn't a list
        """
        daily = _section(data, "daily_attendance")
        subjects = _section(data, "subject_attendance")
        timetable = _section(data, "timetable")

        return cls(
            daily_attendance={
                str(day): _string_list("daily_attendance", day, statuses)
                for day, statuses in daily.items()
            },
            subject_attendance={
                str(code): SubjectAttendance.from_wire(value)
                for code, value in subjects.items()
            },
            timetable={
                str(day): _string_list("timetable", day, slots)
                for day, slots in timetable.items()
            },
        )

    def to_dict(self) -> dict:
        """Serialize back to the scraper's wire format."""
        return {
            "daily_attendance": {day: list(s) for day, s in self.daily_attendance.items()},
            "subject_attendance": {
                code: summary.to_wire() for code, summary in self.subject_attendance.items()
            },
            "timetable": {day: list(s) for day, s in self.timetable.items()},
        }


class SubjectDirectory(Mapping):
    """
    Read-only subject code -> display name lookup.

    Built from the timetable by TimetableParser.build_directory(). It is
    never mutated; a new directory is built whenever the record changes.
    """

    def __init__(self, entries=None):
        self._entries = dict(entries or {})

    def __getitem__(self, code: str) -> str:
        return self._entries[code]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SubjectDirectory({self._entries!r})"

    def name_for(self, code: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive lookup of a code's display name."""
        if code in self._entries:
            return self._entries[code]
        lowered = code.lower()
        for known, name in self._entries.items():
            if known.lower() == lowered:
                return name
        return default
