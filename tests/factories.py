"""
Factory helpers for building test objects.
Imported by conftest.py fixtures AND directly by test modules.
"""
from __future__ import annotations

import sys
import os

# Ensure both the repo root and tests/ are importable in all test files
_tests_dir = os.path.dirname(__file__)
_root_dir  = os.path.join(_tests_dir, "..")
for _p in (_tests_dir, _root_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

# Never call the real generative backend during tests
os.environ["GEMINI_API_KEY"] = "<placeholder>"

from aura.data import FallbackError
from aura.models import AttendanceRecord, Certificate


DEFAULT_TIMETABLE = {
    "Monday": [
        "CS101 - Data Structures[Theory]",
        "MA201 - Discrete Mathematics",
        "No Class",
        "CS101 - Data Structures[Lab]",
        "",
        "HS101 - Professional Ethics",
    ],
    "Tuesday": ["A", "B", "C", "D"],
}

DEFAULT_SUBJECTS = {
    "CS101": {"count": "17/20", "percentage": "85%"},
    "MA201": {"count": "5/20", "percentage": "25%"},
    "HS101": {"count": "0/0", "percentage": "N/A"},
}

DEFAULT_DAILY = {
    "Day 10": ["Present", "Absent", "Present", "Present", "Present", "Present"],
    "Day 2": ["Absent", "Absent", "Present", "Present", "Present", "Present"],
    "Day 1": ["Present", "Present", "Present", "Present", "Present", "Not Marked"],
}


def make_payload(
    timetable: dict | None = None,
    subjects: dict | None = None,
    daily: dict | None = None,
) -> dict:
    return {
        "daily_attendance": DEFAULT_DAILY if daily is None else daily,
        "subject_attendance": DEFAULT_SUBJECTS if subjects is None else subjects,
        "timetable": DEFAULT_TIMETABLE if timetable is None else timetable,
    }


def make_record(
    timetable: dict | None = None,
    subjects: dict | None = None,
    daily: dict | None = None,
) -> AttendanceRecord:
    return AttendanceRecord.from_dict(make_payload(timetable, subjects, daily))


def make_certificate(
    cert_id: str = "cert-1",
    name: str = "nptel_certificate.pdf",
    cert_type: str = "NPTEL",
    points: int = 50,
) -> Certificate:
    return Certificate(id=cert_id, name=name, type=cert_type, points=points, date="2024-09-02")


class StubFallback:
    """Stands in for GenerativeFallback; records every call."""

    def __init__(self, reply: str | None = "generated reply", error: bool = False):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, query, record_payload=None, username=""):
        self.calls.append((query, record_payload, username))
        if self.error:
            raise FallbackError("backend unreachable")
        return self.reply
