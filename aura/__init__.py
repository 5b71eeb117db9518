"""
AURA - Academic Utility and Resource Allocator
===============================================

Decision-support engines for a student dashboard: attendance projections,
a local question router over timetable/attendance data, and an
activity-points certificate classifier.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                          ENGINE LAYER                                    │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌───────────────────────┐ ┌────────────────┐ ┌──────────────────────┐  │
│  │AttendanceProjection-  │ │ IntentResolver │ │CertificateClassifier │  │
│  │Engine (skip/attend)   │ │ (Answer |      │ │(priority keywords)   │  │
│  │                       │ │  NoLocalMatch) │ │                      │  │
│  └───────────────────────┘ └────────────────┘ └──────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │ RecordLoader /          │  │       GenerativeFallback            │  │
│  │ TimetableParser         │  │   (only network call, on miss)      │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     AcademicAssistant                                    │
│   (Orchestrator - session record, fallback policy, points profile)      │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                 TerminalDisplay / cli.main                               │
└─────────────────────────────────────────────────────────────────────────┘

USAGE
-----

    from aura import AcademicAssistant, RecordLoader

    record = RecordLoader().load("data/example_record.json")
    assistant = AcademicAssistant(record, username="asha")

    assistant.ask("what's my 2nd hour on monday")
    assistant.attendance_projections()

Running from command line:

    python -m aura [record.json]
"""

# Version
__version__ = "1.0.0"

# Main exports
from .assistant import AcademicAssistant, UploadRejected
from .cli import main

# Model exports (for programmatic use)
from .models import (
    AttendanceRecord,
    SubjectAttendance,
    SubjectDirectory,
    ThresholdProjection,
    SubjectProjection,
    Answer,
    NoLocalMatch,
    CertificateCategory,
    Classification,
    Certificate,
    UserProfile,
)

# Engine exports (for advanced use)
from .engines import (
    AttendanceProjectionEngine,
    IntentResolver,
    CertificateClassifier,
    CertificateIssuer,
    add_certificate,
    classify,
    project,
    remove_certificate,
)

# Data exports
from .data import RecordLoader, TimetableParser, GenerativeFallback, FallbackError

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "AcademicAssistant",
    "UploadRejected",
    "main",
    # Models
    "AttendanceRecord",
    "SubjectAttendance",
    "SubjectDirectory",
    "ThresholdProjection",
    "SubjectProjection",
    "Answer",
    "NoLocalMatch",
    "CertificateCategory",
    "Classification",
    "Certificate",
    "UserProfile",
    # Engines
    "AttendanceProjectionEngine",
    "IntentResolver",
    "CertificateClassifier",
    "CertificateIssuer",
    "add_certificate",
    "classify",
    "project",
    "remove_certificate",
    # Data
    "RecordLoader",
    "TimetableParser",
    "GenerativeFallback",
    "FallbackError",
    # UI
    "TerminalDisplay",
]
