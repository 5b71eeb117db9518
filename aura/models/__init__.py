"""
Data models for the AURA assistant.

This package contains all dataclasses used throughout the system.
These serve as "contracts" between the engines, the data layer and the UI.
"""

from .attendance import AttendanceRecord, SubjectAttendance, SubjectDirectory
from .projection import ThresholdProjection, ProjectionResult, SubjectProjection
from .intent import Answer, NoLocalMatch, Resolution
from .certificate import CertificateCategory, Classification, Certificate, UserProfile

__all__ = [
    # Attendance models
    "AttendanceRecord",
    "SubjectAttendance",
    "SubjectDirectory",
    # Projection models
    "ThresholdProjection",
    "ProjectionResult",
    "SubjectProjection",
    # Intent results
    "Answer",
    "NoLocalMatch",
    "Resolution",
    # Certificate models
    "CertificateCategory",
    "Classification",
    "Certificate",
    "UserProfile",
]
