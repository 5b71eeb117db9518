"""
Decision engines.

This package contains the pure logic of the assistant: attendance
projections, local intent resolution and certificate classification.
"""

from .projection import AttendanceProjectionEngine, project
from .intent import IntentResolver
from .certificate import (
    CertificateClassifier,
    CertificateIssuer,
    add_certificate,
    classify,
    remove_certificate,
)

__all__ = [
    "AttendanceProjectionEngine",
    "project",
    "IntentResolver",
    "CertificateClassifier",
    "CertificateIssuer",
    "add_certificate",
    "classify",
    "remove_certificate",
]
