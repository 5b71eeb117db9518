"""
Academic Assistant - Main Orchestrator.

This module contains the AcademicAssistant class that connects the engines
to whatever front end is asking: the terminal CLI, a web handler or tests.
It owns the caller-side policies the engines deliberately leave out:
which subjects get projections, when to call the generative fallback, and
how uploads are validated before classification.
"""

import logging
import threading
from datetime import date
from pathlib import PurePath
from typing import Optional

from .config import (
    ALLOWED_UPLOAD_EXTENSIONS,
    ALLOWED_UPLOAD_TYPES,
    FALLBACK_EMPTY_MESSAGE,
    FALLBACK_ERROR_MESSAGE,
    MAX_UPLOAD_BYTES,
    PERCENTAGE_UNAVAILABLE,
)
from .data import FallbackError, GenerativeFallback, TimetableParser
from .engines import (
    AttendanceProjectionEngine,
    CertificateClassifier,
    CertificateIssuer,
    IntentResolver,
    add_certificate,
    remove_certificate,
)
from .models import Answer, AttendanceRecord, Certificate, SubjectProjection, UserProfile

logger = logging.getLogger(__name__)


class UploadRejected(ValueError):
    """The uploaded file failed type or size validation."""


class AcademicAssistant:
    """
    Main interface for the AURA decision-support engines.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Holds the session's AttendanceRecord and the SubjectDirectory derived
       from it (rebuilt whenever the record is replaced)
    2. Calls the pure engines and applies the display policies around them
    3. Holds the session's activity-points UserProfile; every change goes
       through the add/remove reducers under one lock

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        assistant = AcademicAssistant(record, username="asha")

        assistant.ask("what's my 3rd hour on tuesday")
        assistant.attendance_projections()
        cert = assistant.upload_certificate("nptel_certificate.pdf", 120_000)
        assistant.remove_certificate(cert.id)
    """

    def __init__(self, record: Optional[AttendanceRecord] = None, username: str = "",
                 fallback: Optional[GenerativeFallback] = None):
        self.username = username
        self.resolver = IntentResolver()
        self.projection_engine = AttendanceProjectionEngine()
        self.classifier = CertificateClassifier()
        self.issuer = CertificateIssuer()
        self._fallback = fallback

        self._profile = UserProfile(username=username or "Student")
        self._profile_lock = threading.Lock()

        self.record = None
        self.directory = TimetableParser.build_directory({})
        self.set_record(record)

    @property
    def fallback(self) -> GenerativeFallback:
        # Built lazily so offline use never touches the network settings
        if self._fallback is None:
            self._fallback = GenerativeFallback()
        return self._fallback

    def set_record(self, record: Optional[AttendanceRecord]):
        """Replace the session's record and rebuild the subject directory."""
        self.record = record
        self.directory = TimetableParser.build_directory(record.timetable if record else {})
        if record is not None:
            logger.info("Attendance record set: %d subjects in directory", len(self.directory))

    # -------------------------------------------------------------------------
    # Questions
    # -------------------------------------------------------------------------

    def ask(self, query: str) -> Optional[str]:
        """
        Answer a free-text question.

        Tries the local resolver first; on NoLocalMatch forwards the query
        and the full record to the generative backend. Backend failures
        come back as a fixed apology, never as an exception.

        Returns:
            The answer text, or None for a blank query.
        """
        if not query or not query.strip():
            return None

        result = self.resolver.resolve(query, self.record, self.directory)
        if isinstance(result, Answer):
            return result.text

        payload = self.record.to_dict() if self.record is not None else None
        try:
            text = self.fallback.generate(query, payload, self.username)
        except FallbackError as e:
            logger.warning("Generative fallback failed: %s", e)
            return FALLBACK_ERROR_MESSAGE
        return text if text else FALLBACK_EMPTY_MESSAGE

    # -------------------------------------------------------------------------
    # Attendance
    # -------------------------------------------------------------------------

    def attendance_projections(self) -> list:
        """
        Projections for every displayable subject.

        A subject is skipped when its percentage is "N/A", when its code
        has no entry in the subject directory, or when its count can't be
        projected.
        """
        if self.record is None:
            return []

        results = []
        for code, summary in self.record.subject_attendance.items():
            if summary.percentage == PERCENTAGE_UNAVAILABLE:
                continue
            name = self.directory.get(code)
            if name is None:
                continue
            projection = self.projection_engine.project(summary.count)
            if projection is None:
                logger.debug("No projection for %s (count=%r)", code, summary.count)
                continue
            results.append(SubjectProjection(
                code=code,
                name=name,
                count=summary.count,
                percentage=summary.percentage,
                projection=projection,
            ))
        return results

    def todays_schedule(self, today: Optional[date] = None) -> list:
        """Display names for today's periods (empty on days without a timetable)."""
        if self.record is None:
            return []
        weekday = (today or date.today()).strftime("%A")
        slots = TimetableParser.find_day(self.record.timetable, weekday) or []
        return [TimetableParser.display_subject(slot) for slot in slots]

    # -------------------------------------------------------------------------
    # Activity points
    # -------------------------------------------------------------------------

    @property
    def profile(self) -> UserProfile:
        return self._profile

    @staticmethod
    def validate_upload(filename: str, size_bytes: int, content_type: Optional[str] = None):
        """
        Check an upload before it reaches the classifier.

        Raises:
            UploadRejected: file too large, or not a PDF/JPG/PNG
        """
        if size_bytes > MAX_UPLOAD_BYTES:
            raise UploadRejected("File size exceeds 16MB limit")
        if content_type:
            allowed = content_type.lower() in ALLOWED_UPLOAD_TYPES
        else:
            allowed = PurePath(filename or "").suffix.lower() in ALLOWED_UPLOAD_EXTENSIONS
        if not allowed:
            raise UploadRejected("Invalid file type. Please upload JPG, PNG, or PDF")

    def upload_certificate(self, filename: str, size_bytes: int,
                           content_type: Optional[str] = None) -> Certificate:
        """Validate, classify and record an uploaded certificate."""
        self.validate_upload(filename, size_bytes, content_type)
        certificate = self.issuer.issue(filename, self.classifier.classify(filename))
        with self._profile_lock:
            self._profile = add_certificate(self._profile, certificate)
        return certificate

    def remove_certificate(self, certificate_id: str) -> bool:
        """Remove a certificate and its points. Returns False if the id is unknown."""
        with self._profile_lock:
            updated = remove_certificate(self._profile, certificate_id)
            removed = updated is not self._profile
            self._profile = updated
        if removed:
            logger.info("Removed certificate %s", certificate_id)
        return removed
