"""
Certificate Classification Engine.

This module assigns an activity-point category to an uploaded certificate
from its filename (or any text extracted from it), and keeps the
student's point total consistent as certificates come and go.

MATCHING:
---------
1. Every category with at least one keyword in the lower-cased input is a
   candidate. The candidate with the highest priority wins; equal
   priorities keep table order.
2. No candidate: context checks in order ("certificate", "participation").
3. Still nothing: the miscellaneous category at 0 points.

classify() never raises. Any input, including an empty string or None,
produces a Classification.
"""

import logging
import threading
import time
from datetime import date
from typing import Optional

from ..config import (
    CERTIFICATE_CATEGORIES,
    CERTIFICATE_CONTEXT_FALLBACKS,
    MISC_CERTIFICATE_POINTS,
    MISC_CERTIFICATE_TYPE,
)
from ..models import Certificate, CertificateCategory, Classification, UserProfile

logger = logging.getLogger(__name__)


def default_categories() -> list:
    """The configured category table as CertificateCategory records."""
    return [
        CertificateCategory(label, frozenset(keywords), points, priority)
        for label, keywords, points, priority in CERTIFICATE_CATEGORIES
    ]


class CertificateClassifier:
    """
    Priority-ranked keyword classifier.

    Usage:
        classifier = CertificateClassifier()
        classifier.classify("nptel_certificate.pdf")
        # Classification(type="NPTEL", points=50)
    """

    def __init__(self, categories=None, context_fallbacks=CERTIFICATE_CONTEXT_FALLBACKS):
        self.categories = list(categories) if categories is not None else default_categories()
        self.context_fallbacks = tuple(context_fallbacks)

    def classify(self, text) -> Classification:
        lowered = text.lower() if isinstance(text, str) else ""

        matches = [c for c in self.categories if c.matches(lowered)]
        if matches:
            # sorted() is stable, so the first-listed category wins a tie
            best = sorted(matches, key=lambda c: c.priority, reverse=True)[0]
            return Classification(type=best.label, points=best.points)

        for keyword, label, points in self.context_fallbacks:
            if keyword in lowered:
                return Classification(type=label, points=points)

        return Classification(type=MISC_CERTIFICATE_TYPE, points=MISC_CERTIFICATE_POINTS)


_default_classifier = CertificateClassifier()


def classify(text) -> Classification:
    """Classify with the default category table."""
    return _default_classifier.classify(text)


# =============================================================================
# PROFILE REDUCERS
# =============================================================================
# Both return a new UserProfile; the points total and the certificate list
# always change together.

def add_certificate(profile: UserProfile, certificate: Certificate) -> UserProfile:
    if any(c.id == certificate.id for c in profile.certificates):
        raise ValueError(f"Certificate id already in profile: {certificate.id}")
    return UserProfile(
        username=profile.username,
        total_points=profile.total_points + certificate.points,
        certificates=profile.certificates + (certificate,),
    )


def remove_certificate(profile: UserProfile, certificate_id: str) -> UserProfile:
    removed = next((c for c in profile.certificates if c.id == certificate_id), None)
    if removed is None:
        return profile
    return UserProfile(
        username=profile.username,
        total_points=profile.total_points - removed.points,
        certificates=tuple(c for c in profile.certificates if c.id != certificate_id),
    )


class CertificateIssuer:
    """
    Creates Certificate records with session-unique ids.

    Ids are "cert-<epoch milliseconds>". Two certificates issued within the
    same millisecond get consecutive numbers, so ids are strictly
    increasing for the life of the issuer.
    """

    def __init__(self, clock=time.time, today=date.today):
        self._clock = clock
        self._today = today
        self._last_ms = 0
        self._lock = threading.Lock()

    def _next_id(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            self._last_ms = max(now_ms, self._last_ms + 1)
            return f"cert-{self._last_ms}"

    def issue(self, filename: str, classification: Optional[Classification] = None) -> Certificate:
        classification = classification or classify(filename)
        certificate = Certificate(
            id=self._next_id(),
            name=filename,
            type=classification.type,
            points=classification.points,
            date=self._today().isoformat(),
        )
        logger.info("Issued %s: %s (%d points)", certificate.id, certificate.type, certificate.points)
        return certificate
