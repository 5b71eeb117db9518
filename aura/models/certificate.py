"""
Certificate and activity-point data models.

Contains the classifier's category table entry, its result, the
Certificate issued at upload time and the UserProfile that aggregates
points.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CertificateCategory:
    """
    One row of the classifier's priority-ranked keyword table.

    Example:
        label: "Hackathon"
        keywords: {"hackathon", "coding competition", ...}
        points: 40
        priority: 9
    """
    label: str
    keywords: frozenset
    points: int
    priority: int

    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)


@dataclass(frozen=True)
class Classification:
    type: str
    points: int


@dataclass(frozen=True)
class Certificate:
    """
    A classified upload.

    Immutable once issued; removing it from a profile reverses its points.
    """
    id: str       # "cert-<epoch ms>", unique per session
    name: str     # Original filename
    type: str     # Category label
    points: int
    date: str     # ISO date of issue


@dataclass(frozen=True)
class UserProfile:
    """
    Activity-point totals for one student.

    total_points always equals the sum of the certificates' points; use
    add_certificate()/remove_certificate() from engines.certificate to get
    an updated profile rather than building one by hand.
    """
    username: str = "Student"
    total_points: int = 0
    certificates: tuple = field(default_factory=tuple)
