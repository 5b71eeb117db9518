"""
Attendance projection data models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ThresholdProjection:
    """
    Recommendation for a single target percentage.

    At most one of the two counts is non-zero. Both are zero when the
    current percentage sits exactly on the target.

    Example for "18/20" against 80%:
        can_skip: 2      (18 - 20 * 0.80)
        must_attend: 0
    """
    can_skip: int = 0
    must_attend: int = 0

    @property
    def achieved(self) -> bool:
        """True when the target is met with no slack left."""
        return self.can_skip == 0 and self.must_attend == 0


# Threshold label ("90%") -> ThresholdProjection, in threshold order
ProjectionResult = dict


@dataclass(frozen=True)
class SubjectProjection:
    """A projection prepared for display, paired with its subject."""
    code: str
    name: str
    count: str
    percentage: str
    projection: dict  # ProjectionResult
