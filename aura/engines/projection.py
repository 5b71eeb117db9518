"""
Attendance Projection Engine.

This module answers "how many classes can I skip, or must I still attend,
to stay at 90% / 80% / 75%?" for a subject's attended/total count.

FORMULAS (t = target percentage, a = attended, b = total):
----------------------------------------------------------
At or above target:   can_skip    = floor(a - b * t / 100)
Below target:         must_attend = ceil(b * t / 100) - a

The total is held fixed: the numbers describe the classes already
scheduled, not future sessions that would also grow the total.
Everything is computed in integer arithmetic so that 18/20 is exactly 90%
(floating point would make it 90.00000000000001).
"""

import re
from typing import Optional

from ..config import PROJECTION_THRESHOLDS
from ..models import ThresholdProjection

COUNT_PATTERN = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*$")


def parse_count(count) -> Optional[tuple]:
    """Parse "attended/total" into two positive ints, or None."""
    if not isinstance(count, str):
        return None
    match = COUNT_PATTERN.match(count)
    if not match:
        return None
    attended, total = int(match.group(1)), int(match.group(2))
    if not attended or not total:
        return None
    return attended, total


def project_threshold(attended: int, total: int, target: int) -> ThresholdProjection:
    """Projection for a single target percentage."""
    # attended / total * 100 >= target, without division
    if attended * 100 >= total * target:
        return ThresholdProjection(can_skip=(attended * 100 - total * target) // 100)
    required = -(-total * target // 100)  # ceil(total * target / 100)
    return ThresholdProjection(must_attend=required - attended)


def project(count, thresholds=PROJECTION_THRESHOLDS) -> Optional[dict]:
    """
    Project a subject's "attended/total" count against each threshold.

    Returns:
        {"90%": ThresholdProjection, "80%": ..., "75%": ...}
        or None when the count doesn't parse or has a zero component.
    """
    parsed = parse_count(count)
    if parsed is None:
        return None
    attended, total = parsed
    return {f"{t}%": project_threshold(attended, total, t) for t in thresholds}


class AttendanceProjectionEngine:
    """
    Projection calculator bound to a set of thresholds.

    The engine holds no state beyond its thresholds, so one instance can
    serve any number of callers.
    """

    def __init__(self, thresholds=PROJECTION_THRESHOLDS):
        self.thresholds = tuple(thresholds)

    def project(self, count) -> Optional[dict]:
        return project(count, self.thresholds)
