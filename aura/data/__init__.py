"""
Data loading, parsing and backend access.

This package handles all file and network I/O plus timetable parsing.
"""

from .loader import RecordLoader
from .parser import TimetableParser
from .generative import GenerativeFallback, FallbackError

__all__ = ["RecordLoader", "TimetableParser", "GenerativeFallback", "FallbackError"]
