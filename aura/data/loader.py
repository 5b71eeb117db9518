"""
Attendance record loading and caching.

This module reads AttendanceRecord snapshots saved from the scraping
service (the JSON body of its get-attendance response).
"""

import json
import logging
from pathlib import Path

from ..config import DATA_DIR
from ..models import AttendanceRecord

logger = logging.getLogger(__name__)


class RecordLoader:
    """
    Loads and caches attendance records.

    Records are cached per resolved path so repeated lookups during a
    session don't re-read the file. Call invalidate() after the file has
    been refreshed from the backend.

    Usage:
        loader = RecordLoader()
        record = loader.load("data/example_record.json")
        record = loader.from_payload(response.json())
    """

    def __init__(self, base_dir: Path = DATA_DIR):
        self.base_dir = Path(base_dir)
        self._cache = {}  # Keyed by resolved path

    def _resolve(self, path) -> Path:
        path = Path(path)
        if not path.is_absolute() and not path.exists():
            path = self.base_dir / path
        return path.resolve()

    def load(self, path) -> AttendanceRecord:
        """
        Load a record from a JSON file.

        Raises:
            FileNotFoundError: the file doesn't exist
            ValueError: the document isn't valid JSON, or isn't a record object
        """
        filepath = self._resolve(path)
        if filepath not in self._cache:
            if not filepath.exists():
                raise FileNotFoundError(f"No attendance record found at: {filepath}")
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._cache[filepath] = self.from_payload(data)
            logger.info("Loaded attendance record from %s", filepath)
        return self._cache[filepath]

    def from_payload(self, data) -> AttendanceRecord:
        """
        Build a record from an already-decoded backend payload.

        Raises:
            ValueError: the payload or one of its sections has the wrong shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"Attendance payload must be a JSON object, got {type(data).__name__}")
        record = AttendanceRecord.from_dict(data)
        logger.debug(
            "Record has %d days, %d subjects, %d timetable days",
            len(record.daily_attendance),
            len(record.subject_attendance),
            len(record.timetable),
        )
        return record

    def invalidate(self, path=None):
        """Drop one cached record, or all of them when path is None."""
        if path is None:
            self._cache.clear()
        else:
            self._cache.pop(self._resolve(path), None)
