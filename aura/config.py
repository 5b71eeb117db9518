"""
Configuration constants for the AURA assistant.

This module contains the thresholds, keyword tables, canned messages and
backend settings used throughout the engines. Centralizing these makes it
easy to adjust behavior as attendance or activity-point policies change.

Environment overrides (read from the process environment or a .env file):
    GEMINI_API_KEY          key for the generative fallback backend
    AURA_GEMINI_MODEL       model name (default: gemini-2.0-flash)
    AURA_FALLBACK_TIMEOUT   seconds to wait for the backend (default: 20)
    AURA_RECORD_PATH        attendance record used by the CLI
    AURA_LOG_LEVEL          logging level for the CLI (default: WARNING)
    AURA_USERNAME           name the assistant addresses the student by
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=False)

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_RECORD_PATH = DATA_DIR / "example_record.json"


# =============================================================================
# ATTENDANCE
# =============================================================================

# Target percentages, in display order
PROJECTION_THRESHOLDS = (90, 80, 75)

# Percentage value the scraper reports when a subject has no sessions yet
PERCENTAGE_UNAVAILABLE = "N/A"

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

NO_CLASS = "No Class"


# =============================================================================
# INTENT RESOLUTION
# =============================================================================

TIMETABLE_KEYWORDS = ("timetable", "schedule", "class", "hour")
ATTENDANCE_KEYWORDS = ("attendance",)
DAILY_STATUS_KEYWORDS = ("present", "absent", "daily attendance")
HELP_KEYWORDS = ("help", "what can you do")

NO_DATA_MESSAGE = "Sorry, I don't have access to your attendance data right now."

HELP_MESSAGE = (
    "I can help you with information about your timetable, attendance, and "
    "academic records. Try asking questions like 'What's my 3rd hour on "
    "Tuesday?' or 'What's my attendance for Mathematics?'"
)

FALLBACK_EMPTY_MESSAGE = "I couldn't generate a response at this time."
FALLBACK_ERROR_MESSAGE = "Sorry, I encountered an error connecting to my intelligence system."

ASSISTANT_PERSONA = "You are AURA, an Academic Utility and Resource Allocator assistant."


# =============================================================================
# ACTIVITY POINTS
# =============================================================================
# Each entry: (label, keywords, points, priority). Higher priority wins when
# several categories match; equal priorities keep table order.

CERTIFICATE_CATEGORIES = (
    ("NPTEL", (
        "nptel",
        "national programme on technology enhanced learning",
        "online certification",
        "coursera nptel",
        "iitm nptel",
        "online assignments",
        "swayam",
        "skill india",
    ), 50, 10),
    ("Hackathon", (
        "hackathon",
        "innovation challenge",
        "coding competition",
        "tech challenge",
        "startup hackathon",
        "innovation sprint",
    ), 40, 9),
    ("Internship", (
        "internship certificate",
        "industrial training",
        "work experience",
        "summer internship",
        "professional internship",
        "industry internship",
    ), 30, 8),
    ("Professional Development", (
        "professional development",
        "workshop certificate",
        "seminar completion",
        "conference participation",
        "webinar certificate",
        "skill development workshop",
    ), 20, 7),
    ("Academic Achievement", (
        "academic achievement",
        "course completion",
        "training completion",
        "certification of merit",
        "academic excellence",
        "course certificate",
    ), 15, 6),
    ("Leadership & Soft Skills", (
        "leadership",
        "communication skills",
        "soft skills",
        "personality development",
        "team management",
    ), 25, 5),
    ("Technical Certification", (
        "technical certification",
        "programming certification",
        "cloud certification",
        "aws",
        "azure",
        "google cloud",
        "cybersecurity certification",
    ), 35, 4),
)

# Checked in order only when no category keyword matched: (substring, label, points)
CERTIFICATE_CONTEXT_FALLBACKS = (
    ("certificate", "Academic Achievement", 15),
    ("participation", "Professional Development", 10),
)

MISC_CERTIFICATE_TYPE = "Generic/Miscellaneous Certificate"
MISC_CERTIFICATE_POINTS = 0

# Upload validation applied before classification
MAX_UPLOAD_BYTES = 16 * 1024 * 1024
ALLOWED_UPLOAD_EXTENSIONS = {".pdf", ".jpg", ".jpeg", ".png"}
ALLOWED_UPLOAD_TYPES = {"application/pdf", "image/jpeg", "image/jpg", "image/png"}


# =============================================================================
# GENERATIVE FALLBACK BACKEND
# =============================================================================

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_FALLBACK_TIMEOUT = 20.0
# Retries on 429/5xx only; the request is never replayed after a timeout
FALLBACK_MAX_RETRIES = 2
FALLBACK_BACKOFF_FACTOR = 1.0


def _is_placeholder(value: str) -> bool:
    """Return True if the value looks like an unfilled template placeholder."""
    return not value or "<" in value or value.startswith("your-") or value == "PLACEHOLDER"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    gemini_model: str
    fallback_timeout: float
    record_path: Path
    log_level: str
    username: str = ""

    @property
    def fallback_configured(self) -> bool:
        """True when the generative backend key is a real value."""
        return not _is_placeholder(self.gemini_api_key)


def get_settings() -> Settings:
    """Build settings from the current environment."""
    try:
        timeout = float(os.environ.get("AURA_FALLBACK_TIMEOUT", DEFAULT_FALLBACK_TIMEOUT))
    except ValueError:
        timeout = DEFAULT_FALLBACK_TIMEOUT

    return Settings(
        gemini_api_key=os.environ.get("GEMINI_API_KEY", ""),
        gemini_model=os.environ.get("AURA_GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        fallback_timeout=timeout,
        record_path=Path(os.environ.get("AURA_RECORD_PATH", DEFAULT_RECORD_PATH)),
        log_level=os.environ.get("AURA_LOG_LEVEL", "WARNING").upper(),
        username=os.environ.get("AURA_USERNAME", "").strip(),
    )
