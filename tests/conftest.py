"""
Shared pytest fixtures for the AURA test suite.
No fixture touches the network: the generative backend is always stubbed.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import sys
import os

_tests_dir = os.path.dirname(__file__)
_root_dir  = os.path.join(_tests_dir, "..")
for _p in (_tests_dir, _root_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

os.environ["GEMINI_API_KEY"] = "<placeholder>"


import pytest

from factories import make_record, StubFallback

from aura.assistant import AcademicAssistant
from aura.data import TimetableParser


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def directory(record):
    return TimetableParser.build_directory(record.timetable)


@pytest.fixture
def stub_fallback():
    return StubFallback()


@pytest.fixture
def assistant(record, stub_fallback):
    return AcademicAssistant(record, username="asha", fallback=stub_fallback)
