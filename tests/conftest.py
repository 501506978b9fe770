"""
Pytest configuration and shared fixtures.

Puts src/ on sys.path so the suite also runs from a plain checkout, and keeps
ticket numbering isolated between tests.
"""

import os
import sys
from datetime import date
from pathlib import Path

import pytest


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()

os.environ.setdefault("MUSEO_ENVIRONMENT", "dev")
os.environ.setdefault("MUSEO_LOG_LEVEL", "WARNING")

FIXED_TODAY = date(2024, 1, 15)


@pytest.fixture(autouse=True)
def fresh_default_sequence(monkeypatch):
    """Every test starts with an unused process-wide sequence."""
    from museo.utils import sequence

    monkeypatch.delenv("MUSEO_SEQUENCE_START", raising=False)
    sequence.reset_default_sequence()
    yield
    sequence.reset_default_sequence()


@pytest.fixture
def ticket_sequence():
    from museo.utils.sequence import TicketSequence

    return TicketSequence()


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the calendar so issue and sale dates are predictable."""
    from museo.utils import dates

    monkeypatch.setattr(dates, "today", lambda: FIXED_TODAY)
    return FIXED_TODAY
