"""Date helpers for issue and sale dates."""

from datetime import date
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def today() -> date:
    """Current local date; patched in tests to pin the calendar."""
    return date.today()


def format_date(value: Optional[date] = None) -> str:
    """Format value (today when omitted) as YYYY-MM-DD."""
    return (value or today()).strftime(DATE_FORMAT)


def today_iso() -> str:
    return format_date()
