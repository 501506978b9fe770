"""
Ticket numbering.

A TicketSequence hands out gap-free, strictly increasing numbers. The process
keeps one default instance; callers that need isolated numbering (tests, a
second box office) pass their own.
"""

from threading import Lock
from typing import Optional

from museo.config.settings import Settings
from museo.utils.error_handling import InvalidArgumentError

_default_sequence: Optional["TicketSequence"] = None
_default_lock = Lock()


class TicketSequence:
    """Thread-safe monotonic counter."""

    def __init__(self, start: int = 0):
        self._check_start(start)
        self._value = start
        self._lock = Lock()

    @staticmethod
    def _check_start(start: int) -> None:
        if isinstance(start, bool) or not isinstance(start, int) or start < 0:
            raise InvalidArgumentError("start debe ser un entero no negativo")

    def next_value(self) -> int:
        """Increment and return the new value as one atomic step."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def current(self) -> int:
        """Last value handed out, i.e. how many numbers have been issued past start."""
        with self._lock:
            return self._value

    def reset(self, start: int = 0) -> None:
        """Rewind the counter."""
        self._check_start(start)
        with self._lock:
            self._value = start

    def __repr__(self) -> str:
        return f"TicketSequence(current={self.current})"


def get_default_sequence() -> TicketSequence:
    """Get or create the process-wide sequence."""
    global _default_sequence
    with _default_lock:
        if _default_sequence is None:
            _default_sequence = TicketSequence(start=Settings.from_environment().sequence_start)
        return _default_sequence


def reset_default_sequence() -> None:
    """Drop the process-wide sequence so the next call rebuilds it from settings."""
    global _default_sequence
    with _default_lock:
        _default_sequence = None
