"""Museum ticketing: tickets, visitors and the daily sales ledger."""

from museo.models import DailySales, Ticket, Visitor  # noqa: F401
from museo.utils.error_handling import (  # noqa: F401
    AppError,
    InvalidArgumentError,
    PreconditionViolatedError,
)
from museo.utils.sequence import TicketSequence  # noqa: F401

__version__ = "0.1.0"
