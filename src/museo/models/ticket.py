"""Museum ticket model."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from museo.utils.dates import DATE_PATTERN, format_date
from museo.utils.error_handling import InvalidArgumentError
from museo.utils.logging_config import get_logger
from museo.utils.sequence import TicketSequence, get_default_sequence
from museo.utils.validators import ensure_positive

logger = get_logger(__name__)


class Ticket(BaseModel):
    """A priced, uniquely numbered, dated museum entry pass."""

    model_config = ConfigDict(frozen=True)

    price: float = Field(gt=0)
    sequence_number: int = Field(ge=1)
    issue_date: str = Field(pattern=DATE_PATTERN)

    @classmethod
    def issue(
        cls,
        price: float,
        sequence: Optional[TicketSequence] = None,
        issued_on: Optional[date] = None,
    ) -> Ticket:
        """
        Issue a new ticket dated today.

        The price is checked before a number is drawn, so a rejected ticket
        leaves the sequence untouched.
        """
        try:
            checked_price = ensure_positive(price, "El precio")
        except InvalidArgumentError:
            logger.warning("Ticket rejected", extra={"price": repr(price)})
            raise

        issue_date = format_date(issued_on)
        seq = sequence if sequence is not None else get_default_sequence()
        # Every field is valid by now; drawing the number must be the last step.
        ticket = cls(price=checked_price, sequence_number=seq.next_value(), issue_date=issue_date)
        logger.info(
            "Ticket issued",
            extra={"sequence_number": ticket.sequence_number, "price": ticket.price},
        )
        return ticket

    @staticmethod
    def global_count(sequence: Optional[TicketSequence] = None) -> int:
        """Number of tickets issued so far from sequence (the process default when omitted)."""
        seq = sequence if sequence is not None else get_default_sequence()
        return seq.current

    def describe(self) -> str:
        """Multi-line summary with number, price and issue date."""
        msg = "BoletoMuseo\n"
        msg += f" Numero: {self.sequence_number}\n"
        msg += f" Precio: {self.price}\n"
        msg += f" Fecha Emision: {self.issue_date}"
        return msg

    def __str__(self) -> str:
        return self.describe()
