"""Daily sales ledger."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from museo.models.ticket import Ticket
from museo.utils.dates import DATE_PATTERN, today_iso
from museo.utils.error_handling import InvalidArgumentError
from museo.utils.logging_config import get_logger
from museo.utils.validators import ensure_present

logger = get_logger(__name__)


class DailySales(BaseModel):
    """Append-only record of the tickets sold on one calendar day."""

    model_config = ConfigDict(frozen=True)

    sale_date: str = Field(default_factory=today_iso, pattern=DATE_PATTERN)

    _sold_tickets: List[Ticket] = PrivateAttr(default_factory=list)

    def register_sale(self, ticket: Ticket) -> None:
        """Append ticket to the ledger; duplicates are kept."""
        try:
            ensure_present(ticket, "El boleto")
            if not isinstance(ticket, Ticket):
                raise InvalidArgumentError("El boleto debe ser un Ticket")
        except InvalidArgumentError:
            logger.warning("Sale rejected", extra={"sale_date": self.sale_date})
            raise

        self._sold_tickets.append(ticket)
        logger.info(
            "Sale registered",
            extra={
                "sale_date": self.sale_date,
                "sequence_number": ticket.sequence_number,
                "sold_count": len(self._sold_tickets),
            },
        )

    def compute_total(self) -> float:
        """Sum of prices over every recorded sale, 0.0 when empty."""
        total = 0.0
        for ticket in self._sold_tickets:
            total += ticket.price
        return total

    @property
    def sold_count(self) -> int:
        return len(self._sold_tickets)

    def sold_tickets(self) -> List[Ticket]:
        """Copy of the ledger; changing it does not touch this object."""
        return list(self._sold_tickets)

    def __copy__(self) -> DailySales:
        # model_copy() goes through here too; each copy gets its own list
        copied = super().__copy__()
        copied._sold_tickets = list(self._sold_tickets)
        return copied

    def describe(self) -> str:
        """Report with date, count, one line per ticket and the total."""
        msg = "VentaDelDia\n"
        msg += f" Fecha: {self.sale_date}\n"
        msg += f" Cantidad de boletos: {self.sold_count}\n"
        msg += " Detalle:\n"

        for ticket in self._sold_tickets:
            msg += f" - Boleto #{ticket.sequence_number} | ${ticket.price}\n"

        msg += f" Total: ${self.compute_total()}"
        return msg

    def __str__(self) -> str:
        return self.describe()
