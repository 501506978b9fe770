"""
Box-office service.

Composes the three models the way a ticket desk uses them: issue a ticket,
hand it to the visitor, record the sale in today's ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from museo.models.daily_sales import DailySales
from museo.models.ticket import Ticket
from museo.models.visitor import Visitor
from museo.utils.error_handling import AppError, to_payload
from museo.utils.logging_config import get_logger
from museo.utils.sequence import TicketSequence, get_default_sequence

logger = get_logger(__name__)


@dataclass
class SaleResult:
    """Simple DTO describing a sale outcome."""

    status: str
    ticket: Optional[Ticket] = None
    visitor: Optional[Visitor] = None
    error: Optional[Dict[str, Any]] = None


class TicketService:
    """Sells tickets into a single day's ledger."""

    def __init__(
        self,
        sales: Optional[DailySales] = None,
        sequence: Optional[TicketSequence] = None,
    ) -> None:
        self.sales = sales if sales is not None else DailySales()
        self.sequence = sequence if sequence is not None else get_default_sequence()

    def sell(self, price: float, visitor: Optional[Visitor] = None) -> SaleResult:
        """Issue a ticket, assign it to visitor when given and record the sale."""
        ticket = Ticket.issue(price, sequence=self.sequence)
        if visitor is not None:
            visitor.assign_ticket(ticket)
        self.sales.register_sale(ticket)

        logger.info(
            "Sale completed",
            extra={
                "sequence_number": ticket.sequence_number,
                "sale_date": self.sales.sale_date,
                "total": self.sales.compute_total(),
            },
        )
        return SaleResult(status="sold", ticket=ticket, visitor=visitor)

    def try_sell(self, price: float, visitor: Optional[Visitor] = None) -> SaleResult:
        """Like sell(), but reports a rejected sale instead of raising."""
        try:
            return self.sell(price, visitor)
        except AppError as exc:
            return SaleResult(status="rejected", visitor=visitor, error=to_payload(exc))

    @property
    def total(self) -> float:
        return self.sales.compute_total()

    def report(self) -> str:
        return self.sales.describe()
