"""Visitor model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from museo.models.ticket import Ticket
from museo.utils.error_handling import PreconditionViolatedError
from museo.utils.logging_config import get_logger

logger = get_logger(__name__)


class Visitor(BaseModel):
    """A named person who may hold one ticket."""

    model_config = ConfigDict(validate_assignment=True)

    full_name: str
    identification: Optional[str] = None
    assigned_ticket: Optional[Ticket] = None

    @property
    def has_ticket(self) -> bool:
        return self.assigned_ticket is not None

    def set_identification(self, value: Optional[str]) -> None:
        """Replace the identification; None or "" are allowed."""
        self.identification = value

    def assign_ticket(self, ticket: Optional[Ticket]) -> None:
        """
        Hold ticket, replacing any previous one.

        Passing None clears the assignment.
        """
        self.assigned_ticket = ticket
        if ticket is None:
            logger.info("Ticket cleared", extra={"visitor": self.full_name})
        else:
            logger.info(
                "Ticket assigned",
                extra={"visitor": self.full_name, "sequence_number": ticket.sequence_number},
            )

    def assigned_ticket_number(self) -> int:
        """Sequence number of the held ticket; raises if none is held."""
        if self.assigned_ticket is None:
            raise PreconditionViolatedError("La persona no tiene un boleto asignado")
        return self.assigned_ticket.sequence_number

    def describe(self) -> str:
        """
        Multi-line summary with name, identification and ticket number.

        A missing identification prints as "(ninguna)", like the "(ninguno)"
        marker for a missing ticket, instead of a raw None.
        """
        msg = "Persona\n"
        msg += f" Nombre: {self.full_name}\n"
        identification = "(ninguna)" if self.identification is None else self.identification
        msg += f" Identificacion: {identification}\n"

        if self.assigned_ticket is not None:
            msg += f" Boleto asignado: #{self.assigned_ticket.sequence_number}\n"
        else:
            msg += " Boleto asignado: (ninguno)\n"

        return msg

    def __str__(self) -> str:
        return self.describe()
