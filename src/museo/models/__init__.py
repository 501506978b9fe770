"""Pydantic models for the ticket desk."""

from museo.models.daily_sales import DailySales  # noqa: F401
from museo.models.ticket import Ticket  # noqa: F401
from museo.models.visitor import Visitor  # noqa: F401
