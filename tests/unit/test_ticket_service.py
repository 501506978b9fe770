"""
Box-office service tests.

Run with: pytest tests/unit/test_ticket_service.py -v
"""

import pytest

from museo.models import DailySales, Visitor
from museo.services.ticket_service import SaleResult, TicketService
from museo.utils.error_handling import InvalidArgumentError


class TestTicketService:
    """Test TicketService."""

    def test_service_instantiation(self, fixed_today):
        """Service should build its own ledger and use the default sequence."""
        service = TicketService()
        assert service.sales.sale_date == "2024-01-15"
        assert service.sales.sold_count == 0
        assert service.total == 0.0

    def test_keeps_given_empty_ledger(self, ticket_sequence):
        sales = DailySales()
        service = TicketService(sales=sales, sequence=ticket_sequence)
        assert service.sales is sales

    def test_sell_without_visitor(self, ticket_sequence):
        service = TicketService(sequence=ticket_sequence)
        result = service.sell(10.0)
        assert isinstance(result, SaleResult)
        assert result.status == "sold"
        assert result.ticket.sequence_number == 1
        assert result.visitor is None
        assert service.sales.sold_tickets() == [result.ticket]

    def test_sell_to_visitor(self, ticket_sequence):
        service = TicketService(sequence=ticket_sequence)
        visitor = Visitor(full_name="Ana", identification="X123")
        result = service.sell(15.0, visitor)
        assert visitor.assigned_ticket is result.ticket
        assert visitor.assigned_ticket_number() == 1
        assert service.total == 15.0

    def test_sell_rejects_bad_price(self, ticket_sequence):
        service = TicketService(sequence=ticket_sequence)
        visitor = Visitor(full_name="Ana")
        with pytest.raises(InvalidArgumentError):
            service.sell(0, visitor)
        assert visitor.has_ticket is False
        assert service.sales.sold_count == 0
        assert ticket_sequence.current == 0

    def test_try_sell_reports_rejection(self, ticket_sequence):
        service = TicketService(sequence=ticket_sequence)
        visitor = Visitor(full_name="Ana")
        result = service.try_sell(-2, visitor)
        assert result.status == "rejected"
        assert result.ticket is None
        assert result.error["code"] == "invalid_argument"
        assert result.error["status"] == "error"
        assert visitor.has_ticket is False
        assert ticket_sequence.current == 0

    def test_try_sell_success(self, ticket_sequence):
        service = TicketService(sequence=ticket_sequence)
        result = service.try_sell(8.0)
        assert result.status == "sold"
        assert result.error is None

    def test_report(self, fixed_today, ticket_sequence):
        service = TicketService(sequence=ticket_sequence)
        for price in [10.0, 20.5, 5.0]:
            service.sell(price)
        report = service.report()
        assert report.startswith("VentaDelDia\n Fecha: 2024-01-15\n Cantidad de boletos: 3\n")
        assert " - Boleto #3 | $5.0\n" in report
        assert report.endswith(" Total: $35.5")

    def test_services_share_default_sequence(self):
        first = TicketService().sell(10.0)
        second = TicketService().sell(10.0)
        assert (first.ticket.sequence_number, second.ticket.sequence_number) == (1, 2)
