"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.domain import TicketCategory, TicketRequestLine
from tickets.gateways import SeatReservationService, TicketPaymentService
from tickets.services import TicketService


class RecordingPaymentService(TicketPaymentService):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, amount: int) -> None:
        self.calls.append(("make_payment", account_id, amount))


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.calls.append(("reserve_seat", account_id, seat_count))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls() -> list:
    """Shared log of collaborator calls, in call order."""
    return []


@pytest.fixture
def payment_service(gateway_calls: list) -> RecordingPaymentService:
    return RecordingPaymentService(gateway_calls)


@pytest.fixture
def seat_reservation_service(gateway_calls: list) -> RecordingSeatReservationService:
    return RecordingSeatReservationService(gateway_calls)


@pytest.fixture
def ticket_service(payment_service, seat_reservation_service) -> TicketService:
    return TicketService(
        payment_service=payment_service,
        seat_reservation_service=seat_reservation_service,
    )


@pytest.fixture
def line():
    """Factory for request lines: line("ADULT", 2)."""

    def make(category: str, count: int) -> TicketRequestLine:
        return TicketRequestLine(category=TicketCategory(category), count=count)

    return make
