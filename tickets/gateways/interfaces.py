"""Gateway interfaces for the third-party collaborators.

Gateways must be swappable. Their failure modes are their own; the ticket
service neither catches nor retries what they raise.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for the payment processor."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge the account the given total amount."""
        ...


class SeatReservationService(ABC):
    """Interface for the seat reservation service."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
