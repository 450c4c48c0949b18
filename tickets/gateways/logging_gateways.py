"""Default gateway implementations.

The real payment processor and seat reservation service live outside this
project; these adapters record each call in the log so the app can run
without them.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingPaymentService(TicketPaymentService):
    """Payment gateway that logs the charge instead of taking it."""

    def make_payment(self, account_id: int, amount: int) -> None:
        logger.info("Payment requested: account=%s amount=%s", account_id, amount)


class LoggingSeatReservationService(SeatReservationService):
    """Seat gateway that logs the reservation instead of making it."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Seat reservation requested: account=%s seats=%s", account_id, seat_count)
