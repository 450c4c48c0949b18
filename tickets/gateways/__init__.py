from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.gateways.logging_gateways import LoggingPaymentService, LoggingSeatReservationService

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
    "LoggingPaymentService",
    "LoggingSeatReservationService",
]
