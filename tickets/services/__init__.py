from tickets.conf import TicketingConfig, get_ticketing_config
from tickets.services.ticket_service import TicketService

__all__ = ["TicketService", "get_ticket_service"]


def get_ticket_service(config: TicketingConfig | None = None) -> TicketService:
    """Build a TicketService wired from the TICKETING settings."""
    config = config or get_ticketing_config()
    return TicketService(
        payment_service=config.build_payment_service(),
        seat_reservation_service=config.build_seat_reservation_service(),
        max_tickets=config.max_tickets_per_purchase,
        min_supervising_adults=config.min_supervising_adults,
    )
