"""Ticketing configuration read from Django settings.

Settings live in a single ``TICKETING`` dict; any key left out falls back to
the defaults below.
"""

from dataclasses import dataclass
from typing import Any, Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

DEFAULTS: dict[str, Any] = {
    "MAX_TICKETS_PER_PURCHASE": 25,
    "MIN_SUPERVISING_ADULTS": 2,
    "PAYMENT_SERVICE": "tickets.gateways.logging_gateways.LoggingPaymentService",
    "SEAT_RESERVATION_SERVICE": "tickets.gateways.logging_gateways.LoggingSeatReservationService",
}


@dataclass(frozen=True)
class TicketingConfig:
    max_tickets_per_purchase: int
    min_supervising_adults: int
    payment_service: str
    seat_reservation_service: str

    def __post_init__(self) -> None:
        for name in ("max_tickets_per_purchase", "min_supervising_adults"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ImproperlyConfigured(f"TICKETING {name.upper()} must be a positive integer")
        for name in ("payment_service", "seat_reservation_service"):
            if not isinstance(getattr(self, name), str):
                raise ImproperlyConfigured(f"TICKETING {name.upper()} must be a dotted import path")

    @classmethod
    def from_settings(cls, overrides: dict[str, Any] | None = None) -> Self:
        options = overrides if overrides is not None else getattr(settings, "TICKETING", {})
        unknown = set(options) - set(DEFAULTS)
        if unknown:
            raise ImproperlyConfigured(f"Unknown TICKETING settings: {', '.join(sorted(unknown))}")
        merged = {**DEFAULTS, **options}
        return cls(**{key.lower(): value for key, value in merged.items()})

    def build_payment_service(self) -> TicketPaymentService:
        return _instantiate(self.payment_service, TicketPaymentService)

    def build_seat_reservation_service(self) -> SeatReservationService:
        return _instantiate(self.seat_reservation_service, SeatReservationService)


def _instantiate(path: str, interface: type) -> Any:
    try:
        gateway_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"Cannot import gateway {path!r}") from exc
    if not (isinstance(gateway_class, type) and issubclass(gateway_class, interface)):
        raise ImproperlyConfigured(f"{path!r} does not implement {interface.__name__}")
    return gateway_class()


def get_ticketing_config() -> TicketingConfig:
    return TicketingConfig.from_settings()
