"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Return domain models or domain errors as values
- Call collaborators only after every rule has passed
"""

import logging
from collections.abc import Iterable, Sequence

from tickets.domain.errors import (
    InvalidAccountError,
    InvalidRequestError,
    QuotaExceededError,
    TooManyInfantsError,
    UnsupervisedMinorError,
    ValidationError,
)
from tickets.domain.models import PurchaseOutcome, PurchaseSummary, TicketRequestLine
from tickets.domain.value_objects import AccountId, TicketCategory
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)

MAX_TICKETS_PER_PURCHASE = 25
MIN_SUPERVISING_ADULTS = 2


class TicketService:
    """Service for group ticket purchases."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
        min_supervising_adults: int = MIN_SUPERVISING_ADULTS,
    ) -> None:
        self._payment_service = payment_service
        self._seat_reservation_service = seat_reservation_service
        self._max_tickets = max_tickets
        self._min_supervising_adults = min_supervising_adults

    def purchase_tickets(
        self, account_id: int | None, *lines: TicketRequestLine | None
    ) -> PurchaseOutcome:
        """Validate and price a request, then pay and reserve seats.

        Payment is taken before seats are reserved. Neither collaborator is
        called when validation fails, and nothing is rolled back if a
        collaborator raises.
        """
        result = self.validate(account_id, lines)
        if isinstance(result, ValidationError):
            logger.warning("Purchase rejected: account=%s code=%s", account_id, result.code.value)
            return PurchaseOutcome(account_id=account_id, error=result)

        self._payment_service.make_payment(account_id, result.total_price)
        self._seat_reservation_service.reserve_seat(account_id, result.total_seats)
        logger.info(
            "Purchase accepted: account=%s price=%s seats=%s",
            account_id,
            result.total_price,
            result.total_seats,
        )
        return PurchaseOutcome(account_id=account_id, summary=result)

    def validate(
        self,
        account_id: int | None,
        lines: Iterable[TicketRequestLine | None] | None,
    ) -> PurchaseSummary | ValidationError:
        """Return the purchase totals, or the first rule the request breaks."""
        lines = tuple(lines) if lines is not None else ()
        try:
            AccountId.from_value(account_id)
        except ValueError:
            return InvalidAccountError()

        shape_error = self._check_shape(lines)
        if shape_error is not None:
            return shape_error

        summary = self.calculate(lines)
        return self._check_rules(summary) or summary

    def calculate(self, lines: Sequence[TicketRequestLine]) -> PurchaseSummary:
        """Aggregate price, seats and per-category counts.

        Lines are assumed well formed; ``validate`` checks that first.
        """
        counts = {category: 0 for category in TicketCategory}
        total_price = 0
        total_seats = 0
        for line in lines:
            counts[line.category] += line.count
            total_price += line.count * line.category.unit_price
            if line.category.occupies_seat:
                total_seats += line.count

        return PurchaseSummary(
            total_price=total_price,
            total_seats=total_seats,
            total_tickets=sum(counts.values()),
            adult_count=counts[TicketCategory.ADULT],
            child_count=counts[TicketCategory.CHILD],
            infant_count=counts[TicketCategory.INFANT],
        )

    def _check_shape(
        self, lines: Sequence[TicketRequestLine | None]
    ) -> InvalidRequestError | None:
        if not lines:
            return InvalidRequestError("At least one ticket request is required")

        for index, line in enumerate(lines):
            if line is None:
                return InvalidRequestError("Ticket request is missing", line_index=index)
            if not isinstance(line, TicketRequestLine) or not isinstance(
                line.category, TicketCategory
            ):
                return InvalidRequestError("Unknown ticket category", line_index=index)
            if isinstance(line.count, bool) or not isinstance(line.count, int):
                return InvalidRequestError("Ticket count must be an integer", line_index=index)
            if line.count <= 0:
                return InvalidRequestError("Ticket count must be positive", line_index=index)
        return None

    def _check_rules(self, summary: PurchaseSummary) -> ValidationError | None:
        if summary.minor_count > 0 and summary.adult_count < self._min_supervising_adults:
            return UnsupervisedMinorError(self._min_supervising_adults)

        if summary.total_tickets > self._max_tickets:
            return QuotaExceededError(self._max_tickets)

        # Infants sit on an adult's lap.
        if summary.infant_count > summary.adult_count:
            return TooManyInfantsError()

        return None
