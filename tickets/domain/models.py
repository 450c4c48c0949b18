"""Domain models for a single purchase attempt.

These are pure domain objects with no API input rules and no persistence.
Nothing here outlives one call to the ticket service.
"""

from dataclasses import dataclass
from typing import cast

from tickets.domain.errors import ValidationError
from tickets.domain.value_objects import TicketCategory


@dataclass(frozen=True)
class TicketRequestLine:
    """A number of tickets requested for one category.

    The count is checked when the request is validated, not here.
    """

    category: TicketCategory
    count: int


@dataclass(frozen=True)
class PurchaseSummary:
    """Totals derived from the request lines."""

    total_price: int
    total_seats: int
    total_tickets: int
    adult_count: int
    child_count: int
    infant_count: int

    @property
    def minor_count(self) -> int:
        return self.child_count + self.infant_count


@dataclass(frozen=True)
class PurchaseOutcome:
    """Result of a purchase attempt: either a summary or a validation error."""

    account_id: object
    summary: PurchaseSummary | None = None
    error: ValidationError | None = None

    def __post_init__(self) -> None:
        if (self.summary is None) == (self.error is None):
            raise ValueError("PurchaseOutcome needs exactly one of summary or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> PurchaseSummary:
        """Return the summary, or raise the carried validation error."""
        if self.error is not None:
            raise self.error
        return cast(PurchaseSummary, self.summary)
