"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketCategory(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def unit_price(self) -> int:
        return UNIT_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        return self in SEATED_CATEGORIES

    @property
    def is_minor(self) -> bool:
        return self is not TicketCategory.ADULT


UNIT_PRICES: dict[TicketCategory, int] = {
    TicketCategory.ADULT: 25,
    TicketCategory.CHILD: 15,
    TicketCategory.INFANT: 0,
}

# Infants sit on an adult's lap.
SEATED_CATEGORIES = frozenset({TicketCategory.ADULT, TicketCategory.CHILD})


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing customer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")

    @classmethod
    def from_value(cls, value: object) -> Self:
        if value is None:
            raise ValueError("Account ID is required")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("Account ID must be an integer")
        return cls(value=value)

    def __int__(self) -> int:
        return self.value
