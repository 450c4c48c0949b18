"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import dataclasses

import pytest

from tickets.domain import (
    AccountId,
    ErrorCode,
    InvalidRequestError,
    PurchaseOutcome,
    PurchaseSummary,
    QuotaExceededError,
    TicketCategory,
    TicketRequestLine,
)


class TestTicketCategory:
    """Tests for the TicketCategory price and seat table."""

    def test_unit_prices(self):
        """Adults cost 25, children 15, infants nothing."""
        assert TicketCategory.ADULT.unit_price == 25
        assert TicketCategory.CHILD.unit_price == 15
        assert TicketCategory.INFANT.unit_price == 0

    def test_infants_do_not_occupy_seats(self):
        """Only adults and children are given a seat."""
        assert TicketCategory.ADULT.occupies_seat
        assert TicketCategory.CHILD.occupies_seat
        assert not TicketCategory.INFANT.occupies_seat

    def test_every_category_has_a_price(self):
        """The price table covers the whole enum."""
        for category in TicketCategory:
            assert category.unit_price >= 0

    def test_lookup_by_value(self):
        """Categories are looked up by their wire value."""
        assert TicketCategory("CHILD") is TicketCategory.CHILD
        with pytest.raises(ValueError):
            TicketCategory("SENIOR")


class TestAccountId:
    """Tests for AccountId value object."""

    def test_accepts_positive_value(self):
        """AccountId can be created with a positive integer."""
        assert AccountId(value=1).value == 1

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive_value(self, value):
        """AccountId raises ValueError for zero or negative values."""
        with pytest.raises(ValueError):
            AccountId(value=value)

    @pytest.mark.parametrize("value", [True, 1.5, "7"])
    def test_rejects_non_integer_value(self, value):
        """AccountId raises ValueError for anything but an int."""
        with pytest.raises(ValueError):
            AccountId(value=value)

    def test_from_value_rejects_none(self):
        """AccountId.from_value raises ValueError when the ID is missing."""
        with pytest.raises(ValueError):
            AccountId.from_value(None)

    @pytest.mark.parametrize("value", ["7", 7.0, True])
    def test_from_value_rejects_non_integer(self, value):
        """AccountId.from_value rejects anything but an int before construction."""
        with pytest.raises(ValueError, match="integer"):
            AccountId.from_value(value)

    def test_from_value_accepts_int(self):
        """AccountId.from_value wraps a positive int."""
        assert AccountId.from_value(42) == AccountId(value=42)


class TestTicketRequestLine:
    """Tests for TicketRequestLine."""

    def test_is_immutable(self):
        """Lines cannot be changed after construction."""
        line = TicketRequestLine(category=TicketCategory.ADULT, count=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.count = 3

    def test_count_is_not_checked_on_construction(self):
        """A zero count is representable; the service rejects it later."""
        assert TicketRequestLine(category=TicketCategory.ADULT, count=0).count == 0


class TestPurchaseOutcome:
    """Tests for PurchaseOutcome."""

    def _summary(self) -> PurchaseSummary:
        return PurchaseSummary(
            total_price=50,
            total_seats=2,
            total_tickets=2,
            adult_count=2,
            child_count=0,
            infant_count=0,
        )

    def test_success_outcome(self):
        """An outcome with a summary is ok and returns it."""
        outcome = PurchaseOutcome(account_id=1, summary=self._summary())
        assert outcome.ok
        assert outcome.raise_for_error() == self._summary()

    def test_raise_for_error_returns_same_summary(self):
        """The summary is returned as is, not copied."""
        summary = self._summary()
        outcome = PurchaseOutcome(account_id=1, summary=summary)
        assert outcome.raise_for_error() is summary

    def test_error_outcome_raises(self):
        """An outcome with an error raises it on demand."""
        outcome = PurchaseOutcome(account_id=1, error=QuotaExceededError(25))
        assert not outcome.ok
        with pytest.raises(QuotaExceededError) as excinfo:
            outcome.raise_for_error()
        assert excinfo.value.code is ErrorCode.QUOTA_EXCEEDED

    def test_requires_exactly_one_of_summary_or_error(self):
        """Outcomes with both or neither are rejected."""
        with pytest.raises(ValueError):
            PurchaseOutcome(account_id=1)
        with pytest.raises(ValueError):
            PurchaseOutcome(account_id=1, summary=self._summary(), error=QuotaExceededError(25))


class TestErrors:
    """Tests for domain errors."""

    def test_str_includes_code(self):
        """Errors render as CODE: message."""
        assert str(QuotaExceededError(25)).startswith("QUOTA_EXCEEDED: ")

    def test_invalid_request_carries_line_index(self):
        """InvalidRequestError keeps the index of the offending line."""
        error = InvalidRequestError("Ticket count must be positive", line_index=3)
        assert error.code is ErrorCode.INVALID_REQUEST
        assert error.line_index == 3
