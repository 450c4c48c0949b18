from tickets.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidAccountError,
    InvalidRequestError,
    QuotaExceededError,
    TooManyInfantsError,
    UnsupervisedMinorError,
    ValidationError,
)
from tickets.domain.models import PurchaseOutcome, PurchaseSummary, TicketRequestLine
from tickets.domain.value_objects import AccountId, TicketCategory

__all__ = [
    "AccountId",
    "TicketCategory",
    "TicketRequestLine",
    "PurchaseSummary",
    "PurchaseOutcome",
    "DomainError",
    "ErrorCode",
    "ValidationError",
    "InvalidAccountError",
    "InvalidRequestError",
    "UnsupervisedMinorError",
    "QuotaExceededError",
    "TooManyInfantsError",
]
