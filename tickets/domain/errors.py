"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_REQUEST = "INVALID_REQUEST"
    UNSUPERVISED_MINOR = "UNSUPERVISED_MINOR"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """A purchase request that failed validation.

    Returned by the service rather than raised; the code discriminates the cause.
    """


class InvalidAccountError(ValidationError):
    """Account identifier is missing or not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Account ID must be a positive integer",
        )


class InvalidRequestError(ValidationError):
    """Ticket request is empty or contains a malformed line."""

    def __init__(self, message: str, line_index: int | None = None) -> None:
        super().__init__(code=ErrorCode.INVALID_REQUEST, message=message)
        object.__setattr__(self, "line_index", line_index)


class UnsupervisedMinorError(ValidationError):
    """Child or infant tickets without enough adult tickets."""

    def __init__(self, min_adults: int) -> None:
        super().__init__(
            code=ErrorCode.UNSUPERVISED_MINOR,
            message=f"Child and infant tickets require at least {min_adults} adult tickets",
        )


class QuotaExceededError(ValidationError):
    """More tickets than allowed in a single purchase."""

    def __init__(self, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.QUOTA_EXCEEDED,
            message=f"No more than {max_tickets} tickets can be purchased at once",
        )


class TooManyInfantsError(ValidationError):
    """More infants than adult laps to sit on."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message="Each infant must be accompanied by an adult ticket",
        )
