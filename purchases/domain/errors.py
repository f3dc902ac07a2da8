"""Domain error codes for the purchases module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    MISSING_TICKET_REQUEST = "MISSING_TICKET_REQUEST"
    INVALID_TICKET_CATEGORY = "INVALID_TICKET_CATEGORY"
    INVALID_TICKET_QUANTITY = "INVALID_TICKET_QUANTITY"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    INFANTS_EXCEED_ADULTS = "INFANTS_EXCEED_ADULTS"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a purchase rule.

    ``code`` names the rule that failed; ``context`` holds the values
    that broke it.
    """

    @classmethod
    def invalid_account_id(cls) -> Self:
        return cls(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account ID must be a positive integer",
        )

    @classmethod
    def no_tickets_requested(cls) -> Self:
        return cls(
            code=ErrorCode.NO_TICKETS_REQUESTED,
            message="At least one ticket must be purchased",
        )

    @classmethod
    def missing_ticket_request(cls, index: int) -> Self:
        return cls(
            code=ErrorCode.MISSING_TICKET_REQUEST,
            message="Ticket request is missing",
            context={"index": index},
        )

    @classmethod
    def invalid_ticket_category(cls, index: int) -> Self:
        return cls(
            code=ErrorCode.INVALID_TICKET_CATEGORY,
            message="Ticket type must be ADULT, CHILD or INFANT",
            context={"index": index},
        )

    @classmethod
    def invalid_ticket_quantity(cls, index: int) -> Self:
        return cls(
            code=ErrorCode.INVALID_TICKET_QUANTITY,
            message="Ticket quantity must be a non-negative integer",
            context={"index": index},
        )

    @classmethod
    def adult_ticket_required(cls) -> Self:
        return cls(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="Child and infant tickets require at least one adult ticket",
        )

    @classmethod
    def ticket_limit_exceeded(cls, requested: int, limit: int) -> Self:
        return cls(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"No more than {limit} tickets can be purchased at a time",
            context={"requested": requested, "limit": limit},
        )

    @classmethod
    def infants_exceed_adults(cls, infants: int, adults: int) -> Self:
        return cls(
            code=ErrorCode.INFANTS_EXCEED_ADULTS,
            message="Each infant must be accompanied by an adult",
            context={"infants": infants, "adults": adults},
        )
