"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum


class TicketCategory(Enum):
    """Closed set of ticket categories sold per purchase."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def unit_price(self) -> int:
        match self:
            case TicketCategory.ADULT:
                return 25
            case TicketCategory.CHILD:
                return 15
            case TicketCategory.INFANT:
                return 0

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        match self:
            case TicketCategory.ADULT | TicketCategory.CHILD:
                return True
            case TicketCategory.INFANT:
                return False


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account. Always strictly positive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be greater than zero")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketQuantity:
    """Non-negative integer number of tickets."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Ticket quantity must be an integer")
        if self.value < 0:
            raise ValueError("Ticket quantity cannot be negative")
