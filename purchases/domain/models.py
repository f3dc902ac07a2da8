"""Domain models for a single ticket purchase.

Nothing here is persisted; every object lives for one purchase call.
"""

from dataclasses import dataclass

from purchases.domain.value_objects import AccountId, TicketCategory


@dataclass(frozen=True)
class TicketRequest:
    """A requested number of tickets of one category.

    Construction does not validate. The purchase service checks each
    request when the purchase is made.
    """

    category: TicketCategory
    quantity: int | None


@dataclass(frozen=True)
class TicketTally:
    """Ticket counts per category, accumulated over all requests."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    def add(self, category: TicketCategory, quantity: int) -> "TicketTally":
        match category:
            case TicketCategory.ADULT:
                return TicketTally(self.adults + quantity, self.children, self.infants)
            case TicketCategory.CHILD:
                return TicketTally(self.adults, self.children + quantity, self.infants)
            case TicketCategory.INFANT:
                return TicketTally(self.adults, self.children, self.infants + quantity)

    def count(self, category: TicketCategory) -> int:
        match category:
            case TicketCategory.ADULT:
                return self.adults
            case TicketCategory.CHILD:
                return self.children
            case TicketCategory.INFANT:
                return self.infants

    @property
    def total_tickets(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def total_amount(self) -> int:
        return sum(self.count(c) * c.unit_price for c in TicketCategory)

    @property
    def total_seats(self) -> int:
        return sum(self.count(c) for c in TicketCategory if c.occupies_seat)


@dataclass(frozen=True)
class PurchaseOutcome:
    """Priced result of a validated purchase."""

    account_id: AccountId
    tally: TicketTally

    @property
    def total_amount(self) -> int:
        return self.tally.total_amount

    @property
    def total_seats(self) -> int:
        return self.tally.total_seats
