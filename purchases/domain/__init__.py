from purchases.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from purchases.domain.models import PurchaseOutcome, TicketRequest, TicketTally
from purchases.domain.value_objects import AccountId, TicketCategory, TicketQuantity

__all__ = [
    "AccountId",
    "TicketCategory",
    "TicketQuantity",
    "TicketRequest",
    "TicketTally",
    "PurchaseOutcome",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
]
