"""Gateway interfaces for the third-party services a purchase reaches.

Gateways must be swappable; the purchase service depends only on these.
"""

from abc import ABC, abstractmethod


class PaymentCharger(ABC):
    """Interface to the payment gateway."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account."""
        ...


class SeatReserver(ABC):
    """Interface to the seat booking system."""

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account."""
        ...
