"""Log-only gateways used when no third-party client is configured."""

import logging

from purchases.gateways.interfaces import PaymentCharger, SeatReserver

logger = logging.getLogger(__name__)


class LoggingPaymentCharger(PaymentCharger):
    """Records the charge in the log instead of taking a payment."""

    def charge(self, account_id: int, amount: int) -> None:
        logger.info("Charging account %s amount %s", account_id, amount)


class LoggingSeatReserver(SeatReserver):
    """Records the reservation in the log instead of booking seats."""

    def reserve(self, account_id: int, seat_count: int) -> None:
        logger.info("Reserving %s seats for account %s", seat_count, account_id)
