from purchases.gateways.interfaces import PaymentCharger, SeatReserver
from purchases.gateways.logging_gateways import LoggingPaymentCharger, LoggingSeatReserver

__all__ = [
    "PaymentCharger",
    "SeatReserver",
    "LoggingPaymentCharger",
    "LoggingSeatReserver",
]
