"""Builds the purchase service from the ``PURCHASES`` setting."""

from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from purchases.services.purchase_service import MAX_TICKETS_PER_PURCHASE, TicketPurchaseService

DEFAULTS: dict[str, Any] = {
    "PAYMENT_CHARGER": "purchases.gateways.LoggingPaymentCharger",
    "SEAT_RESERVER": "purchases.gateways.LoggingSeatReserver",
    "MAX_TICKETS_PER_PURCHASE": MAX_TICKETS_PER_PURCHASE,
}


def purchase_settings() -> dict[str, Any]:
    """Return the ``PURCHASES`` setting merged over the defaults."""
    return {**DEFAULTS, **getattr(settings, "PURCHASES", {})}


def build_purchase_service() -> TicketPurchaseService:
    conf = purchase_settings()
    payment_charger = import_string(conf["PAYMENT_CHARGER"])()
    seat_reserver = import_string(conf["SEAT_RESERVER"])()
    return TicketPurchaseService(
        payment_charger,
        seat_reserver,
        max_tickets=conf["MAX_TICKETS_PER_PURCHASE"],
    )
