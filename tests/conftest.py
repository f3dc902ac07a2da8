"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from purchases.services import TicketPurchaseService
from tests.fakes import RecordingPaymentCharger, RecordingSeatReserver


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def journal() -> list:
    return []


@pytest.fixture
def payment_charger(journal) -> RecordingPaymentCharger:
    return RecordingPaymentCharger(journal)


@pytest.fixture
def seat_reserver(journal) -> RecordingSeatReserver:
    return RecordingSeatReserver(journal)


@pytest.fixture
def service(payment_charger, seat_reserver) -> TicketPurchaseService:
    return TicketPurchaseService(payment_charger, seat_reserver)


@pytest.fixture
def configured_gateways(settings):
    """Route PURCHASES to the recording fakes and start with no recorded calls."""
    RecordingPaymentCharger.instances.clear()
    RecordingSeatReserver.instances.clear()
    settings.PURCHASES = {
        "PAYMENT_CHARGER": "tests.fakes.RecordingPaymentCharger",
        "SEAT_RESERVER": "tests.fakes.RecordingSeatReserver",
        "MAX_TICKETS_PER_PURCHASE": 25,
    }
    yield settings.PURCHASES
    RecordingPaymentCharger.instances.clear()
    RecordingSeatReserver.instances.clear()
