"""Hand-written gateway fakes that record what the service asked for.

Every instance also registers itself on its class so that tests can find
gateways built from the ``PURCHASES`` setting.
"""

from typing import ClassVar

from purchases.gateways import PaymentCharger, SeatReserver


class RecordingPaymentCharger(PaymentCharger):
    instances: ClassVar[list["RecordingPaymentCharger"]] = []

    def __init__(self, journal: list | None = None) -> None:
        self.charges: list[tuple[int, int]] = []
        self._journal = journal if journal is not None else []
        type(self).instances.append(self)

    def charge(self, account_id: int, amount: int) -> None:
        self.charges.append((account_id, amount))
        self._journal.append("charge")

    @classmethod
    def all_charges(cls) -> list[tuple[int, int]]:
        return [charge for instance in cls.instances for charge in instance.charges]


class RecordingSeatReserver(SeatReserver):
    instances: ClassVar[list["RecordingSeatReserver"]] = []

    def __init__(self, journal: list | None = None) -> None:
        self.reservations: list[tuple[int, int]] = []
        self._journal = journal if journal is not None else []
        type(self).instances.append(self)

    def reserve(self, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))
        self._journal.append("reserve")

    @classmethod
    def all_reservations(cls) -> list[tuple[int, int]]:
        return [res for instance in cls.instances for res in instance.reservations]


class PaymentDeclined(Exception):
    pass


class DecliningPaymentCharger(PaymentCharger):
    def charge(self, account_id: int, amount: int) -> None:
        raise PaymentDeclined(f"card declined for account {account_id}")
