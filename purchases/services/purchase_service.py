"""Purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Sequence

from purchases.domain import (
    AccountId,
    InvalidPurchaseError,
    PurchaseOutcome,
    TicketCategory,
    TicketQuantity,
    TicketRequest,
    TicketTally,
)
from purchases.gateways.interfaces import PaymentCharger, SeatReserver

logger = logging.getLogger(__name__)

MAX_TICKETS_PER_PURCHASE = 25


class TicketPurchaseService:
    """Validates, prices and commits ticket purchases."""

    def __init__(
        self,
        payment_charger: PaymentCharger,
        seat_reserver: SeatReserver,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        self._payment_charger = payment_charger
        self._seat_reserver = seat_reserver
        self._max_tickets = max_tickets

    def quote(
        self, account_id: int | None, ticket_requests: Sequence[TicketRequest | None]
    ) -> PurchaseOutcome:
        """Validate and price a purchase without charging or reserving.

        Raises:
            InvalidPurchaseError: If any purchase rule is broken.
        """
        account = self._parse_account_id(account_id)
        tally = self._tally(ticket_requests)
        self._check_tally(tally)
        return PurchaseOutcome(account_id=account, tally=tally)

    def purchase(
        self, account_id: int | None, ticket_requests: Sequence[TicketRequest | None]
    ) -> PurchaseOutcome:
        """Validate and price a purchase, then charge and reserve seats.

        The payment is taken before seats are reserved. Nothing is charged
        or reserved when validation fails. Gateway errors propagate as-is.

        Raises:
            InvalidPurchaseError: If any purchase rule is broken.
        """
        try:
            outcome = self.quote(account_id, ticket_requests)
        except InvalidPurchaseError as exc:
            logger.info("Rejected purchase for account %s: %s", account_id, exc)
            raise

        account = outcome.account_id.value
        self._payment_charger.charge(account, outcome.total_amount)
        self._seat_reserver.reserve(account, outcome.total_seats)
        logger.info(
            "Purchased %s tickets for account %s: amount=%s seats=%s",
            outcome.tally.total_tickets,
            account,
            outcome.total_amount,
            outcome.total_seats,
        )
        return outcome

    def _parse_account_id(self, account_id: int | None) -> AccountId:
        if account_id is None:
            raise InvalidPurchaseError.invalid_account_id()
        try:
            return AccountId(account_id)
        except (TypeError, ValueError) as exc:
            raise InvalidPurchaseError.invalid_account_id() from exc

    def _tally(self, ticket_requests: Sequence[TicketRequest | None]) -> TicketTally:
        if not ticket_requests:
            raise InvalidPurchaseError.no_tickets_requested()

        tally = TicketTally()
        for index, request in enumerate(ticket_requests):
            if request is None:
                raise InvalidPurchaseError.missing_ticket_request(index)
            if not isinstance(request.category, TicketCategory):
                raise InvalidPurchaseError.invalid_ticket_category(index)
            if request.quantity is None:
                raise InvalidPurchaseError.invalid_ticket_quantity(index)
            try:
                quantity = TicketQuantity(request.quantity)
            except (TypeError, ValueError) as exc:
                raise InvalidPurchaseError.invalid_ticket_quantity(index) from exc
            tally = tally.add(request.category, quantity.value)
        return tally

    def _check_tally(self, tally: TicketTally) -> None:
        if tally.total_tickets == 0:
            raise InvalidPurchaseError.no_tickets_requested()
        if tally.total_tickets > self._max_tickets:
            raise InvalidPurchaseError.ticket_limit_exceeded(
                tally.total_tickets, self._max_tickets
            )
        if tally.adults == 0:
            raise InvalidPurchaseError.adult_ticket_required()
        if tally.infants > tally.adults:
            raise InvalidPurchaseError.infants_exceed_adults(tally.infants, tally.adults)
