"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from abc import ABC, abstractmethod

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain import DomainError, PurchaseOutcome, TicketRequest
from purchases.handlers.serializers import PurchaseOutcomeSerializer, PurchaseRequestSerializer
from purchases.services import TicketPurchaseService, build_purchase_service


def error_response(code: str, message: str, **extra) -> Response:
    return Response(
        {"error": {"code": code, "message": message, **extra}},
        status=status.HTTP_400_BAD_REQUEST,
    )


class _PurchaseHandler(ABC, APIView):
    success_status = status.HTTP_200_OK

    @abstractmethod
    def run(
        self,
        service: TicketPurchaseService,
        account_id: int | None,
        ticket_requests: list[TicketRequest | None],
    ) -> PurchaseOutcome:
        """Call the service operation this endpoint exposes."""
        ...

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                "INVALID_REQUEST", "Malformed purchase request", details=serializer.errors
            )

        service = build_purchase_service()
        try:
            outcome = self.run(
                service,
                serializer.validated_data["account_id"],
                serializer.ticket_requests(),
            )
        except DomainError as exc:
            return error_response(exc.code.value, exc.message)
        return Response(PurchaseOutcomeSerializer(outcome).data, status=self.success_status)


class PurchaseView(_PurchaseHandler):
    """Handler for POST /api/purchases"""

    success_status = status.HTTP_201_CREATED

    def run(
        self,
        service: TicketPurchaseService,
        account_id: int | None,
        ticket_requests: list[TicketRequest | None],
    ) -> PurchaseOutcome:
        return service.purchase(account_id, ticket_requests)


class QuoteView(_PurchaseHandler):
    """Handler for POST /api/purchases/quote"""

    def run(
        self,
        service: TicketPurchaseService,
        account_id: int | None,
        ticket_requests: list[TicketRequest | None],
    ) -> PurchaseOutcome:
        return service.quote(account_id, ticket_requests)
