"""Serializers between API payloads and purchase domain models."""

from rest_framework import serializers

from purchases.domain import TicketCategory, TicketRequest


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON integers.

    Strings, floats and booleans are rejected instead of coerced.
    """

    def to_internal_value(self, data):
        if type(data) is not int:
            self.fail("invalid")
        return super().to_internal_value(data)


class TicketRequestSerializer(serializers.Serializer):
    """One ticket line of a purchase request."""

    type = serializers.ChoiceField(choices=[category.value for category in TicketCategory])
    quantity = StrictIntegerField(allow_null=True)


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for purchase and quote request bodies.

    Only the payload shape is checked here. Null account IDs, null ticket
    lines and out-of-range quantities are left to the purchase service.
    """

    account_id = StrictIntegerField(allow_null=True)
    tickets = serializers.ListField(
        child=TicketRequestSerializer(allow_null=True),
        allow_empty=True,
    )

    def ticket_requests(self) -> list[TicketRequest | None]:
        return [
            None if line is None else TicketRequest(TicketCategory(line["type"]), line["quantity"])
            for line in self.validated_data["tickets"]
        ]


class PurchaseOutcomeSerializer(serializers.Serializer):
    """Serializer for PurchaseOutcome domain model."""

    account_id = serializers.IntegerField(source="account_id.value")
    total_amount = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    adults = serializers.IntegerField(source="tally.adults")
    children = serializers.IntegerField(source="tally.children")
    infants = serializers.IntegerField(source="tally.infants")
