"""Serializers for purchase requests and responses.

Request serializers check JSON shape only. Business rules such as positive
counts and the account ID range belong to the service, so they are not
enforced here.
"""

from rest_framework import serializers

from tickets.domain import PurchaseSummary, TicketCategory, TicketRequestLine


class TicketRequestLineSerializer(serializers.Serializer):
    """Serializer for one category/count pair."""

    category = serializers.ChoiceField(choices=[category.value for category in TicketCategory])
    count = serializers.IntegerField()

    def validate(self, attrs) -> TicketRequestLine:
        return TicketRequestLine(
            category=TicketCategory(attrs["category"]),
            count=attrs["count"],
        )


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for POST /api/purchases bodies."""

    account_id = serializers.IntegerField(allow_null=True, default=None)
    tickets = serializers.ListField(
        child=TicketRequestLineSerializer(allow_null=True),
        allow_empty=True,
        allow_null=True,
    )


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for PurchaseSummary domain model."""

    total_price = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    total_tickets = serializers.IntegerField()
    adult_count = serializers.IntegerField()
    child_count = serializers.IntegerField()
    infant_count = serializers.IntegerField()

    def to_representation(self, instance: PurchaseSummary) -> dict:
        data = super().to_representation(instance)
        account_id = self.context.get("account_id")
        if account_id is not None:
            data = {"account_id": account_id, **data}
        return data
