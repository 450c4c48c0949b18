"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import ErrorCode, ValidationError
from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseSummarySerializer
from tickets.services import get_ticket_service


def error_response(error: ValidationError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    line_index = getattr(error, "line_index", None)
    if line_index is not None:
        body["line_index"] = line_index
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    "code": ErrorCode.INVALID_REQUEST.value,
                    "message": "Malformed purchase request",
                    "errors": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        account_id = serializer.validated_data["account_id"]
        tickets = serializer.validated_data["tickets"] or ()
        outcome = get_ticket_service().purchase_tickets(account_id, *tickets)
        if not outcome.ok:
            return error_response(outcome.error)

        summary = PurchaseSummarySerializer(outcome.summary, context={"account_id": account_id})
        return Response(summary.data, status=status.HTTP_201_CREATED)
