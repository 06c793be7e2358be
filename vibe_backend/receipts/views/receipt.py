# receipts/views/receipt.py

"""
RECEIPT READ ENDPOINTS (read-only archive)

GET /api/receipts/            ?created_after=&created_before=&email=
GET /api/receipts/<id>/
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cart.views.api import USER_HEADER_PARAMETER
from core.api import engine_error_response, error_response, resolve_user_id
from core.exceptions import EngineError
from receipts.filters import ReceiptFilter
from receipts.models import Receipt
from receipts.serializers import ReceiptSerializer
from receipts.services.receipt_store import get_receipt, list_receipts_for_user


class ReceiptListView(APIView):
    permission_classes = [AllowAny]
    serializer_class = ReceiptSerializer

    @extend_schema(
        tags=["Receipts"],
        parameters=[
            USER_HEADER_PARAMETER,
            OpenApiParameter("created_after", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("created_before", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("email", str, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: ReceiptSerializer(many=True)},
        description="The user's receipts, newest first.",
    )
    def get(self, request):
        filterset = ReceiptFilter(request.query_params, queryset=Receipt.objects.all())
        if not filterset.is_valid():
            return error_response(
                code="INVALID_INPUT",
                message="Invalid receipt filters",
                http_status=status.HTTP_400_BAD_REQUEST,
                details=filterset.errors.get_json_data(),
            )

        try:
            user_id = resolve_user_id(request)
            receipts = list_receipts_for_user(user_id=user_id, queryset=filterset.qs)
        except EngineError as exc:
            return engine_error_response(exc)

        return Response(
            {"ok": True, "receipts": ReceiptSerializer(receipts, many=True).data},
            status=status.HTTP_200_OK,
        )


class ReceiptDetailView(APIView):
    permission_classes = [AllowAny]
    serializer_class = ReceiptSerializer

    @extend_schema(
        tags=["Receipts"],
        parameters=[USER_HEADER_PARAMETER],
        responses={200: ReceiptSerializer},
    )
    def get(self, request, receipt_id):
        try:
            user_id = resolve_user_id(request)
            receipt = get_receipt(receipt_id=receipt_id, user_id=user_id)
        except EngineError as exc:
            return engine_error_response(exc)

        return Response(
            {"ok": True, "receipt": ReceiptSerializer(receipt).data},
            status=status.HTTP_200_OK,
        )
