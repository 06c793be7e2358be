# receipts/views/checkout.py

"""
CHECKOUT ENDPOINT

POST /api/checkout/   body: { name, email }

Calls:
- receipts.services.checkout.run_checkout()

Responses:
- 200 { ok, receipt }
- 400 VALIDATION_FAILED / EMPTY_CART / INVALID_INPUT
- 409 CONCURRENCY_CONFLICT (retry is safe: nothing was written)
- 503 STORE_FAILURE (rolled back)
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from cart.views.api import USER_HEADER_PARAMETER
from core.api import engine_error_response, error_response, resolve_user_id
from core.exceptions import EngineError
from receipts.serializers import CheckoutInputSerializer, ReceiptSerializer
from receipts.services.checkout import run_checkout

logger = logging.getLogger(__name__)


class CheckoutThrottle(AnonRateThrottle):
    scope = "checkout"


class CheckoutView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [CheckoutThrottle]
    serializer_class = CheckoutInputSerializer

    @extend_schema(
        tags=["Checkout"],
        parameters=[USER_HEADER_PARAMETER],
        request=CheckoutInputSerializer,
        responses={
            200: ReceiptSerializer,
            400: OpenApiResponse(description="Validation failed / empty cart"),
            409: OpenApiResponse(description="Concurrent checkout in progress"),
            503: OpenApiResponse(description="Store failure (rolled back)"),
        },
        description="Atomically convert the cart into a receipt and clear the cart.",
        examples=[
            OpenApiExample(
                "Checkout",
                value={"name": "Ada Lovelace", "email": "ada@example.com"},
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        serializer = CheckoutInputSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                code="INVALID_INPUT",
                message="name and email required",
                http_status=status.HTTP_400_BAD_REQUEST,
                details=serializer.errors,
            )

        try:
            user_id = resolve_user_id(request)
            receipt = run_checkout(
                user_id=user_id,
                customer_name=serializer.validated_data.get("name"),
                customer_email=serializer.validated_data.get("email"),
            )
        except EngineError as exc:
            return engine_error_response(exc)
        except Exception:
            logger.exception("Unexpected checkout failure")
            return error_response(
                code="UNKNOWN_ERROR",
                message="Checkout failed",
                http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"ok": True, "receipt": ReceiptSerializer(receipt).data},
            status=status.HTTP_200_OK,
        )
