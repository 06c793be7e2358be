# cart/views/api.py

"""
CART API VIEWS

Purpose:
- View the cart (lines joined with live prices + total)
- Upsert a line (qty <= 0 removes it)
- Remove a line by its own id

Hard rules:
- Views are thin: every rule lives in cart.services.cart_store.
- The user id is explicit (X-User-Id header, else DEFAULT_USER_ID).
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cart.serializers import (
    CartLineSerializer,
    CartViewSerializer,
    UpsertCartLineInputSerializer,
)
from cart.services.cart_store import list_lines, remove_line, upsert_line
from core.api import USER_HEADER, engine_error_response, error_response, resolve_user_id
from core.exceptions import EngineError

logger = logging.getLogger(__name__)

USER_HEADER_PARAMETER = OpenApiParameter(
    name=USER_HEADER,
    type=int,
    location=OpenApiParameter.HEADER,
    required=False,
    description="Cart owner. Defaults to the configured single user.",
)


class CartView(APIView):
    """
    GET  /api/cart/   -> { ok, items, total, itemCount }
    POST /api/cart/   -> { ok, item } | { ok, message: "Removed from cart" }
    """

    permission_classes = [AllowAny]
    serializer_class = CartViewSerializer

    @extend_schema(
        tags=["Cart"],
        parameters=[USER_HEADER_PARAMETER],
        responses={200: CartViewSerializer},
        description="Current cart lines joined with live catalog prices.",
    )
    def get(self, request):
        try:
            user_id = resolve_user_id(request)
            cart = list_lines(user_id=user_id)
        except EngineError as exc:
            return engine_error_response(exc)

        return Response(
            {"ok": True, **CartViewSerializer(cart).data},
            status=status.HTTP_200_OK,
        )

    @extend_schema(
        tags=["Cart"],
        parameters=[USER_HEADER_PARAMETER],
        request=UpsertCartLineInputSerializer,
        responses={200: CartLineSerializer},
        description="Insert or replace the quantity for a product; qty <= 0 removes it.",
        examples=[
            OpenApiExample("Set quantity", value={"productId": 1, "qty": 2}, request_only=True),
            OpenApiExample("Remove", value={"productId": 1, "qty": 0}, request_only=True),
        ],
    )
    def post(self, request):
        serializer = UpsertCartLineInputSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                code="INVALID_INPUT",
                message="productId and numeric qty required",
                http_status=status.HTTP_400_BAD_REQUEST,
                details=serializer.errors,
            )

        try:
            user_id = resolve_user_id(request)
            result = upsert_line(
                user_id=user_id,
                product_id=serializer.validated_data["productId"],
                quantity=serializer.validated_data["qty"],
            )
        except EngineError as exc:
            return engine_error_response(exc)

        if result.removed:
            return Response(
                {"ok": True, "message": "Removed from cart"},
                status=status.HTTP_200_OK,
            )

        return Response(
            {"ok": True, "item": CartLineSerializer(result.line).data},
            status=status.HTTP_200_OK,
        )


class CartLineView(APIView):
    """
    DELETE /api/cart/<cart_line_id>/

    Removing a line that is absent or owned by another user is a no-op.
    """

    permission_classes = [AllowAny]
    serializer_class = None

    @extend_schema(
        tags=["Cart"],
        parameters=[USER_HEADER_PARAMETER],
        responses={200: dict},
        description="Remove a cart line by its own id (idempotent).",
    )
    def delete(self, request, cart_line_id):
        try:
            user_id = resolve_user_id(request)
            remove_line(user_id=user_id, cart_line_id=cart_line_id)
        except EngineError as exc:
            return engine_error_response(exc)

        return Response({"ok": True, "message": "Removed"}, status=status.HTTP_200_OK)
