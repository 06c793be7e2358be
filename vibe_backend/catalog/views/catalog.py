# catalog/views/catalog.py
"""
CATALOG (STOREFRONT)

GET /api/products/

Rules:
- AllowAny (no auth in this service)
- Read path only, no side effects
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.serializers import ProductSerializer
from catalog.services.catalog_reader import list_products
from core.api import engine_error_response
from core.exceptions import EngineError

logger = logging.getLogger(__name__)


class ProductListView(APIView):
    permission_classes = [AllowAny]
    serializer_class = ProductSerializer

    @extend_schema(
        tags=["Catalog"],
        responses={200: ProductSerializer(many=True)},
        description="Full product catalog in a stable order.",
    )
    def get(self, request):
        try:
            products = list_products()
        except EngineError as exc:
            return engine_error_response(exc)

        return Response(
            {"ok": True, "products": ProductSerializer(products, many=True).data},
            status=status.HTTP_200_OK,
        )
