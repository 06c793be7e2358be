"""
PATH: catalog/serializers/product.py

Storefront product shape. Keys match the storefront contract:
id, name, price, img.
"""

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(
        source="unit_price",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    img = serializers.CharField(source="image_url", read_only=True)
