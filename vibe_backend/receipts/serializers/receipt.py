# receipts/serializers/receipt.py

"""
Receipt snapshot shape returned by checkout and the receipt endpoints:
{ id, items:[{productId, name, price, qty, lineTotal}], total, name, email, timestamp }
"""

from rest_framework import serializers


class ReceiptItemSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id", read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(
        source="unit_price",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    qty = serializers.IntegerField(source="quantity", read_only=True)
    lineTotal = serializers.DecimalField(
        source="line_total",
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )


class ReceiptSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)
    items = ReceiptItemSerializer(many=True, read_only=True)
    total = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    name = serializers.CharField(source="customer_name", read_only=True)
    email = serializers.CharField(source="customer_email", read_only=True)
    timestamp = serializers.DateTimeField(source="created_at", read_only=True)
