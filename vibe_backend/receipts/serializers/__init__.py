# receipts/serializers/__init__.py

from .checkout import CheckoutInputSerializer
from .receipt import ReceiptItemSerializer, ReceiptSerializer

__all__ = [
    "CheckoutInputSerializer",
    "ReceiptItemSerializer",
    "ReceiptSerializer",
]
