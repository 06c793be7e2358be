# receipts/models/__init__.py

"""
RECEIPTS MODELS PACKAGE EXPORTS
"""

from .receipt import Receipt
from .receipt_item import ReceiptItem

__all__ = [
    "Receipt",
    "ReceiptItem",
]
