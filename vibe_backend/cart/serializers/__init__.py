# cart/serializers/__init__.py

from .cart import CartViewSerializer, UpsertCartLineInputSerializer
from .cart_line import CartLineSerializer

__all__ = [
    "CartLineSerializer",
    "CartViewSerializer",
    "UpsertCartLineInputSerializer",
]
