# cart/models/__init__.py

from .cart import Cart
from .cart_line import CartLine

__all__ = ["Cart", "CartLine"]
