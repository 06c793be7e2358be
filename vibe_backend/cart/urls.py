"""
PATH: cart/urls.py

CART URLS

- GET/POST  /api/cart/
- DELETE    /api/cart/<cart_line_id>/
"""

from django.urls import path

from cart.views.api import CartLineView, CartView

app_name = "cart"

urlpatterns = [
    path("", CartView.as_view(), name="cart"),
    path("<str:cart_line_id>/", CartLineView.as_view(), name="cart-line"),
]
