"""
PATH: receipts/urls.py

- POST /api/checkout/
- GET  /api/receipts/
- GET  /api/receipts/<receipt_id>/
"""

from django.urls import path

from receipts.views.checkout import CheckoutView
from receipts.views.receipt import ReceiptDetailView, ReceiptListView

app_name = "receipts"

urlpatterns = [
    path("checkout/", CheckoutView.as_view(), name="checkout"),
    path("receipts/", ReceiptListView.as_view(), name="receipt-list"),
    path("receipts/<int:receipt_id>/", ReceiptDetailView.as_view(), name="receipt-detail"),
]
