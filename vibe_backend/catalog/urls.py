# catalog/urls.py

from django.urls import path

from catalog.views.catalog import ProductListView

app_name = "catalog"

urlpatterns = [
    path("", ProductListView.as_view(), name="product-list"),
]
