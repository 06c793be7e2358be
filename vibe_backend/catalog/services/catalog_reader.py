# catalog/services/catalog_reader.py

"""
CATALOG READER

Purpose:
- Read-only lookup of product id -> (name, unit price, image).
- Leaf dependency of the cart store and checkout transaction.

Rules:
- Never mutates Product rows.
- Unknown ids raise NotFoundError (lookups are required, not best-effort).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.models import Product
from core.exceptions import NotFoundError
from core.money import money
from core.store import translate_store_errors


@dataclass(frozen=True)
class ProductInfo:
    id: int
    name: str
    unit_price: Decimal
    image_url: str

    @classmethod
    def from_model(cls, product: Product) -> "ProductInfo":
        return cls(
            id=product.id,
            name=product.name,
            unit_price=money(product.unit_price),
            image_url=product.image_url or "",
        )


@translate_store_errors
def list_products() -> list[ProductInfo]:
    return [ProductInfo.from_model(p) for p in Product.objects.order_by("id")]


@translate_store_errors
def get_product(product_id) -> ProductInfo:
    if isinstance(product_id, bool) or not isinstance(product_id, int):
        raise NotFoundError(f"Unknown product: {product_id!r}", product_id=product_id)

    product = Product.objects.filter(pk=product_id).first()
    if product is None:
        raise NotFoundError(f"Unknown product: {product_id}", product_id=product_id)

    return ProductInfo.from_model(product)
