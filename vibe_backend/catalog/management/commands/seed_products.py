# catalog/management/commands/seed_products.py

import logging
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from catalog.models import Product

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    (
        "Classic Vibe T-Shirt",
        "19.99",
        "https://plus.unsplash.com/premium_photo-1690349404224-53f94f20df8f?auto=format&fit=crop&w=500&q=80",
    ),
    (
        "Urban Backpack",
        "49.99",
        "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?auto=format&fit=crop&w=500&q=80",
    ),
    (
        "Wireless Earbuds",
        "79.99",
        "https://images.unsplash.com/photo-1632200004922-bc18602c79fc?auto=format&fit=crop&w=500&q=80",
    ),
    (
        "Desk Lamp",
        "24.50",
        "https://plus.unsplash.com/premium_photo-1685287731216-a7a0fae7a41a?auto=format&fit=crop&w=500&q=80",
    ),
    (
        "Vibe Mug",
        "9.99",
        "https://plus.unsplash.com/premium_photo-1719289799337-9cb436447965?auto=format&fit=crop&w=500&q=80",
    ),
    (
        "Sticker Pack",
        "4.99",
        "https://images.unsplash.com/photo-1633533452206-8ab246b00e30?auto=format&fit=crop&w=500&q=80",
    ),
]


class Command(BaseCommand):
    help = "Seed the demo catalog (only when empty unless --force)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Add any demo products missing by name even if the catalog is not empty.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        force = bool(options.get("force"))

        if Product.objects.exists() and not force:
            self.stdout.write(self.style.WARNING("Catalog not empty, skipping seed."))
            return

        created_count = 0
        for name, price, img in DEMO_PRODUCTS:
            _, created = Product.objects.get_or_create(
                name=name,
                defaults={"unit_price": Decimal(price), "image_url": img},
            )
            if created:
                created_count += 1

        logger.info("Seeded demo catalog", extra={"created_count": created_count})
        self.stdout.write(
            self.style.SUCCESS(f"Seeded {created_count} products into the catalog.")
        )
