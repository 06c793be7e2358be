# receipts/tests/test_checkout.py

"""
CHECKOUT TRANSACTION TESTS

Run with:
    python manage.py test receipts -v 2

Covers the all-or-nothing contract:
receipt + items + cart clear commit together, or nothing changes.
"""

import threading
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError, OperationalError, connection
from django.test import TestCase, TransactionTestCase

from cart.models import CartLine
from cart.services.cart_store import list_lines, upsert_line
from catalog.models import Product
from core.exceptions import (
    ConcurrencyConflictError,
    EmptyCartError,
    InvalidInputError,
    StoreFailureError,
    ValidationFailedError,
)
from receipts.models import Receipt, ReceiptItem
from receipts.services.checkout import run_checkout
from receipts.services.receipt_store import get_receipt

USER = 1


class CheckoutTests(TestCase):
    """
    GUARANTEES:
    - Successful checkout writes exactly one receipt and empties the cart
    - Receipt prices are frozen at checkout time
    - Validation and empty-cart failures change nothing
    """

    def setUp(self):
        self.a = Product.objects.create(name="A", unit_price=Decimal("10.00"))
        self.b = Product.objects.create(name="B", unit_price=Decimal("5.00"))

    def _fill_cart(self, user_id=USER):
        upsert_line(user_id=user_id, product_id=self.a.id, quantity=2)
        upsert_line(user_id=user_id, product_id=self.b.id, quantity=1)

    def test_checkout_writes_receipt_and_clears_cart(self):
        self._fill_cart()

        receipt = run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(receipt.total, Decimal("25.00"))
        self.assertEqual(receipt.user_id, USER)
        self.assertEqual(len(receipt.items), 2)
        self.assertEqual(
            [(i.product_id, i.name, i.unit_price, i.quantity) for i in receipt.items],
            [(self.a.id, "A", Decimal("10.00"), 2), (self.b.id, "B", Decimal("5.00"), 1)],
        )
        self.assertEqual(Receipt.objects.count(), 1)
        self.assertEqual(ReceiptItem.objects.count(), 2)
        self.assertTrue(list_lines(user_id=USER).is_empty)

    def test_customer_fields_are_trimmed(self):
        self._fill_cart()

        receipt = run_checkout(user_id=USER, customer_name="  Ada ", customer_email=" ada@example.com ")

        self.assertEqual(receipt.customer_name, "Ada")
        self.assertEqual(receipt.customer_email, "ada@example.com")

    def test_receipt_prices_are_frozen(self):
        self._fill_cart()
        receipt = run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        Product.objects.filter(pk=self.a.id).update(unit_price=Decimal("99.00"), name="A2")

        stored = get_receipt(receipt_id=receipt.id)
        self.assertEqual(stored.total, Decimal("25.00"))
        self.assertEqual(stored.items[0].unit_price, Decimal("10.00"))
        self.assertEqual(stored.items[0].name, "A")

    def test_empty_cart_raises_and_writes_nothing(self):
        with self.assertRaises(EmptyCartError):
            run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(Receipt.objects.count(), 0)

    def test_cart_emptied_by_removals_raises_empty_cart(self):
        self._fill_cart()
        upsert_line(user_id=USER, product_id=self.a.id, quantity=0)
        upsert_line(user_id=USER, product_id=self.b.id, quantity=0)

        with self.assertRaises(EmptyCartError):
            run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(Receipt.objects.count(), 0)

    def test_invalid_customer_fields_change_nothing(self):
        self._fill_cart()

        for name, email in (("", "ada@example.com"), ("Ada", "   "), (None, "x@y"), ("A" * 256, "x@y")):
            with self.subTest(name=name, email=email):
                with self.assertRaises(ValidationFailedError):
                    run_checkout(user_id=USER, customer_name=name, customer_email=email)

        self.assertEqual(Receipt.objects.count(), 0)
        self.assertEqual(len(list_lines(user_id=USER).lines), 2)

    def test_validation_precedes_empty_cart(self):
        with self.assertRaises(ValidationFailedError):
            run_checkout(user_id=USER, customer_name="", customer_email="")

    def test_checkout_only_touches_own_cart(self):
        self._fill_cart(user_id=USER)
        self._fill_cart(user_id=2)

        run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertTrue(list_lines(user_id=USER).is_empty)
        self.assertEqual(len(list_lines(user_id=2).lines), 2)

    def test_second_checkout_after_success_is_empty_cart(self):
        self._fill_cart()
        run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        with self.assertRaises(EmptyCartError):
            run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(Receipt.objects.count(), 1)

    def test_total_beyond_stored_precision_changes_nothing(self):
        gold = Product.objects.create(name="Gold Bar", unit_price=Decimal("99999999.99"))
        upsert_line(user_id=USER, product_id=gold.id, quantity=200)

        with self.assertRaises(InvalidInputError):
            run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(Receipt.objects.count(), 0)
        self.assertEqual(list_lines(user_id=USER).lines[0].quantity, 200)


class CheckoutRollbackTests(TestCase):
    """
    GUARANTEES:
    - A failure after the receipt insert rolls the receipt back
    - The cart is left exactly as it was
    """

    def setUp(self):
        self.a = Product.objects.create(name="A", unit_price=Decimal("10.00"))
        upsert_line(user_id=USER, product_id=self.a.id, quantity=3)

    def test_failure_while_clearing_cart_rolls_back(self):
        with mock.patch(
            "receipts.services.checkout.clear_lines",
            side_effect=DatabaseError("boom"),
        ):
            with self.assertRaises(StoreFailureError):
                run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(Receipt.objects.count(), 0)
        self.assertEqual(ReceiptItem.objects.count(), 0)
        self.assertEqual(list_lines(user_id=USER).lines[0].quantity, 3)

    def test_lock_contention_maps_to_concurrency_conflict(self):
        with mock.patch(
            "receipts.services.checkout.clear_lines",
            side_effect=OperationalError("database is locked"),
        ):
            with self.assertRaises(ConcurrencyConflictError) as ctx:
                run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertTrue(ctx.exception.retryable)
        self.assertEqual(Receipt.objects.count(), 0)
        self.assertEqual(CartLine.objects.count(), 1)

    def test_partial_clear_rolls_back(self):
        with mock.patch("receipts.services.checkout.clear_lines", return_value=0):
            with self.assertRaises(StoreFailureError):
                run_checkout(user_id=USER, customer_name="Ada", customer_email="ada@example.com")

        self.assertEqual(Receipt.objects.count(), 0)
        self.assertEqual(CartLine.objects.count(), 1)


class ConcurrentCheckoutTests(TransactionTestCase):
    """
    Two checkouts for the same user race on real, separate connections.

    GUARANTEES:
    - Exactly one receipt is written
    - The loser sees an empty cart (or a retryable conflict), never a duplicate
    """

    def setUp(self):
        self.a = Product.objects.create(name="A", unit_price=Decimal("10.00"))
        self.b = Product.objects.create(name="B", unit_price=Decimal("5.00"))
        upsert_line(user_id=USER, product_id=self.a.id, quantity=2)
        upsert_line(user_id=USER, product_id=self.b.id, quantity=1)

    def test_double_checkout_writes_one_receipt(self):
        barrier = threading.Barrier(2)
        outcomes = []
        lock = threading.Lock()

        def attempt():
            result = ("error", None)
            try:
                barrier.wait(timeout=5)
                receipt = run_checkout(
                    user_id=USER, customer_name="Ada", customer_email="ada@example.com"
                )
                result = ("ok", receipt)
            except (EmptyCartError, ConcurrencyConflictError) as exc:
                result = ("lost", exc)
            finally:
                connection.close()
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=attempt) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=60)

        self.assertEqual(len(outcomes), 2)
        winners = [value for kind, value in outcomes if kind == "ok"]
        self.assertEqual(len(winners), 1)
        self.assertEqual(winners[0].total, Decimal("25.00"))

        self.assertEqual(Receipt.objects.count(), 1)
        self.assertEqual(ReceiptItem.objects.count(), 2)
        self.assertEqual(CartLine.objects.count(), 0)
