# receipts/tests/test_receipts.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import transaction
from django.test import TestCase, TransactionTestCase

from core.exceptions import InvalidInputError, NotFoundError, StoreFailureError
from receipts.models import Receipt, ReceiptItem
from receipts.services.receipt_store import (
    ReceiptItemSnapshot,
    create_receipt,
    get_receipt,
    list_receipts_for_user,
)

USER = 1


def _lines():
    return [
        ReceiptItemSnapshot(product_id=1, name="A", unit_price=Decimal("10.00"), quantity=2),
        ReceiptItemSnapshot(product_id=2, name="B", unit_price=Decimal("5.00"), quantity=1),
    ]


def _write(user_id=USER, email="ada@example.com"):
    with transaction.atomic():
        return create_receipt(
            user_id=user_id,
            customer_name="Ada",
            customer_email=email,
            lines=_lines(),
        )


class ReceiptStoreTests(TestCase):
    """
    GUARANTEES:
    - total == sum(unit_price * quantity)
    - Reads return frozen snapshots scoped to the owning user
    - Receipts are listed newest first
    """

    def test_create_receipt_computes_total(self):
        receipt = _write()

        self.assertEqual(receipt.total, Decimal("25.00"))
        self.assertEqual(Receipt.objects.get(pk=receipt.id).total, Decimal("25.00"))
        self.assertEqual(ReceiptItem.objects.filter(receipt_id=receipt.id).count(), 2)

    def test_get_receipt_round_trips_items(self):
        receipt = _write()

        stored = get_receipt(receipt_id=receipt.id)

        self.assertEqual(stored.customer_email, "ada@example.com")
        self.assertEqual([i.line_total for i in stored.items], [Decimal("20.00"), Decimal("5.00")])

    def test_get_receipt_of_other_user_is_not_found(self):
        receipt = _write(user_id=USER)

        with self.assertRaises(NotFoundError):
            get_receipt(receipt_id=receipt.id, user_id=2)

    def test_get_unknown_or_malformed_receipt(self):
        with self.assertRaises(NotFoundError):
            get_receipt(receipt_id=12345)
        with self.assertRaises(InvalidInputError):
            get_receipt(receipt_id="abc")

    def test_list_is_newest_first_and_user_scoped(self):
        first = _write()
        second = _write()
        _write(user_id=2)

        receipts = list_receipts_for_user(user_id=USER)

        self.assertEqual([r.id for r in receipts], [second.id, first.id])


class ReceiptImmutabilityTests(TestCase):
    """
    GUARANTEES:
    - Receipts and items can be inserted, never updated or deleted
    """

    def setUp(self):
        self.receipt = Receipt.objects.get(pk=_write().id)

    def test_save_existing_receipt_is_blocked(self):
        self.receipt.total = Decimal("999.00")

        with self.assertRaises(ValidationError):
            self.receipt.save()

        self.assertEqual(Receipt.objects.get(pk=self.receipt.id).total, Decimal("25.00"))

    def test_delete_is_blocked(self):
        with self.assertRaises(ValidationError):
            self.receipt.delete()
        with self.assertRaises(ValidationError):
            Receipt.objects.filter(pk=self.receipt.id).delete()

    def test_queryset_update_is_blocked(self):
        with self.assertRaises(ValidationError):
            Receipt.objects.filter(pk=self.receipt.id).update(total=Decimal("1.00"))
        with self.assertRaises(ValidationError):
            ReceiptItem.objects.filter(receipt=self.receipt).update(quantity=9)

    def test_item_save_is_blocked(self):
        item = self.receipt.items.first()
        item.quantity = 50

        with self.assertRaises(ValidationError):
            item.save()


class ReceiptTotalBoundTests(TestCase):
    """
    GUARANTEES:
    - A total that does not fit the stored precision is rejected before any write
    """

    def test_total_beyond_stored_precision_writes_nothing(self):
        lines = [
            ReceiptItemSnapshot(
                product_id=1, name="Gold Bar", unit_price=Decimal("99999999.99"), quantity=200
            ),
        ]

        with self.assertRaises(InvalidInputError):
            with transaction.atomic():
                create_receipt(
                    user_id=USER,
                    customer_name="Ada",
                    customer_email="ada@example.com",
                    lines=lines,
                )

        self.assertEqual(Receipt.objects.count(), 0)
        self.assertEqual(ReceiptItem.objects.count(), 0)

    def test_largest_storable_total_is_accepted(self):
        lines = [
            ReceiptItemSnapshot(
                product_id=1, name="Gold Bar", unit_price=Decimal("99999999.99"), quantity=99
            ),
        ]

        with transaction.atomic():
            receipt = create_receipt(
                user_id=USER,
                customer_name="Ada",
                customer_email="ada@example.com",
                lines=lines,
            )

        self.assertEqual(get_receipt(receipt_id=receipt.id).total, Decimal("9899999999.01"))


class CreateReceiptOutsideTransactionTests(TransactionTestCase):
    def test_refuses_to_run_outside_atomic_block(self):
        with self.assertRaises(StoreFailureError):
            create_receipt(
                user_id=USER,
                customer_name="Ada",
                customer_email="ada@example.com",
                lines=_lines(),
            )

        self.assertEqual(Receipt.objects.count(), 0)
