# core/tests/test_quantities.py

from decimal import Decimal

from django.test import SimpleTestCase

from core.exceptions import InvalidInputError
from core.money import line_total, money
from core.quantities import MAX_QTY, to_int_qty, to_positive_id


class QuantityNormalizerTests(SimpleTestCase):
    """
    GUARANTEES:
    - Quantities are whole integers (negative allowed, fractions rejected)
    - Booleans and empty values are never silently accepted
    """

    def test_accepts_integral_values(self):
        self.assertEqual(to_int_qty(3), 3)
        self.assertEqual(to_int_qty(-2), -2)
        self.assertEqual(to_int_qty(0), 0)
        self.assertEqual(to_int_qty(4.0), 4)
        self.assertEqual(to_int_qty(Decimal("5")), 5)
        self.assertEqual(to_int_qty(" 7 "), 7)
        self.assertEqual(to_int_qty("-1"), -1)

    def test_upper_bound_is_inclusive(self):
        self.assertEqual(to_int_qty(MAX_QTY), MAX_QTY)
        self.assertEqual(to_int_qty(str(MAX_QTY)), MAX_QTY)

    def test_rejects_quantities_above_the_bound(self):
        for bad in (MAX_QTY + 1, 10**11, 10**20, float(10**11), Decimal("1e20"), "100000000000"):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInputError):
                    to_int_qty(bad)

    def test_rejects_fractional_and_garbage(self):
        for bad in (1.5, Decimal("2.25"), "1.5", "abc", "--1", None, "", True, [], float("nan"), float("inf")):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInputError):
                    to_int_qty(bad)


class PositiveIdTests(SimpleTestCase):
    def test_accepts_positive_ints_and_digit_strings(self):
        self.assertEqual(to_positive_id(1), 1)
        self.assertEqual(to_positive_id("42"), 42)

    def test_rejects_zero_negative_bool_and_text(self):
        for bad in (0, -3, "0", "-3", "x1", False, None, 1.0):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInputError):
                    to_positive_id(bad, label="productId")

    def test_error_message_names_the_field(self):
        with self.assertRaisesMessage(InvalidInputError, "productId"):
            to_positive_id("nope", label="productId")


class MoneyTests(SimpleTestCase):
    def test_quantizes_half_up(self):
        self.assertEqual(money("2.345"), Decimal("2.35"))
        self.assertEqual(money(10), Decimal("10.00"))
        self.assertEqual(money(None), Decimal("0.00"))

    def test_line_total(self):
        self.assertEqual(line_total(Decimal("19.99"), 3), Decimal("59.97"))

    def test_invalid_money_raises_value_error(self):
        with self.assertRaises(ValueError):
            money("ten dollars")
