# core/quantities.py

"""
Integer normalizers for quantities and row ids.

HARD RULE: quantities are whole integer units. Negative values are legal
input (they mean "remove" at the cart boundary), fractional ones are not,
and nothing above MAX_QTY is ever stored.
"""

from __future__ import annotations

from decimal import Decimal

from core.exceptions import InvalidInputError

# Per-line ceiling. Keeps quantity * price inside the stored money precision.
MAX_QTY = 9999


def _bounded(n: int) -> int:
    if n > MAX_QTY:
        raise InvalidInputError(f"quantity must be at most {MAX_QTY}")
    return n


def to_int_qty(value) -> int:
    if value is None or value == "":
        raise InvalidInputError("quantity is required")

    if isinstance(value, bool):
        raise InvalidInputError("quantity must be a whole integer unit")

    if isinstance(value, int):
        return _bounded(value)

    if isinstance(value, (float, Decimal)):
        if value != value or value in (float("inf"), float("-inf")):
            raise InvalidInputError("quantity must be a whole integer unit")
        if int(value) == value:
            return _bounded(int(value))
        raise InvalidInputError("quantity must be a whole integer unit")

    if isinstance(value, str):
        s = value.strip()
        if s.lstrip("-").isdigit() and s.count("-") <= 1:
            return _bounded(int(s))

    raise InvalidInputError("quantity must be a whole integer unit")


def to_positive_id(value, *, label: str = "id") -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"{label} must be a positive integer")

    if isinstance(value, int):
        n = value
    elif isinstance(value, str) and value.strip().isdigit():
        n = int(value.strip())
    else:
        raise InvalidInputError(f"{label} must be a positive integer")

    if n <= 0:
        raise InvalidInputError(f"{label} must be a positive integer")
    return n
