# receipts/services/checkout.py

"""
CHECKOUT TRANSACTION (APPLICATION SERVICE)

Purpose:
- Convert a user's cart into an immutable receipt and clear the cart,
  as ONE atomic unit: receipt + items + cart clear commit together or not at all.

States:
- COLLECTING  -> cart may be mutated
- FINALIZING  -> checkout in progress; the user's cart anchor row is claimed
- COMPLETED   -> receipt exists, consumed lines are gone
- ABORTED     -> nothing written (validation, empty cart, or rollback)

Hard rules:
- Customer fields are validated before the database is touched.
- The FIRST statement inside the transaction is a write to the cart anchor
  row (claim_cart). Two concurrent checkouts for one user therefore queue;
  the second sees an empty cart.
- Prices are read once, in the locked read, and frozen into the receipt.
- Only the lines that were read are deleted (a line added concurrently by an
  upsert after the read stays in the cart).
- Receipt creation is never retried. Lock contention surfaces as
  ConcurrencyConflictError, any other DB failure as StoreFailureError, both
  after a full rollback.
"""

from __future__ import annotations

import enum
import logging

from django.db import DatabaseError, OperationalError, transaction

from cart.services.cart_store import claim_cart, clear_lines, lock_lines
from core.exceptions import (
    ConcurrencyConflictError,
    EmptyCartError,
    EngineError,
    StoreFailureError,
    ValidationFailedError,
)
from core.quantities import to_positive_id
from core.store import is_lock_contention
from receipts.services.receipt_store import ReceiptSnapshot, create_receipt

logger = logging.getLogger(__name__)

CUSTOMER_NAME_MAX_LENGTH = 255
CUSTOMER_EMAIL_MAX_LENGTH = 254


class CheckoutState(str, enum.Enum):
    COLLECTING = "collecting"
    FINALIZING = "finalizing"
    COMPLETED = "completed"
    ABORTED = "aborted"


def _transition(state: CheckoutState, *, user_id: int, **extra) -> None:
    level = logging.WARNING if state is CheckoutState.ABORTED else logging.INFO
    logger.log(
        level,
        "Checkout %s",
        state.value,
        extra={"user_id": user_id, "checkout_state": state.value, **extra},
    )


def _clean_customer_field(value, *, label: str, max_length: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationFailedError(f"{label} is required")

    cleaned = value.strip()
    if len(cleaned) > max_length:
        raise ValidationFailedError(f"{label} must be at most {max_length} characters")
    return cleaned


@transaction.atomic
def _finalize(*, user_id: int, customer_name: str, customer_email: str) -> ReceiptSnapshot:
    if not claim_cart(user_id=user_id):
        raise EmptyCartError("Cart is empty", user_id=user_id)

    lines = lock_lines(user_id=user_id)
    if not lines:
        raise EmptyCartError("Cart is empty", user_id=user_id)

    receipt = create_receipt(
        user_id=user_id,
        customer_name=customer_name,
        customer_email=customer_email,
        lines=lines,
    )

    consumed = [line.cart_line_id for line in lines]
    cleared = clear_lines(user_id=user_id, cart_line_ids=consumed)
    if cleared != len(consumed):
        # Rolls back the receipt: it must never exist without its cart clear.
        raise StoreFailureError(
            "Cart changed while checkout held its lock",
            user_id=user_id,
            expected=len(consumed),
            cleared=cleared,
        )

    return receipt


def run_checkout(*, user_id, customer_name, customer_email) -> ReceiptSnapshot:
    """
    Checkout the user's cart.

    Returns the receipt snapshot, or raises:
    - ValidationFailedError  (bad customer fields, nothing touched)
    - EmptyCartError         (no lines, nothing written)
    - ConcurrencyConflictError (lock contention, rolled back, retryable)
    - StoreFailureError      (any other DB failure, rolled back)
    """
    user_id = to_positive_id(user_id, label="user_id")

    try:
        name = _clean_customer_field(
            customer_name, label="name", max_length=CUSTOMER_NAME_MAX_LENGTH
        )
        email = _clean_customer_field(
            customer_email, label="email", max_length=CUSTOMER_EMAIL_MAX_LENGTH
        )
    except ValidationFailedError as exc:
        _transition(CheckoutState.ABORTED, user_id=user_id, reason=exc.code)
        raise

    _transition(CheckoutState.FINALIZING, user_id=user_id)

    try:
        receipt = _finalize(user_id=user_id, customer_name=name, customer_email=email)
    except EngineError as exc:
        _transition(CheckoutState.ABORTED, user_id=user_id, reason=exc.code)
        raise
    except OperationalError as exc:
        if is_lock_contention(exc):
            _transition(
                CheckoutState.ABORTED,
                user_id=user_id,
                reason=ConcurrencyConflictError.code,
            )
            raise ConcurrencyConflictError(
                "Another checkout is in progress for this cart; retry",
                user_id=user_id,
            ) from exc
        logger.exception("Checkout store failure", extra={"user_id": user_id})
        raise StoreFailureError("Checkout failed", user_id=user_id) from exc
    except DatabaseError as exc:
        logger.exception("Checkout store failure", extra={"user_id": user_id})
        raise StoreFailureError("Checkout failed", user_id=user_id) from exc

    _transition(
        CheckoutState.COMPLETED,
        user_id=user_id,
        receipt_id=receipt.id,
        total=str(receipt.total),
    )
    return receipt
