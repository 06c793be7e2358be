# core/store.py

"""
DATABASE ERROR TRANSLATION

Every engine entry point that touches the database surfaces failures as
engine errors, never as raw driver exceptions:
- lock contention          -> ConcurrencyConflictError (retryable)
- any other DatabaseError  -> StoreFailureError
"""

from __future__ import annotations

import functools
import logging

from django.db import DatabaseError, OperationalError

from core.exceptions import ConcurrencyConflictError, StoreFailureError

logger = logging.getLogger(__name__)

# Driver messages / SQLSTATEs that mean "someone else holds the lock".
_LOCK_MESSAGES = (
    "database is locked",
    "database table is locked",
    "could not obtain lock",
    "lock timeout",
    "deadlock detected",
    "could not serialize access",
)
_LOCK_SQLSTATES = {"40001", "40P01", "55P03"}


def _context(kwargs) -> dict:
    return {k: v for k, v in kwargs.items() if k in ("user_id", "product_id", "cart_line_id")}


def is_lock_contention(exc: BaseException) -> bool:
    if not isinstance(exc, OperationalError):
        return False

    msg = str(exc).lower()
    if any(marker in msg for marker in _LOCK_MESSAGES):
        return True

    cause = exc.__cause__
    code = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    return code in _LOCK_SQLSTATES


def translate_store_errors(func):
    """
    Re-raise DatabaseError from `func` as the matching engine error.

    Wrap the outermost call: any transaction.atomic inside `func` has already
    rolled back by the time the error is translated.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            if is_lock_contention(exc):
                logger.warning(
                    "Store lock contention in %s", func.__name__, extra=_context(kwargs)
                )
                raise ConcurrencyConflictError(
                    "The cart is busy; retry", **_context(kwargs)
                ) from exc
            logger.exception("Store failure in %s", func.__name__, extra=_context(kwargs))
            raise StoreFailureError("Store failure", **_context(kwargs)) from exc

    return wrapper
