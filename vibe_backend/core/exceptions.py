# core/exceptions.py

"""
ENGINE ERRORS

Centralized error taxonomy for the cart/checkout engine.

Rules:
- Validation errors are raised before any write and never need rollback.
- StoreFailureError / ConcurrencyConflictError are raised only after the
  surrounding transaction has rolled back.
- Each error carries a stable `code` and an HTTP status for the API layer.
"""


class EngineError(Exception):
    """Base exception for all engine failures."""

    code = "ENGINE_ERROR"
    http_status = 400

    def __init__(self, message: str = "", **context):
        super().__init__(message or self.__class__.__doc__ or self.code)
        self.context = context

    @property
    def message(self) -> str:
        return str(self)


class NotFoundError(EngineError):
    """Unknown product, cart line, or receipt."""

    code = "NOT_FOUND"
    http_status = 404


class InvalidInputError(EngineError):
    """Malformed input (non-integer quantity, bad id, missing field)."""

    code = "INVALID_INPUT"
    http_status = 400


class ValidationFailedError(InvalidInputError):
    """Customer fields failed validation at checkout."""

    code = "VALIDATION_FAILED"


class EmptyCartError(EngineError):
    """Checkout attempted with no cart lines."""

    code = "EMPTY_CART"
    http_status = 400


class StoreFailureError(EngineError):
    """Database or transaction failure. Always surfaced."""

    code = "STORE_FAILURE"
    http_status = 503


class ConcurrencyConflictError(EngineError):
    """Lock contention on the same user's cart. Safe to retry."""

    code = "CONCURRENCY_CONFLICT"
    http_status = 409
    retryable = True
