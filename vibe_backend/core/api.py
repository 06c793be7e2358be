# core/api.py

"""
API PLUMBING SHARED BY ALL APPS

- error_response(): one error body shape for every endpoint
- engine_error_response(): EngineError -> HTTP
- resolve_user_id(): explicit user identity for every engine call
  (X-User-Id header, else settings.DEFAULT_USER_ID). This is not
  authentication; it only threads a user id through the engine.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework.response import Response

from core.exceptions import EngineError
from core.quantities import to_positive_id

USER_HEADER = "X-User-Id"


def error_response(*, code: str, message: str, http_status: int, details=None):
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return Response({"ok": False, "error": error}, status=http_status)


def engine_error_response(exc: EngineError):
    return error_response(
        code=exc.code,
        message=exc.message,
        http_status=exc.http_status,
    )


def resolve_user_id(request) -> int:
    raw = (request.headers.get(USER_HEADER) or "").strip()
    if not raw:
        return int(settings.DEFAULT_USER_ID)

    return to_positive_id(raw, label=USER_HEADER)
