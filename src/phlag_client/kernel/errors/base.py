"""Root error class for the phlag-client error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class PhlagError(Exception):
    """Root of the error hierarchy.

    Catching ``PhlagError`` handles every failure the client can raise.
    Errors raised while talking to the server also record which endpoint
    was requested and, when a response arrived, its HTTP status.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to the class ``default_code``).
        endpoint: Server path that was requested, e.g. ``flag/production/x``.
        status_code: HTTP status of the failed response, if any.
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "phlag_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        endpoint: str | None = None,
        status_code: int | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.endpoint = endpoint
        self.status_code = status_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.endpoint is not None:
            payload["endpoint"] = self.endpoint
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["PhlagError"]
