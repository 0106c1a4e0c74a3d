"""Error hierarchy shared by every layer.

Hierarchy::

    BaseError
    ├── DomainError
    │   └── ValidationError        rejected input (export requests)
    ├── ApplicationError           configuration and wiring
    └── InfrastructureError
        └── SerializationError     writing or delivering a file
"""

from __future__ import annotations

import json
from typing import Any

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "ValidationError",
]


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description, safe to show to the user.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context for logs.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Single-line JSON, so log lines stay parseable."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """Input rejected before processing; ``errors`` lists field-level problems."""

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class ApplicationError(BaseError):
    default_code = "application_error"


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A payload could not be written; ``payload_type`` names the format."""

    default_code = "serialization_error"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
