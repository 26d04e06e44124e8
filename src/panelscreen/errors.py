"""Error types raised by the screening engine."""

from __future__ import annotations

from typing import Any


class ScreeningError(Exception):
    """Base class for screening failures."""


class ValidationError(ScreeningError, ValueError):
    """Raised when applicant or committee input is malformed.

    ``field`` names the offending attribute and ``record`` identifies the
    record it belongs to (for example ``experiences[2]``) when applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        record: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.record = record
        self.value = value


class ConfigurationError(ScreeningError):
    """Raised when a rule set is incomplete or carries malformed thresholds."""

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        return f"{super().__str__()}: {'; '.join(self.errors)}"


__all__ = ["ScreeningError", "ValidationError", "ConfigurationError"]
