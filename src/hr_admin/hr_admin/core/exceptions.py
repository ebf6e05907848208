from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when the backend connection settings are missing or malformed."""


class GatewayError(DomainError):
    """Raised when the record backend fails or answers with success=false."""

    def __init__(self, message: str, *, table: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.table = table
        self.status_code = status_code

    def notifications(self) -> list[str]:
        return [str(self)]


class RecordWriteError(GatewayError):
    """Raised when one or more records of a write were rejected by the backend."""

    def __init__(self, message: str, *, table: Optional[str] = None, failures: Sequence = ()):
        super().__init__(message, table=table)
        self.failures = list(failures)

    def notifications(self) -> list[str]:
        out: list[str] = []
        for failure in self.failures:
            out.extend(failure.notifications())
        return out or [str(self)]
