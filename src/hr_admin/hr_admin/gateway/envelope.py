from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class FieldError:
    field_label: str
    message: str

    def notification(self) -> str:
        if self.field_label:
            return f"{self.field_label}: {self.message}"
        return self.message


@dataclass(frozen=True)
class RecordResult:
    """Outcome of one record inside a multi-record write."""

    success: bool
    data: Optional[dict] = None
    message: Optional[str] = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, raw: dict) -> "RecordResult":
        errors = []
        for err in raw.get("errors") or []:
            if isinstance(err, dict):
                errors.append(FieldError(str(err.get("fieldLabel") or ""), str(err.get("message") or "")))
            else:
                errors.append(FieldError("", str(err)))
        data = raw.get("data")
        return cls(
            success=bool(raw.get("success")),
            data=data if isinstance(data, dict) else None,
            message=raw.get("message"),
            errors=tuple(errors),
        )

    def notifications(self) -> list[str]:
        out = [e.notification() for e in self.errors]
        if self.message:
            out.append(self.message)
        return out


@dataclass(frozen=True)
class Envelope:
    success: bool
    message: Optional[str] = None
    data: Any = None
    results: Optional[tuple[RecordResult, ...]] = None

    @classmethod
    def from_json(cls, raw: Any) -> "Envelope":
        if not isinstance(raw, dict):
            return cls(success=False, message="Malformed response from record backend")
        results = raw.get("results")
        return cls(
            success=bool(raw.get("success")),
            message=raw.get("message"),
            data=raw.get("data"),
            results=tuple(RecordResult.from_json(r) for r in results if isinstance(r, dict))
            if isinstance(results, list)
            else None,
        )

    def records(self) -> list[dict]:
        if isinstance(self.data, list):
            return [r for r in self.data if isinstance(r, dict)]
        return []

    def record(self) -> Optional[dict]:
        return self.data if isinstance(self.data, dict) else None

    def successful(self) -> list[RecordResult]:
        return [r for r in self.results or () if r.success]

    def failed(self) -> list[RecordResult]:
        return [r for r in self.results or () if not r.success]
