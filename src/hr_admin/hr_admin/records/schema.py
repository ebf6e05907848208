"""Table descriptors: one per backend table, driving the generic field mapper."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from ..common.coercion import to_float, to_float_or_zero, to_int, to_int_or_zero
from ..common.datetime_utils import parse_date, parse_timestamp, to_backend_date, to_backend_timestamp
from ..core.enums import FieldKind
from ..gateway.query import Paging, SortSpec
from .reference import Reference, reference_id

_MISSING = object()
_FALLBACK_KINDS = (FieldKind.REFERENCE, FieldKind.INTEGER, FieldKind.AMOUNT)


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    column: str
    kind: FieldKind = FieldKind.TEXT
    writable: bool = True

    def parse(self, raw: Any) -> Any:
        """Backend value -> model value."""
        if self.kind == FieldKind.REFERENCE:
            return Reference.from_value(raw)
        if self.kind == FieldKind.INTEGER:
            return to_int_or_zero(raw)
        if self.kind == FieldKind.AMOUNT:
            return to_float(raw)
        if self.kind == FieldKind.DATE:
            return parse_date(raw)
        if self.kind == FieldKind.DATETIME:
            return parse_timestamp(raw)
        if raw is None:
            return ""
        return raw if isinstance(raw, str) else str(raw)

    def coerce(self, value: Any) -> Any:
        """Application value -> payload value.

        Invalid references become None (the backend rejects missing required
        keys); invalid amounts and counts become 0.
        """
        if self.kind == FieldKind.REFERENCE:
            return reference_id(value)
        if self.kind == FieldKind.INTEGER:
            return to_int_or_zero(value)
        if self.kind == FieldKind.AMOUNT:
            return to_float_or_zero(value)
        if self.kind == FieldKind.DATE:
            return to_backend_date(value)
        if self.kind == FieldKind.DATETIME:
            return to_backend_timestamp(value)
        if isinstance(value, Enum):
            return value.value
        return value


@dataclass(frozen=True)
class TableSchema:
    table: str
    model: type
    fields: tuple[FieldSpec, ...]
    entity_label: str = "record"
    default_sort: tuple[SortSpec, ...] = field(default_factory=tuple)
    paging: Optional[Paging] = None
    search_fields: tuple[str, ...] = field(default_factory=tuple)
    create_defaults: Mapping[str, Any] = field(default_factory=dict)
    propagate_errors: bool = False

    @property
    def columns(self) -> list[str]:
        return [f.column for f in self.fields]

    def spec_for(self, attr: str) -> FieldSpec:
        for spec in self.fields:
            if spec.attr == attr or spec.column == attr:
                return spec
        raise KeyError(f"{self.table} has no field {attr!r}")

    def to_model(self, record: Mapping[str, Any]):
        values: dict[str, Any] = {"id": to_int(record.get("Id"))}
        for spec in self.fields:
            values[spec.attr] = spec.parse(record.get(spec.column))
        return self.model(**values)

    def to_payload(self, data: Mapping[str, Any], *, partial: bool = False) -> dict:
        """Map application data (keyed by attribute or column name) to backend columns."""
        payload: dict[str, Any] = {}
        for spec in self.fields:
            if not spec.writable:
                continue
            value = data.get(spec.attr, _MISSING)
            if value is _MISSING:
                value = data.get(spec.column, _MISSING)
            if value is _MISSING:
                # absent text and dates are left to the backend; keys and numbers get their fallback
                if partial or spec.kind not in _FALLBACK_KINDS:
                    continue
                value = None
            payload[spec.column] = spec.coerce(value)
        return payload
