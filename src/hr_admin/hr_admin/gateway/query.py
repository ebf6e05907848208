"""Filter and sort parameters understood by the record backend."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

EQUAL_TO = "EqualTo"
CONTAINS = "Contains"


@dataclass(frozen=True)
class Condition:
    field: str
    operator: str
    values: tuple[Any, ...]

    @classmethod
    def equal_to(cls, field_name: str, value: Any) -> "Condition":
        return cls(field_name, EQUAL_TO, (value,))

    @classmethod
    def contains(cls, field_name: str, value: Any) -> "Condition":
        return cls(field_name, CONTAINS, (value,))

    def to_where(self) -> dict:
        return {"FieldName": self.field, "Operator": self.operator, "Values": list(self.values)}

    def to_group_condition(self) -> dict:
        return {"fieldName": self.field, "operator": self.operator, "values": list(self.values)}


@dataclass(frozen=True)
class AnyOf:
    """OR-group: a record matches when any of the conditions holds."""

    conditions: tuple[Condition, ...]

    def to_where_group(self) -> dict:
        return {
            "operator": "OR",
            "subGroups": [{"conditions": [c.to_group_condition()], "operator": "OR"} for c in self.conditions],
        }


Filter = Union[Condition, AnyOf]


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = False

    def to_order_by(self) -> dict:
        return {"fieldName": self.field, "sorttype": "DESC" if self.descending else "ASC"}


@dataclass(frozen=True)
class Paging:
    limit: int
    offset: int = 0

    def to_paging_info(self) -> dict:
        return {"limit": int(self.limit), "offset": int(self.offset)}


@dataclass(frozen=True)
class Query:
    fields: tuple[str, ...]
    filters: tuple[Filter, ...] = field(default_factory=tuple)
    sort: tuple[SortSpec, ...] = field(default_factory=tuple)
    paging: Optional[Paging] = None

    @classmethod
    def build(
        cls,
        fields: Sequence[str],
        *,
        filters: Sequence[Filter] = (),
        sort: Sequence[SortSpec] = (),
        paging: Optional[Paging] = None,
    ) -> "Query":
        return cls(tuple(fields), tuple(filters), tuple(sort), paging)

    def to_params(self) -> dict:
        params: dict[str, Any] = {"fields": [{"field": {"Name": name}} for name in self.fields]}

        where = [f.to_where() for f in self.filters if isinstance(f, Condition)]
        groups = [f.to_where_group() for f in self.filters if isinstance(f, AnyOf)]
        if where:
            params["where"] = where
        if groups:
            params["whereGroups"] = groups
        if self.sort:
            params["orderBy"] = [s.to_order_by() for s in self.sort]
        if self.paging:
            params["pagingInfo"] = self.paging.to_paging_info()
        return params
