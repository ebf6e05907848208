from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar

from ..common.coercion import to_int
from ..common.datetime_utils import now_utc
from ..common.validators import is_blank
from ..core.enums import FieldKind
from ..gateway.query import AnyOf, Condition, Filter, SortSpec
from ..gateway.repository import RecordGateway
from .schema import TableSchema

logger = logging.getLogger(__name__)

M = TypeVar("M")


def _positive_id(value: Any) -> Optional[int]:
    record_id = to_int(value)
    if record_id is None or record_id <= 0:
        return None
    return record_id


class EntityService(Generic[M]):
    """CRUD use cases for one backend table.

    Subclasses only provide a schema and the few entity-specific queries;
    payload shaping, coercion and response normalisation live here.
    """

    schema: TableSchema

    def __init__(
        self,
        gateway: RecordGateway,
        schema: Optional[TableSchema] = None,
        *,
        clock: Callable[[], Any] = now_utc,
    ):
        self._gateway = gateway
        if schema is not None:
            self.schema = schema
        self._clock = clock

    @property
    def table(self) -> str:
        return self.schema.table

    @property
    def _raise(self) -> bool:
        return self.schema.propagate_errors

    def _fetch(self, filters: Sequence[Filter] = (), sort: Optional[Sequence[SortSpec]] = None) -> list[M]:
        rows = self._gateway.fetch_all(
            self.table,
            self.schema.columns,
            filters=filters,
            sort=self.schema.default_sort if sort is None else sort,
            paging=self.schema.paging,
            raise_errors=self._raise,
        )
        return [self.schema.to_model(r) for r in rows]

    def get_all(self) -> list[M]:
        return self._fetch()

    def get_by_id(self, record_id: Any) -> Optional[M]:
        rid = _positive_id(record_id)
        if rid is None:
            logger.warning("Ignoring %s lookup with invalid id %r", self.table, record_id)
            return None
        row = self._gateway.fetch_one(self.table, rid, self.schema.columns, raise_errors=self._raise)
        return self.schema.to_model(row) if row else None

    def _apply_create_defaults(self, data: dict) -> dict:
        for attr, default in self.schema.create_defaults.items():
            if is_blank(data.get(attr)):
                data[attr] = default
        return data

    def create(self, data: Mapping[str, Any]) -> Optional[M]:
        prepared = self._apply_create_defaults(dict(data))
        payload = self.schema.to_payload(prepared)
        row = self._gateway.create(self.table, payload, raise_errors=self._raise)
        if row is None:
            return None
        logger.info("Created %s record %s", self.table, row.get("Id"))
        return self.schema.to_model(row)

    def update(self, record_id: Any, data: Mapping[str, Any]) -> Optional[M]:
        rid = _positive_id(record_id)
        if rid is None:
            logger.warning("Ignoring %s update with invalid id %r", self.table, record_id)
            return None
        payload = self.schema.to_payload(data, partial=True)
        row = self._gateway.update(self.table, rid, payload, raise_errors=self._raise)
        if row is None:
            return None
        return self.schema.to_model(row)

    def delete(self, record_id: Any) -> bool:
        rid = _positive_id(record_id)
        if rid is None:
            logger.warning("Ignoring %s delete with invalid id %r", self.table, record_id)
            return False
        return self._gateway.delete(self.table, [rid], raise_errors=self._raise)

    def search(self, query: str) -> list[M]:
        """OR of substring matches over the schema's search fields."""
        text = (query or "").strip()
        if not text or not self.schema.search_fields:
            return self.get_all()
        group = AnyOf(tuple(Condition.contains(self.schema.spec_for(a).column, text) for a in self.schema.search_fields))
        return self._fetch(filters=[group])

    def filter_by(self, attr: str, value: Any, *, sort: Optional[Sequence[SortSpec]] = None) -> list[M]:
        """Equality filter on one field; an empty value returns every record."""
        if is_blank(value):
            return self._fetch(sort=sort)
        spec = self.schema.spec_for(attr)
        if spec.kind in (FieldKind.REFERENCE, FieldKind.DATE, FieldKind.DATETIME):
            value = spec.coerce(value)
        elif isinstance(value, Enum):
            value = value.value
        return self._fetch(filters=[Condition.equal_to(spec.column, value)], sort=sort)

    def filter_by_status(self, status: Any) -> list[M]:
        return self.filter_by("status", status)

    def filter_by_employee(self, employee_id: Any) -> list[M]:
        return self.filter_by("employee", employee_id)
