from __future__ import annotations

import io
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

import pandas as pd

from ..common.coercion import to_int
from ..core.constants import LOOKUP_WORKERS, UNKNOWN_EMPLOYEE
from ..core.enums import ViewMode
from ..employees.model import Employee
from ..employees.service import EmployeeService, find_employee
from ..records.reference import Reference
from ..records.service import EntityService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    label: str
    render: Callable[[Any, "ListView"], Any]


@dataclass(frozen=True)
class FilterSpec:
    """One categorical filter shown above a list.

    Options come from ``options``, from the employee lookup
    (``employee_options``) or from the values present in the snapshot
    (``distinct``). ``input`` is ``select`` or ``date``.
    """

    name: str
    attr: str
    label: str
    options: tuple[str, ...] = ()
    employee_options: bool = False
    distinct: bool = False
    input: str = "select"


@dataclass(frozen=True)
class ListPage:
    key: str
    title: str
    service_name: str
    columns: tuple[Column, ...]
    search_attrs: tuple[str, ...] = ()
    filters: tuple[FilterSpec, ...] = ()
    sort_attr: Optional[str] = None
    sort_desc: bool = True
    needs_employees: bool = True
    view_modes: bool = False
    stats_attr: Optional[str] = None
    stats_values: tuple[str, ...] = ()
    breakdowns: tuple[tuple[str, tuple[str, ...]], ...] = ()
    form: Any = None
    view_class: Optional[type] = None

    def filter_spec(self, name: str) -> Optional[FilterSpec]:
        for spec in self.filters:
            if spec.name == name:
                return spec
        return None


@dataclass
class ListFilters:
    query: str = ""
    equals: dict[str, str] = field(default_factory=dict)
    view_mode: ViewMode = ViewMode.GRID

    @classmethod
    def from_args(cls, page: ListPage, args: Mapping[str, Any]) -> "ListFilters":
        equals = {}
        for spec in page.filters:
            value = str(args.get(spec.name) or "").strip()
            if value:
                equals[spec.name] = value
        try:
            view_mode = ViewMode(args.get("view") or ViewMode.GRID.value)
        except ValueError:
            view_mode = ViewMode.GRID
        return cls(query=str(args.get("q") or "").strip(), equals=equals, view_mode=view_mode)

    @property
    def is_default(self) -> bool:
        return not self.query and not self.equals


@dataclass(frozen=True)
class EmployeeDisplay:
    name: str
    photo_url: str = ""
    employee: Optional[Employee] = None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class ListView:
    """Snapshot of one entity's records for a single page load."""

    def __init__(
        self,
        page: ListPage,
        service: EntityService,
        employees: Optional[EmployeeService] = None,
    ):
        self.page = page
        self._service = service
        self._employee_service = employees
        self.records: list = []
        self.employees: list[Employee] = []
        self.loading = False
        self.error = ""

    def load(self) -> bool:
        """Fetch the records and the employee lookup concurrently; both must finish."""
        self.loading = True
        self.error = ""
        try:
            lookup_service = self._employee_service if self.page.needs_employees else None
            with ThreadPoolExecutor(max_workers=LOOKUP_WORKERS) as pool:
                records_future = pool.submit(self._service.get_all)
                employees_future = pool.submit(lookup_service.get_all) if lookup_service else None
                records = records_future.result()
                employees = employees_future.result() if employees_future else []
        except Exception as e:
            logger.exception("Failed to load %s", self.page.key)
            self.records, self.employees = [], []
            self.error = str(e) or f"Failed to load {self.page.title.lower()}"
            return False
        finally:
            self.loading = False

        self.records = list(records)
        self.employees = list(employees) if self.page.needs_employees else [
            r for r in self.records if isinstance(r, Employee)
        ]
        return True

    def reload(self) -> bool:
        return self.load()

    def find(self, record_id: Any) -> Optional[Any]:
        wanted = to_int(record_id)
        for record in self.records:
            if record.id == wanted:
                return record
        return None

    def resolve_employee(self, ref: Any) -> EmployeeDisplay:
        """Employee by id from the lookup, else the embedded name, else Unknown."""
        ref = Reference.from_value(ref)
        if ref is None:
            return EmployeeDisplay(UNKNOWN_EMPLOYEE)
        employee = find_employee(self.employees, ref)
        if employee:
            return EmployeeDisplay(employee.full_name, employee.photo_url, employee)
        return EmployeeDisplay(ref.name or UNKNOWN_EMPLOYEE)

    def employee_options(self) -> list[tuple[str, str]]:
        return [(str(e.id), e.full_name) for e in self.employees if e.id is not None]

    def options_for(self, spec: FilterSpec) -> list[tuple[str, str]]:
        if spec.employee_options:
            return self.employee_options()
        if spec.distinct:
            seen = sorted({_as_text(getattr(r, spec.attr, None)) for r in self.records} - {""})
            return [(v, v) for v in seen]
        return [(v, v) for v in spec.options]

    def _text_of(self, record: Any, attr: str) -> str:
        value = getattr(record, attr, None)
        if isinstance(value, Reference):
            return self.resolve_employee(value).name
        return _as_text(value)

    def _matches_query(self, record: Any, query: str) -> bool:
        needle = query.lower()
        return any(needle in self._text_of(record, attr).lower() for attr in self.page.search_attrs)

    def _matches_filter(self, record: Any, spec, wanted: str) -> bool:
        value = getattr(record, spec.attr, None)
        if isinstance(value, Reference) or spec.employee_options:
            ref = Reference.from_value(value)
            return ref is not None and ref.id is not None and ref.id == to_int(wanted)
        return _as_text(value) == wanted

    def _sorted(self, rows: list) -> list:
        attr = self.page.sort_attr
        if not attr:
            return rows
        present = [r for r in rows if getattr(r, attr, None) is not None]
        missing = [r for r in rows if getattr(r, attr, None) is None]
        present.sort(key=lambda r: r.id or 0)
        present.sort(key=lambda r: getattr(r, attr), reverse=self.page.sort_desc)
        return present + missing

    def apply(self, filters: Optional[ListFilters] = None) -> list:
        """Filtered and sorted copy of the snapshot; the snapshot itself is untouched."""
        filters = filters or ListFilters()
        rows = list(self.records)

        if filters.query:
            rows = [r for r in rows if self._matches_query(r, filters.query)]

        for name, wanted in filters.equals.items():
            spec = self.page.filter_spec(name)
            if spec is None:
                continue
            rows = [r for r in rows if self._matches_filter(r, spec, wanted)]

        return self._sorted(rows)

    def counts(self, attr: Optional[str] = None, values: Sequence[str] = ()) -> dict[str, int]:
        attr = attr or self.page.stats_attr
        values = values or self.page.stats_values
        out = {v: 0 for v in values}
        if not attr:
            return out
        for record in self.records:
            key = _as_text(getattr(record, attr, None))
            if key in out or not values:
                out[key] = out.get(key, 0) + 1
        out["total"] = len(self.records)
        return out

    def breakdowns(self) -> dict[str, dict[str, int]]:
        """Counts for each secondary attribute shown under the headline stats."""
        return {attr: self.counts(attr, values) for attr, values in self.page.breakdowns}

    def delete(self, record_id: Any, *, confirmed: bool) -> bool:
        """Delete one record; nothing happens unless the user confirmed."""
        if not confirmed:
            return False
        ok = self._service.delete(record_id)
        if ok:
            self.reload()
        return ok

    def rows(self, records: Sequence) -> list[list[Any]]:
        return [[column.render(r, self) for column in self.page.columns] for r in records]

    def export(self, records: Sequence) -> io.BytesIO:
        """Spreadsheet of the given rows, using the page's columns."""
        df = pd.DataFrame(self.rows(records), columns=[c.label for c in self.page.columns])
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=self.page.title[:31])
        out.seek(0)
        return out
