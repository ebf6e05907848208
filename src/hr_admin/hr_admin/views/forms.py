from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.coercion import to_float
from ..common.datetime_utils import now_utc, parse_date, parse_timestamp, to_input_date, to_input_datetime
from ..common.validators import is_blank
from ..core.enums import FormMode
from ..core.exceptions import DomainError, GatewayError, ValidationError
from ..employees.model import Employee
from ..records.reference import Reference
from ..records.service import EntityService

logger = logging.getLogger(__name__)

# Input kinds understood by the form template.
TEXT = "text"
EMAIL = "email"
TEXTAREA = "textarea"
NUMBER = "number"
DATE = "date"
DATETIME = "datetime-local"
TIME = "time"
SELECT = "select"
EMPLOYEE = "employee"


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    required: bool = False
    kind: str = TEXT
    choices: tuple[str, ...] = ()
    default: Any = ""
    numeric: bool = False


@dataclass(frozen=True)
class FormSpec:
    """Declarative description of one entity's create/edit dialog.

    ``rules`` are cross-field checks returning ``{field: message}``;
    ``build_payload`` turns the validated string values into service data.
    """

    entity_label: str
    fields: tuple[FormField, ...]
    rules: tuple[Callable[[Mapping[str, str]], dict], ...] = ()
    build_payload: Optional[Callable[[Mapping[str, str], "FormModal"], dict]] = None
    supports_view: bool = False


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


def _seed(form_field: FormField, value: Any) -> str:
    if form_field.kind == DATE:
        return to_input_date(value)
    if form_field.kind == DATETIME:
        return to_input_datetime(value)
    if form_field.kind == EMPLOYEE:
        ref = Reference.from_value(value)
        return str(ref.id) if ref and ref.id is not None else ""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class FormModal:
    spec: FormSpec
    service: EntityService
    on_success: Optional[Callable[[Any], None]] = None
    employees: Sequence[Employee] = ()
    clock: Callable[[], Any] = now_utc

    mode: Optional[FormMode] = None
    record_id: Optional[int] = None
    values: dict = field(default_factory=dict)
    errors: dict = field(default_factory=dict)
    notifications: list = field(default_factory=list)
    loading: bool = False

    @property
    def is_open(self) -> bool:
        return self.mode is not None

    @property
    def read_only(self) -> bool:
        return self.mode == FormMode.VIEW

    @property
    def title(self) -> str:
        label = self.spec.entity_label.title()
        if self.mode == FormMode.EDIT:
            return f"Edit {label}"
        if self.mode == FormMode.VIEW:
            return f"{label} Details"
        return f"Add {label}"

    def _reset(self, mode: FormMode, values: dict, record_id: Optional[int] = None) -> None:
        self.mode = mode
        self.record_id = record_id
        self.values = values
        self.errors = {}
        self.notifications = []
        self.loading = False

    def open_create(self) -> None:
        self._reset(FormMode.CREATE, {f.name: _seed(f, f.default) for f in self.spec.fields})

    def _seeded(self, model: Any) -> dict:
        return {f.name: _seed(f, getattr(model, f.name, None)) for f in self.spec.fields}

    def open_edit(self, model: Any) -> None:
        self._reset(FormMode.EDIT, self._seeded(model), model.id)

    def open_view(self, model: Any) -> None:
        if not self.spec.supports_view:
            raise ValidationError(f"{self.spec.entity_label.title()} records have no detail view")
        self._reset(FormMode.VIEW, self._seeded(model), model.id)

    def close(self) -> None:
        self.mode = None
        self.record_id = None
        self.values = {}
        self.errors = {}
        self.loading = False

    def set_value(self, name: str, value: Any) -> None:
        self.values[name] = "" if value is None else str(value)
        self.errors.pop(name, None)

    def fill(self, data: Mapping[str, Any]) -> None:
        for f in self.spec.fields:
            if f.name in data:
                self.set_value(f.name, data[f.name])

    def validate(self) -> bool:
        errors: dict[str, str] = {}
        for f in self.spec.fields:
            raw = self.values.get(f.name, "")
            if is_blank(raw):
                if f.required:
                    errors[f.name] = f"{f.label} is required"
                continue
            if f.numeric and to_float(raw) is None:
                errors[f.name] = f"{f.label} must be a valid number"
            elif f.kind == DATE and parse_date(raw) is None:
                errors[f.name] = f"{f.label} must be a valid date"
            elif f.kind == DATETIME and parse_timestamp(raw) is None:
                errors[f.name] = f"{f.label} must be a valid date"
        for rule in self.spec.rules:
            for name, message in rule(self.values).items():
                errors[name] = message
        self.errors = errors
        return not errors

    def payload(self) -> dict:
        values = {k: (v.strip() if isinstance(v, str) else v) for k, v in self.values.items()}
        if self.spec.build_payload:
            return self.spec.build_payload(values, self)
        return values

    def _fail(self, messages: Sequence[str]) -> None:
        for message in messages:
            self.notifications.append(Notification("error", message))

    def submit(self) -> Any:
        """Validate, then make exactly one create or update call."""
        if self.mode is None or self.mode == FormMode.VIEW:
            return None
        if not self.validate():
            return None

        label = self.spec.entity_label
        self.loading = True
        try:
            if self.mode == FormMode.EDIT:
                result = self.service.update(self.record_id, self.payload())
            else:
                result = self.service.create(self.payload())
        except GatewayError as e:
            self._fail(e.notifications())
            return None
        except DomainError as e:
            self._fail([str(e)])
            return None
        finally:
            self.loading = False

        if result is None:
            verb = "update" if self.mode == FormMode.EDIT else "create"
            self._fail([f"Failed to {verb} {label}"])
            return None

        verb = "updated" if self.mode == FormMode.EDIT else "created"
        self.notifications.append(Notification("success", f"{label.capitalize()} {verb} successfully"))
        logger.info("%s %s %s", label, verb, getattr(result, "id", None))
        if self.on_success:
            self.on_success(result)
        self.close()
        return result
