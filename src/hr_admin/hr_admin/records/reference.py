from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.coercion import to_int


@dataclass(frozen=True)
class Reference:
    """A pointer to another record.

    The backend sends foreign keys either as a bare id (``7`` or ``"7"``) or as
    an expanded object (``{"Id": 7, "Name": "Jane Doe"}``); both become this.
    """

    id: Optional[int] = None
    name: Optional[str] = None

    @classmethod
    def from_value(cls, value: Any) -> Optional["Reference"]:
        if value is None or value == "":
            return None
        if isinstance(value, Reference):
            return value
        if isinstance(value, dict):
            ref_id = to_int(value.get("Id"))
            name = value.get("Name")
            name = str(name) if name not in (None, "") else None
            if ref_id is None and name is None:
                return None
            return cls(id=ref_id, name=name)
        ref_id = to_int(value)
        if ref_id is None:
            return None
        return cls(id=ref_id)


def reference_id(value: Any) -> Optional[int]:
    ref = Reference.from_value(value)
    return ref.id if ref else None
