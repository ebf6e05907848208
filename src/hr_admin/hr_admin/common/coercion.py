from __future__ import annotations

import math
from typing import Any, Optional


def to_float(value: Any) -> Optional[float]:
    """Parse amounts; non-numeric or non-finite input yields None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        try:
            parsed = float(str(value).strip())
        except ValueError:
            return None
    return parsed if math.isfinite(parsed) else None


def to_int(value: Any) -> Optional[int]:
    """Parse ids and counts; '12' and 12.0 are accepted, '12.5' and 'abc' are not."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def to_float_or_zero(value: Any) -> float:
    parsed = to_float(value)
    return parsed if parsed is not None else 0.0


def to_int_or_zero(value: Any) -> int:
    parsed = to_int(value)
    return parsed if parsed is not None else 0
