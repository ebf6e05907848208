"""Column renderers shared by the list pages and the spreadsheet export."""
from __future__ import annotations

from enum import Enum
from typing import Any

from .listing import Column


def text(label: str, attr: str) -> Column:
    def render(record: Any, view) -> str:
        value = getattr(record, attr, None)
        if value is None:
            return ""
        return str(value.value) if isinstance(value, Enum) else str(value)

    return Column(label, render)


def employee(label: str = "Employee", attr: str = "employee") -> Column:
    return Column(label, lambda record, view: view.resolve_employee(getattr(record, attr, None)).name)


def day(label: str, attr: str) -> Column:
    def render(record: Any, view) -> str:
        value = getattr(record, attr, None)
        return value.strftime("%b %d, %Y") if value else ""

    return Column(label, render)


def timestamp(label: str, attr: str) -> Column:
    def render(record: Any, view) -> str:
        value = getattr(record, attr, None)
        return value.strftime("%b %d, %Y %H:%M") if value else ""

    return Column(label, render)


def money(label: str, attr: str) -> Column:
    def render(record: Any, view) -> str:
        value = getattr(record, attr, None)
        return f"${value:,.2f}" if value is not None else ""

    return Column(label, render)
