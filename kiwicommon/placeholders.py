"""Batched positional placeholders for multi-row PostgreSQL inserts."""

from __future__ import annotations

import dataclasses
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from itertools import chain
from typing import Any

SQL_MAX_PLACEHOLDERS = 65535


@dataclass
class Placeholder:
    """One batch: the `($1,$2),...` text and the flattened arguments."""

    placeholders: str
    args: list[Any] = field(default_factory=list)


def _fields(obj: Any) -> list[tuple[str, Any]]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    if isinstance(obj, tuple) and hasattr(obj, "_fields"):
        return list(zip(obj._fields, obj))
    if hasattr(obj, "__dict__"):
        return list(vars(obj).items())
    raise TypeError(f"cannot extract fields from {type(obj).__name__}")


def extract_args(args: Iterable[Any] | None, to_exclude: Collection[str] | None) -> list[list[Any]]:
    """Public field values of each record, skipping excluded lower-case names."""
    excluded = to_exclude or ()
    return [
        [
            value
            for name, value in _fields(arg)
            if not name.startswith("_") and name.lower() not in excluded
        ]
        for arg in args or ()
    ]


def generate_placeholders(args: list[list[Any]]) -> str:
    """Numbered placeholder groups, one per row."""
    groups = []
    total = 1
    for row in args:
        groups.append("(" + ",".join(f"${total + i}" for i in range(len(row))) + ")")
        total += len(row)
    return ",".join(groups)


def placeholders(raw_args: list[Any], *args: str) -> list[Placeholder]:
    """Split records into batches within the parameter limit.

    `args` names fields to leave out, matched case-insensitively.
    """
    if not raw_args:
        return []
    excluded = {name.lower() for name in args}
    field_count = len(_fields(raw_args[0]))
    if field_count == 0:
        raise ValueError("records have no fields")
    batch_size = SQL_MAX_PLACEHOLDERS // field_count
    result = []
    for start in range(0, len(raw_args), batch_size):
        rows = extract_args(raw_args[start : start + batch_size], excluded)
        result.append(Placeholder(generate_placeholders(rows), list(chain.from_iterable(rows))))
    return result