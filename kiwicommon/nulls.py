"""Nullable values that treat the zero value as null."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _zero_of(value: Any) -> Any:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return 0
    if isinstance(value, float):
        return 0.0
    if isinstance(value, str):
        return ""
    return None


@dataclass(frozen=True)
class Null:
    """A value together with a flag telling whether it is set."""

    value: Any = None
    valid: bool = False

    def value_or_zero(self) -> Any:
        """The value when valid, otherwise the zero value of its type."""
        return self.value if self.valid else _zero_of(self.value)


def string_from(value: str) -> Null:
    """A nullable string; the empty string is null."""
    return Null(value, value != "")


def int_from(value: int) -> Null:
    """A nullable integer; zero is null."""
    return Null(value, value != 0)


def float_from(value: float) -> Null:
    """A nullable float; zero is null."""
    return Null(value, value != 0)