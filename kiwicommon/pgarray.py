"""Conversion between string lists and PostgreSQL array literals."""

from __future__ import annotations

import re

_UNQUOTED_CHAR = r'[^",\\{}\t\n\f\r ]'
_UNQUOTED_VALUE = f"({_UNQUOTED_CHAR})+"
_QUOTED_CHAR = r'[^"\\]|\\"|\\\\'
_QUOTED_VALUE = f'"({_QUOTED_CHAR})*"'
_ARRAY_VALUE = f"(?P<value>({_UNQUOTED_VALUE}|{_QUOTED_VALUE}))"
_ARRAY_EXP = re.compile(f"(({_ARRAY_VALUE})(,)?)")


class PGArray(list):
    """A list of strings usable as a PostgreSQL text array."""

    def __str__(self) -> str:
        return create_string_array(self)

    def value(self) -> str:
        """The array literal to send to the database."""
        return str(self)

    @classmethod
    def scan(cls, src: str | bytes | None) -> PGArray | None:
        """Build an array from a database value; None stays None."""
        if src is None:
            return None
        if isinstance(src, (bytes, bytearray)):
            src = bytes(src).decode("utf-8")
        if not isinstance(src, str):
            raise TypeError(f"cannot scan type {type(src).__name__} into PGArray: {src!r}")
        return parse_array(src)


def parse_array(text: str) -> PGArray:
    """Extract the string values of a PostgreSQL array literal."""
    return PGArray(match.group(0).strip('",') for match in _ARRAY_EXP.finditer(text))


def create_string_array(values: list[str]) -> str:
    """Format strings as a quoted PostgreSQL array literal."""
    if not values:
        return "{}"
    escaped = (value.replace('"', '\\"') for value in values)
    return '{"' + '","'.join(escaped) + '"}'