"""Regular-expression matchers that pick address identifiers out of text."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

UNIT_TYPE_FLAT = "FLAT"
UNIT_TYPE_LOT = "LOT"
UNIT_TYPE_UNIT = "UNIT"
UNIT_TYPE_VILLA = "VILLA"

_log = logging.getLogger(__name__)

# Whitespace as understood by the patterns: tab, newline, form feed, carriage
# return and space.
_SPACE_CHARS = r"\t\n\f\r "
_SPACE = "[" + _SPACE_CHARS + "]"
_END = r"\Z"

EXP_REST_OF_ADDRESS = "([^0-9/]+[0-9]*|" + _END + ")"
EXP_UNIT_IDENTIFIER = "(([^/]+)/)"
EXP_UNIT_IDENTIFIER_WITH_TYPE = (
    "(((U(?:NIT)?|F(?:LAT)?|L(?:OTS?)?|VILLAS?)"
    + _SPACE
    + "*([^/,.]+))[,/"
    + _SPACE_CHARS
    + "]*)"
)
EXP_STATE_HIGHWAY = (
    "((?:STATE"
    + _SPACE
    + "*[A-Z]+"
    + _SPACE
    + "*|S"
    + _SPACE
    + "?H"
    + _SPACE
    + "*)([0-9]+[A-Z]?)"
    + _SPACE
    + "*)"
)
EXP_STREET_ALPHA = "(([A-Z]{1,2})(" + _SPACE + "|" + _END + "))"
EXP_STREET_NUMBER = "(([0-9]+))[A-Z]{0,2}" + _SPACE + "*"
EXP_STREET_NUMBER_RANGE = "(([0-9]+)-([0-9]+)" + _SPACE + "*)"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int64(text: str) -> int:
    """Parse a 64-bit integer; unparsable text is 0, overflow saturates."""
    if not _INT_RE.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


class MergeError(ValueError):
    """Raised when two identifiers overlap or disagree and cannot be merged."""


@dataclass
class ParsedAddressIdentifier:
    """Identifier fields parsed from an address, with the span they came from."""

    street_number: int = 0
    street_number_high: int = 0
    street_alpha: str = ""
    unit_type: str = ""
    unit_identifier: str = ""
    start: int = 0
    length: int = 0

    def merge(self, source: ParsedAddressIdentifier) -> None:
        """Fill empty fields from `source`.

        Raises MergeError, leaving this identifier unchanged, when the spans
        overlap or the two disagree about a non-empty field.
        """
        if source.length == 0:
            raise MergeError("source len is 0")

        if self.start < source.start:
            if self.start + self.length > source.start:
                raise MergeError("source overlaps target")
        elif source.start < self.start:
            if source.start + source.length > self.start:
                raise MergeError("target overlaps source")
        else:
            raise MergeError("source starts at same place as target")

        checks = (
            ("unit_type", "target has different non-empty unit type"),
            ("unit_identifier", "target has different non-empty unit identifier"),
            ("street_number", "target has different non-empty street number"),
            ("street_number_high", "target has different non-empty street number (high)"),
            ("street_alpha", "target has different non-empty street alpha"),
        )
        for name, message in checks:
            mine, theirs = getattr(self, name), getattr(source, name)
            if mine and theirs and mine != theirs:
                raise MergeError(message)

        for name, _ in checks:
            if not getattr(self, name):
                setattr(self, name, getattr(source, name))


def normalise_unit_type(text: str) -> str:
    """Map unit type spellings onto FLAT, LOT, UNIT or VILLA; others are upper-cased."""
    upper = text.upper()
    if upper in ("FLAT", "FLATS", "F"):
        return UNIT_TYPE_FLAT
    if upper in ("LOT", "LOTS"):
        return UNIT_TYPE_LOT
    if upper in ("UNIT", "UNITS", "U"):
        return UNIT_TYPE_UNIT
    if upper in ("VILLA", "VILLAS"):
        return UNIT_TYPE_VILLA
    return upper


@dataclass(frozen=True)
class RegexMatcher:
    """Parses identifier fields from the numbered groups of a regular expression.

    Each field attribute names the group its value comes from (0 means
    unused). `start` names the group whose length gives the start offset and
    `length` the group whose length gives the matched span.
    """

    name: str
    expression: re.Pattern
    unit_type: int = 0
    unit_identifier: int = 0
    street_number: int = 0
    street_number_high: int = 0
    street_alpha: int = 0
    start: int = 0
    length: int = 0

    def parse(self, text: str) -> ParsedAddressIdentifier | None:
        """The parsed identifier, or None when the expression does not match."""
        _log.debug("%s : %s", text, self.expression.pattern)
        match = self.expression.search(text)
        if match is None:
            return None
        parts = [match.group(0), *match.groups(default="")]
        _log.debug("parts: %r", parts)

        parsed = ParsedAddressIdentifier(length=len(parts[self.length]))
        if self.start:
            parsed.start = len(parts[self.start])
        if self.unit_type and len(parts) > self.unit_type:
            parsed.unit_type = normalise_unit_type(parts[self.unit_type])
        if self.unit_identifier and len(parts) > self.unit_identifier:
            parsed.unit_identifier = parts[self.unit_identifier].upper()
        if self.street_number and len(parts) > self.street_number:
            parsed.street_number = _parse_int64(parts[self.street_number])
        if self.street_number and len(parts) > self.street_number_high:
            parsed.street_number_high = _parse_int64(parts[self.street_number_high])
        if self.street_alpha and len(parts) > self.street_alpha:
            parsed.street_alpha = parts[self.street_alpha].upper()
        return parsed


@dataclass(frozen=True)
class RegexInvalidMatcher:
    """Rules out any identifier in text matched by its expression."""

    name: str
    expression: re.Pattern

    def invalid(self, text: str) -> bool:
        """True when the expression matches the text."""
        _log.debug("%s : %s", text, self.expression.pattern)
        return self.expression.search(text) is not None


def _matcher(name: str, expression: str, **groups: int) -> RegexMatcher:
    return RegexMatcher(name, re.compile(expression), **groups)


_INVALID_MATCHERS = (
    RegexInvalidMatcher(
        "state highway without street number",
        re.compile("^" + _SPACE + "*" + EXP_STATE_HIGHWAY + EXP_REST_OF_ADDRESS),
    ),
)

_MATCHERS = (
    _matcher(
        "unit identifier containing street alpha",
        "^(([A-Z]{1,2})" + _SPACE + "([A-Z0-9]+)/)",
        unit_identifier=3,
        street_alpha=2,
        length=1,
    ),
    _matcher(
        "unit identifier with type",
        "^" + EXP_UNIT_IDENTIFIER_WITH_TYPE,
        unit_type=3,
        unit_identifier=4,
        length=1,
    ),
    _matcher(
        "unit identifier seperated by forward slash",
        "^" + EXP_UNIT_IDENTIFIER,
        unit_identifier=2,
        length=1,
    ),
    _matcher(
        "unit identifier with type street number range",
        "^(" + EXP_UNIT_IDENTIFIER_WITH_TYPE + ".*?)" + EXP_STREET_NUMBER_RANGE,
        start=1,
        street_number=7,
        street_number_high=8,
        length=6,
    ),
    _matcher(
        "unit identifier with type street alpha",
        "^(" + EXP_UNIT_IDENTIFIER_WITH_TYPE + ".*?)[0-9]+" + EXP_STREET_ALPHA,
        start=1,
        street_alpha=7,
        length=6,
    ),
    _matcher(
        "unit identifier with type street number",
        "^(" + EXP_UNIT_IDENTIFIER_WITH_TYPE + ".*?)" + EXP_STREET_NUMBER,
        start=1,
        street_number=7,
        length=6,
    ),
    _matcher(
        "state highway street alpha",
        "^(.*?[0-9]+)" + EXP_STREET_ALPHA + EXP_STATE_HIGHWAY + EXP_REST_OF_ADDRESS,
        street_alpha=3,
        start=1,
        length=2,
    ),
    _matcher(
        "state highway street number range",
        "^(.*?)" + EXP_STREET_NUMBER_RANGE + EXP_STATE_HIGHWAY + EXP_REST_OF_ADDRESS,
        street_number=3,
        street_number_high=4,
        start=1,
        length=2,
    ),
    _matcher(
        "state highway street number",
        "^(.*?)(([0-9]+)" + _SPACE + "*)" + EXP_STATE_HIGHWAY + EXP_REST_OF_ADDRESS,
        street_number=3,
        start=1,
        length=2,
    ),
    _matcher(
        "street alpha",
        "^(.*?[0-9]+)" + EXP_STREET_ALPHA + EXP_REST_OF_ADDRESS,
        street_alpha=3,
        start=1,
        length=2,
    ),
    _matcher(
        "street number range",
        "^(.*?)" + EXP_STREET_NUMBER_RANGE + EXP_REST_OF_ADDRESS,
        street_number=3,
        street_number_high=4,
        start=1,
        length=2,
    ),
    _matcher(
        "unit identifier street number",
        "^(" + EXP_UNIT_IDENTIFIER + ".*?)" + EXP_STREET_NUMBER + EXP_REST_OF_ADDRESS,
        street_number=5,
        start=1,
        length=4,
    ),
    _matcher(
        "unit identifier seperated by forward slash",
        "^(([A-Z0-9]+)[^A-Z0-9]([0-9]+)([A-Z]{0,2}))",
        unit_identifier=2,
        street_number=3,
        street_alpha=4,
        length=1,
    ),
    _matcher(
        "street number",
        "^(.*?)" + EXP_STREET_NUMBER + EXP_REST_OF_ADDRESS,
        street_number=3,
        start=1,
        length=2,
    ),
)


def matchers() -> list[RegexMatcher]:
    """The identifier matchers, in the order they are tried."""
    return list(_MATCHERS)


def invalid_matchers() -> list[RegexInvalidMatcher]:
    """Matchers that rule out any address identifier."""
    return list(_INVALID_MATCHERS)