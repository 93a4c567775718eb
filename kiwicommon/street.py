"""Parsing of street names, types and directions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .address_matchers import EXP_STATE_HIGHWAY

_log = logging.getLogger(__name__)

_STATE_HIGHWAY_RE = re.compile("^" + EXP_STATE_HIGHWAY)

DEFAULT_NAME_ABBREVIATIONS = {"PT": "POINT", "MT": "MOUNT", "ST": "SAINT"}

_SAINT_EXCEPTIONS = ("ALBANS", "ANDREWS", "HELIERS", "ARNAUD")


class _Kind(Enum):
    NAME = 1
    TYPE = 2
    DIRECTION = 3


@dataclass
class ParsedStreet:
    """A street parsed from text, with the span of text it consumed."""

    name: str = ""
    unabbreviated_name: str = ""
    type: str = ""
    direction: str = ""
    start: int = 0
    length: int = 0


class _Parts:
    def __init__(self) -> None:
        self.items: list[tuple[_Kind, str]] = []

    def get(self, kind: _Kind) -> str:
        return " ".join(text for k, text in self.items if k is kind)

    def has(self, kind: _Kind) -> bool:
        return any(k is kind for k, _ in self.items)

    def relabel(self, old: _Kind, new: _Kind) -> None:
        self.items = [(new if k is old else k, text) for k, text in self.items]

    def add(self, text: str, kind: _Kind) -> None:
        self.items.append((kind, text))

    def remove_trailing_name_parts(self) -> int:
        """Drop parts after the last type/direction; return characters dropped."""
        if not self.has(_Kind.TYPE):
            return 0
        after = _Kind.DIRECTION if self.has(_Kind.DIRECTION) else _Kind.TYPE
        # Removal happens while walking a fixed-size view of the parts, so
        # later positions see the shifted entries.
        arr = list(self.items)
        size = len(arr)
        removed = 0
        remove = False
        for k in range(len(arr)):
            kind, text = arr[k]
            if kind is after:
                remove = True
            elif remove:
                removed += len(text) + 1
                if size > k:
                    arr[k : size - 1] = arr[k + 1 : size]
                    size -= 1
                else:
                    size = k
        self.items = arr[:size]
        return removed


def abbreviate_street_name_suburb_city(text: str, abbreviations: dict[str, str]) -> str:
    """Expand name abbreviations (ST to SAINT, MT to MOUNT) in upper case.

    Well-known "St ..." names keep the short ST form.
    """
    raw = text.split(" ")
    if len(raw) < 2:
        return text.upper()
    parts: list[str] = []
    starts_with_saint = False
    for index, word in enumerate(raw):
        word = word.upper()
        if word in abbreviations:
            long_form = abbreviations[word]
            if long_form == "SAINT" and index == 0:
                starts_with_saint = True
            parts.append(long_form)
            continue
        if word == "SAINT" and index == 0:
            starts_with_saint = True
        elif starts_with_saint and index == 1:
            if any(exception.startswith(word) for exception in _SAINT_EXCEPTIONS):
                parts[0] = "ST"
        parts.append(word)
    return " ".join(parts)


def parse_street(
    street: str,
    street_types: dict[str, str],
    street_directions: dict[str, str],
    name_abbreviations: dict[str, str] | None = None,
) -> ParsedStreet | None:
    """Parse the street at the start of `street`, or None for empty text.

    `street_types` and `street_directions` map abbreviations to full forms.
    """
    if not street:
        return None
    if name_abbreviations is None:
        name_abbreviations = DEFAULT_NAME_ABBREVIATIONS

    parts = _Parts()
    # Length of the original text consumed; -1 because n words need n-1 gaps.
    idx_end = -1
    full = street
    street = street.lstrip(" ,")
    comma = street.find(",")
    idx_end += len(full) - len(street)
    if comma != -1:
        idx_end += 1
        street = street[:comma]

    state_highway = _STATE_HIGHWAY_RE.match(street.upper())
    if state_highway is not None:
        parts.add(f"STATE HIGHWAY {state_highway.group(2)}", _Kind.NAME)
        consumed = len(state_highway.group(0))
        idx_end += consumed
        street = street[consumed:]

    num_parts = len(parts.items)
    for word in street.split(" "):
        if not word:
            continue
        upper = word.upper().strip(" ")
        width = len(word) + 1

        if parts.has(_Kind.NAME):
            if upper in street_types:
                if parts.has(_Kind.TYPE):
                    parts.relabel(_Kind.TYPE, _Kind.NAME)
                    parts.relabel(_Kind.DIRECTION, _Kind.NAME)
                idx_end += width
                parts.add(upper, _Kind.TYPE)
                continue
            if (parts.has(_Kind.TYPE) or state_highway is not None) and upper in street_directions:
                if parts.has(_Kind.DIRECTION):
                    parts.relabel(_Kind.DIRECTION, _Kind.NAME)
                idx_end += width
                parts.add(upper, _Kind.DIRECTION)
                continue

        idx_end += width
        parts.add(upper, _Kind.NAME)

    idx_end -= parts.remove_trailing_name_parts()
    if num_parts == len(parts.items):
        idx_end += 1

    name = parts.get(_Kind.NAME)
    parsed = ParsedStreet(
        name=name,
        unabbreviated_name=name,
        type=parts.get(_Kind.TYPE),
        direction=parts.get(_Kind.DIRECTION),
        start=0,
        length=idx_end,
    )
    parsed.name = abbreviate_street_name_suburb_city(parsed.name, name_abbreviations)

    if parsed.type:
        parsed.type = street_types.get(parsed.type, "")
        if parsed.name == "THE":
            parsed.name += " " + parsed.type
            parsed.unabbreviated_name += " " + parsed.type
            parsed.type = ""
    if parsed.direction:
        parsed.direction = street_directions.get(parsed.direction, "")

    _log.debug(
        "Street name: %s, Type: %s, Direction: %s, Start: %d, Len: %d",
        parsed.name,
        parsed.type,
        parsed.direction,
        parsed.start,
        parsed.length,
    )
    return parsed