"""Parsing of address identifiers: unit, street number and street alpha."""

from __future__ import annotations

import logging

from .address_matchers import (
    MergeError,
    ParsedAddressIdentifier,
    invalid_matchers,
    matchers,
)

_log = logging.getLogger(__name__)


def span(identifiers: list[ParsedAddressIdentifier]) -> tuple[int, int]:
    """The lowest start and the highest end offset across the identifiers."""
    if not identifiers:
        raise ValueError("no identifiers")
    start = min(ident.start for ident in identifiers)
    end = max(0, max(ident.start + ident.length for ident in identifiers))
    return start, end


def merge_identifiers(
    identifiers: list[ParsedAddressIdentifier],
) -> tuple[ParsedAddressIdentifier, list[ParsedAddressIdentifier]]:
    """Merge every identifier into the first one.

    Returns the merged identifier and the identifiers that took part in the
    merge; conflicting ones are left out.
    """
    if not identifiers:
        raise ValueError("no identifiers")
    final = identifiers[0]
    kept = [final]
    _log.debug("identifiers: %r", identifiers)
    for ident in identifiers[1:]:
        try:
            final.merge(ident)
        except MergeError as err:
            _log.debug("could not merge identifiers: %s", err)
            continue
        kept.append(ident)
    return final, kept


def parse_address_identifier(
    address: str, require_street_number: bool = True
) -> ParsedAddressIdentifier | None:
    """Parse the identifier fields of an address, or return None.

    `address` may be a whole address or only its identifiers. With
    `require_street_number`, a result without a street number is None.
    """
    if not address:
        return None
    upper = address.upper()

    if any(matcher.invalid(upper) for matcher in invalid_matchers()):
        return None

    found = []
    for matcher in matchers():
        _log.debug("matching %r...", matcher.name)
        ident = matcher.parse(upper)
        if ident is not None:
            _log.debug("matched %r: %r", matcher.name, ident)
            found.append(ident)
    if not found:
        return None

    final, kept = merge_identifiers(found)
    if final.street_number == 0 and require_street_number:
        return None
    final.start, final.length = span(kept)

    if not final.unit_identifier:
        # Fall back on whatever precedes the first parsed identifier.
        leading = upper[: span(kept)[0]].strip(" ")
        if leading:
            final.length += final.start
            final.start = 0
            final.unit_identifier = leading.strip(", ")

    _log.debug("final: %r", final)
    return final