"""Parsing of complete addresses into identifier, street, suburb and city."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .address_identifier import parse_address_identifier
from .address_matchers import ParsedAddressIdentifier
from .street import (
    DEFAULT_NAME_ABBREVIATIONS,
    ParsedStreet,
    abbreviate_street_name_suburb_city,
    parse_street,
)

_log = logging.getLogger(__name__)

_POSTCODE_RE = re.compile(r"^([A-Za-z ]+)([0-9]*)")


@dataclass
class ParsedAddress:
    """An address split into its parts, along with the text it came from."""

    raw: str = ""
    address_identifier: ParsedAddressIdentifier | None = None
    street: ParsedStreet | None = None
    suburb: str = ""
    city: str = ""
    postcode: str = ""


class Parser:
    """Parses addresses using configurable abbreviation tables.

    `street_type_abbreviations` and `street_direction_abbreviations` map
    abbreviations to full forms. `name_abbreviations` applies to street
    names, suburbs and cities and defaults to PT, MT and ST.
    """

    def __init__(
        self,
        *,
        require_street_number: bool = True,
        street_type_abbreviations: Mapping[str, str] | None = None,
        street_direction_abbreviations: Mapping[str, str] | None = None,
        name_abbreviations: Mapping[str, str] | None = None,
    ) -> None:
        self.require_street_number = require_street_number
        self.street_type_abbreviations = dict(street_type_abbreviations or {})
        self.street_direction_abbreviations = dict(street_direction_abbreviations or {})
        if name_abbreviations is None:
            name_abbreviations = DEFAULT_NAME_ABBREVIATIONS
        self.name_abbreviations = dict(name_abbreviations)

    def address_identifier(self, address: str) -> ParsedAddressIdentifier | None:
        """Parse the unit, street number and street alpha of an address."""
        return parse_address_identifier(address, self.require_street_number)

    def street(self, street: str) -> ParsedStreet | None:
        """Parse the street at the start of the text."""
        return parse_street(
            street,
            self.street_type_abbreviations,
            self.street_direction_abbreviations,
            self.name_abbreviations,
        )

    def abbreviate_street_name_suburb_city(self, text: str) -> str:
        """Expand name abbreviations and upper-case the text."""
        return abbreviate_street_name_suburb_city(text, self.name_abbreviations)

    def suburb_and_city(self, text: str) -> tuple[str, str, str]:
        """Split what remains after identifier and street into suburb, city and postcode."""
        suburb = city = postcode = ""
        parts = text.split(",")
        suburb = parts[0].strip(" ")
        if len(parts) > 1:
            match = _POSTCODE_RE.match(parts[1])
            if match is not None:
                city = match.group(1).strip(" ")
                postcode = match.group(2).strip(" ")
        return (
            self.abbreviate_street_name_suburb_city(suburb),
            self.abbreviate_street_name_suburb_city(city),
            postcode,
        )

    def address(self, address: str) -> ParsedAddress:
        """Parse a whole address string into its parts."""
        parsed = ParsedAddress(raw=address)

        identifier = self.address_identifier(address)
        if identifier is not None:
            # An identifier spanning the whole text is really a street name:
            # nobody searches for an identifier on its own.
            if identifier.length >= len(address.strip(" ")):
                identifier = None
            else:
                address = address[identifier.start + identifier.length :]
        parsed.address_identifier = identifier

        parsed.street = self.street(address)
        if parsed.street is not None:
            address = address[parsed.street.start + parsed.street.length :]

        parsed.suburb, parsed.city, parsed.postcode = self.suburb_and_city(address)
        _log.debug("parsed address: %r", parsed)
        return parsed