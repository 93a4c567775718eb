import pytest

from kiwicommon.address_parser import ParsedAddress, Parser


@pytest.fixture
def parser():
    return Parser(
        street_type_abbreviations={"RD": "ROAD", "ST": "STREET"},
        street_direction_abbreviations={
            "SOUTH": "SOUTH",
            "NORTH": "NORTH",
            "EAST": "EAST",
            "E": "EAST",
            "WEST": "WEST",
        },
    )


def test_fully_formed_identifier_with_street_alpha(parser):
    parsed = parser.address("Flat 5, 58B Fictional Rd, Fake Suburb, Faketown")
    assert parsed.address_identifier is not None
    assert parsed.address_identifier.length == 12
    assert parsed.street is not None
    assert parsed.street.length == 13
    assert parsed.street.name == "FICTIONAL"
    assert parsed.street.type == "ROAD"
    assert parsed.suburb == "FAKE SUBURB"
    assert parsed.city == "FAKETOWN"


def test_fully_formed_identifier_with_postcode(parser):
    parsed = parser.address("Flat 5, 58B Fictional Rd, Fake Suburb, Faketown 1023")
    assert parsed.address_identifier.length == 12
    assert parsed.street.length == 13
    assert parsed.street.name == "FICTIONAL"
    assert parsed.street.type == "ROAD"
    assert parsed.suburb == "FAKE SUBURB"
    assert parsed.city == "FAKETOWN"
    assert parsed.postcode == "1023"


def test_street_only(parser):
    parsed = parser.address("Kenya St")
    assert parsed.address_identifier is None
    assert parsed.street.length == 8
    assert parsed.street.name == "KENYA"
    assert parsed.street.type == "STREET"
    assert parsed.suburb == ""
    assert parsed.city == ""


def test_street_without_type_or_direction(parser):
    parsed = parser.address("118 funnystreet")
    assert parsed.address_identifier.street_number == 118
    assert parsed.street.name == "FUNNYSTREET"
    assert parsed.suburb == ""
    assert parsed.city == ""


def test_empty_address(parser):
    parsed = parser.address("")
    assert parsed == ParsedAddress(raw="")


def test_shorthand_state_highway_with_direction(parser):
    parsed = parser.address("SH2 E")
    assert parsed.address_identifier is None
    assert parsed.street.name == "STATE HIGHWAY 2"
    assert parsed.street.direction == "EAST"


def test_state_highway_address_with_suburb(parser):
    parsed = parser.address("1701 State Highway 2 East, Nukuhou")
    assert parsed.address_identifier.street_number == 1701
    assert parsed.street.name == "STATE HIGHWAY 2"
    assert parsed.street.direction == "EAST"
    assert parsed.suburb == "NUKUHOU"


@pytest.mark.parametrize(
    "address, suburb",
    [
        ("34 Lake Road, St", "ST"),
        ("34 Lake Road, St Ar", "ST AR"),
        ("34 Lake Road, St Arnaud", "ST ARNAUD"),
    ],
)
def test_saint_suburbs_keep_short_form(parser, address, suburb):
    parsed = parser.address(address)
    assert parsed.address_identifier.street_number == 34
    assert parsed.suburb == suburb


def test_identifier_covering_whole_text_is_dropped(parser):
    parsed = parser.address("123")
    assert parsed.address_identifier is None
    assert parsed.street.name == "123"
    assert parsed.raw == "123"


def test_address_identifier_lot_without_street_number(parser):
    assert parser.address_identifier("Lot 1") is None


def test_address_identifier_without_required_street_number():
    lenient = Parser(require_street_number=False)
    parsed = lenient.address_identifier("Lot 1")
    assert parsed is not None
    assert parsed.unit_type == "LOT"


def test_address_identifier_unit_and_number(parser):
    parsed = parser.address_identifier("23/18 Cuba Street, Te Aro, Wellington")
    assert parsed.unit_identifier == "23"
    assert parsed.street_number == 18


def test_address_identifier_number_and_alpha(parser):
    parsed = parser.address_identifier("18A Cuba Street, Te Aro, Wellington")
    assert parsed.street_number == 18
    assert parsed.street_alpha == "A"
    assert parsed.unit_identifier == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Te Aro, Wellington 6011", ("TE ARO", "WELLINGTON", "6011")),
        (" Fake Suburb, Faketown", ("FAKE SUBURB", "FAKETOWN", "")),
        ("a, b, c", ("A", "B", "")),
        ("Te Aro, 123", ("TE ARO", "", "123")),
        ("Te Aro,-x", ("TE ARO", "", "")),
        ("", ("", "", "")),
    ],
)
def test_suburb_and_city(parser, text, expected):
    assert parser.suburb_and_city(text) == expected


def test_abbreviations_expand(parser):
    assert parser.abbreviate_street_name_suburb_city("Mt Wellington") == "MOUNT WELLINGTON"
    assert parser.abbreviate_street_name_suburb_city("St Heliers") == "ST HELIERS"
    assert parser.abbreviate_street_name_suburb_city("wellington") == "WELLINGTON"


def test_custom_name_abbreviations():
    custom = Parser(name_abbreviations={"PT": "POINT"})
    assert custom.abbreviate_street_name_suburb_city("Mt Eden") == "MT EDEN"
    assert custom.abbreviate_street_name_suburb_city("Pt Chev") == "POINT CHEV"


def test_street_uses_configured_types(parser):
    street = parser.street("Aranui Rd, Mt Wellington")
    assert street.name == "ARANUI"
    assert street.type == "ROAD"