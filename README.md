# kiwicommon

A collection of small, independent helpers shared by property-listing
services. Each module can be used by itself, and the package has no
runtime dependencies beyond the standard library.

## Installation

```
pip install kiwicommon
```

To run the test suite, install the test extra:

```
pip install "kiwicommon[test]"
pytest
```

## What's inside

| Module | Purpose |
| --- | --- |
| `kiwicommon.extmath` | `round_to` for rounding to a fixed number of decimal places, halves away from zero. |
| `kiwicommon.constants` | `AgentStatus`, `Authority` and `ListingState` enumerations. |
| `kiwicommon.geo` | `Point`, `BoundingBox`, haversine distance, centroids, and the `WGS84` / `NZTM` SRIDs. |
| `kiwicommon.geom` | GeoJSON-style `Geometry`, coordinate flattening and encoded polyline conversion. |
| `kiwicommon.pgarray` | Parsing and formatting of PostgreSQL array literals (`PGArray`, `parse_array`, `create_string_array`). |
| `kiwicommon.placeholders` | Batched `$n` placeholders for multi-row inserts (`placeholders`, `Placeholder`). |
| `kiwicommon.nulls` | `Null` values built by `string_from`, `int_from` and `float_from`, where the zero value is null. |
| `kiwicommon.address_parser` | New Zealand address parsing (`Parser`, `ParsedAddress`). |
| `kiwicommon.address_identifier` | Parsing of unit, street number and street alpha (`parse_address_identifier`). |
| `kiwicommon.street` | Parsing of street name, type and direction (`parse_street`, `ParsedStreet`). |
| `kiwicommon.address_matchers` | The regular-expression matchers behind identifier parsing. |
| `kiwicommon.lambda_handler` | API Gateway proxy responses (`send`, `send_error`, `error_handler`). |
| `kiwicommon.health` | A WSGI health-check app (`handler`). |
| `kiwicommon.httpencode` | JSON HTTP responses and mapping of errors onto status codes. |

## Examples

Parsing an address:

```python
from kiwicommon.address_parser import Parser

parser = Parser(
    street_type_abbreviations={"RD": "ROAD", "ST": "STREET"},
    street_direction_abbreviations={"E": "EAST", "WEST": "WEST"},
)
parsed = parser.address("Flat 5, 58B Fictional Rd, Fake Suburb, Faketown 1023")
print(parsed.street.name, parsed.street.type)  # FICTIONAL ROAD
print(parsed.suburb, parsed.city, parsed.postcode)  # FAKE SUBURB FAKETOWN 1023
```

Working with points:

```python
from kiwicommon.geo import Point, WGS84

wellington = Point(long=174.7762, lat=-41.2865, srid=WGS84)
auckland = Point(long=174.7633, lat=-36.8485, srid=WGS84)
print(wellington.distance(auckland))  # metres
print(wellington.to_json())           # {"lat":-41.2865,"long":174.7762}
```

Encoded polylines:

```python
from kiwicommon.geom import Geometry, geom_to_encoded_polyline, polylines_to_geoms

ring = [[-41.22, 174.86], [-41.23, 174.86], [-41.23, 174.85], [-41.22, 174.86]]
encoded = geom_to_encoded_polyline(Geometry.polygon([ring]))
polygons = polylines_to_geoms(encoded)
```

PostgreSQL arrays and insert placeholders:

```python
from dataclasses import dataclass
from kiwicommon.pgarray import parse_array, create_string_array
from kiwicommon.placeholders import placeholders

values = parse_array('{"one, two",three}')   # ['one, two', 'three']
literal = create_string_array(values)        # {"one, two","three"}

@dataclass
class Row:
    name: str
    price: int

batch = placeholders([Row("a", 1), Row("b", 2)])[0]
print(batch.placeholders, batch.args)  # ($1,$2),($3,$4) ['a', 1, 'b', 2]
```

HTTP and Lambda responses:

```python
from kiwicommon.httpencode import encode_error_response, StatusCodeError
from kiwicommon.lambda_handler import send

response = encode_error_response(StatusCodeError(404, "not found"))
print(response.status, response.body)  # 404 b'{"error":"not found"}\n'

reply = send({"headers": {"origin": "https://example.com"}}, 200, {"ok": True})
```

A health check as a WSGI app:

```python
from kiwicommon.health import handler

def checks():
    pass  # raise to report the service as unhealthy

app = handler(checks)
```

## What this package does not do

It has no command-line tool and runs no server of its own; `health.handler`
returns a WSGI app for you to mount. It does not read configuration from the
environment or `.env` files, does not open database connections or build
connection strings, does not track which fields of a request were set, and
has no CORS wrapper, error collector or file-transfer client.