"""Geographic points, bounding boxes and centroids."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal

from .extmath import round_to

WGS84 = 4326
NZTM = 2193

_EARTH_RADIUS_M = 6378100.0


def _fixed(value: float) -> str:
    """Shortest fixed-point text that reads back as the same float."""
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _json_float(value: float) -> str:
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"unsupported value: {value!r}")
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        mantissa, exponent = repr(value).split("e")
        sign = exponent[0]
        digits = exponent[1:].lstrip("0") or "0"
        return f"{mantissa}e{sign}{digits}"
    return _fixed(value)


def _number(value: object, name: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"cannot unmarshal {type(value).__name__} into Point.{name}")
    return float(value)


def _haversin(theta: float) -> float:
    return math.sin(theta / 2) ** 2


@dataclass
class Point:
    """A longitude/latitude pair in a spatial reference system."""

    long: float = 0.0
    lat: float = 0.0
    srid: int = 0
    marshal_long_as_lon: bool = field(default=False, repr=False, compare=False)

    @classmethod
    def long_as_lon(cls, x: float, y: float, srid: int) -> Point:
        """A point whose JSON also carries the longitude under `lon`."""
        return cls(x, y, srid, marshal_long_as_lon=True)

    def is_null(self) -> bool:
        """True when the SRID, latitude or longitude is unset."""
        return self.srid == 0 or self.lat == 0 or self.long == 0

    def to_json(self) -> str:
        """Compact JSON: `null` for a null point, otherwise lat/long keys."""
        if self.is_null():
            return "null"
        values = {"lat": self.lat, "long": self.long}
        if self.marshal_long_as_lon:
            values["lon"] = self.long
        body = ",".join(f'"{key}":{_json_float(values[key])}' for key in sorted(values))
        return "{" + body + "}"

    @classmethod
    def from_json(cls, data: str | bytes) -> Point:
        """Decode a point; an unknown or missing SRID becomes WGS84."""
        try:
            decoded = json.loads(data)
        except json.JSONDecodeError as err:
            raise ValueError(f"invalid point JSON: {err}") from err
        if decoded is None:
            decoded = {}
        if not isinstance(decoded, dict):
            raise ValueError(f"cannot unmarshal {type(decoded).__name__} into Point")
        fields = {str(key).lower(): value for key, value in decoded.items()}
        lat = _number(fields.get("lat"), "lat")
        long = _number(fields.get("long"), "long")
        srid = fields.get("srid")
        if srid is None:
            srid = 0
        if isinstance(srid, bool) or not isinstance(srid, int):
            raise ValueError(f"cannot unmarshal {type(srid).__name__} into Point.srid")
        if srid not in (WGS84, NZTM):
            srid = WGS84
        return cls(long, lat, srid)

    def __str__(self) -> str:
        if self.is_null():
            return "NULL"
        point = (
            f"ST_GeometryFromText('POINT({_fixed(self.long)} {_fixed(self.lat)})', {self.srid})"
        )
        if self.srid != WGS84:
            point = f"ST_Transform({point},{WGS84})"
        return point

    def compare(self, other: Point, diff: float) -> bool:
        """True when both share an SRID and lie within `diff` on each axis."""
        if self.srid != other.srid:
            return False
        return abs(self.lat - other.lat) < diff and abs(self.long - other.long) < diff

    def distance(self, other: Point) -> float:
        """Great-circle distance in metres by the haversine formula."""
        la1 = math.radians(self.lat)
        lo1 = math.radians(self.long)
        la2 = math.radians(other.lat)
        lo2 = math.radians(other.long)
        h = _haversin(la2 - la1) + math.cos(la1) * math.cos(la2) * _haversin(lo2 - lo1)
        return 2 * _EARTH_RADIUS_M * math.asin(math.sqrt(h))

    def round(self, places: int) -> None:
        """Round latitude and longitude in place to `places` decimals."""
        self.lat = round_to(self.lat, places)
        self.long = round_to(self.long, places)


def calculate_centroid(points: list[Point]) -> Point | None:
    """The spherical centroid of the points, or None when there are none."""
    if not points:
        return None
    x = y = z = 0.0
    for point in points:
        lat = math.radians(point.lat)
        long = math.radians(point.long)
        x += math.cos(lat) * math.cos(long)
        y += math.cos(lat) * math.sin(long)
        z += math.sin(lat)
    total = float(len(points))
    x /= total
    y /= total
    z /= total
    c_long = math.atan2(y, x)
    c_lat = math.atan2(z, math.sqrt(x * x + y * y))
    return Point(math.degrees(c_long), math.degrees(c_lat), points[0].srid)


@dataclass
class BoundingBox:
    """A rectangle given by its north-west and south-east corners."""

    nw: Point
    se: Point
    srid: int

    @classmethod
    def from_corners(
        cls, nw_lat: float, nw_lon: float, se_lat: float, se_lon: float, srid: int
    ) -> BoundingBox:
        """Build a box from corner coordinates."""
        return cls(Point(nw_lon, nw_lat, srid), Point(se_lon, se_lat, srid), srid)

    def centroid(self) -> Point | None:
        """The centroid of the two corners."""
        return calculate_centroid([self.nw, self.se])