"""GeoJSON-style geometries and encoded polylines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

POINT = "Point"
MULTI_POINT = "MultiPoint"
LINE_STRING = "LineString"
MULTI_LINE_STRING = "MultiLineString"
POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"
GEOMETRY_COLLECTION = "GeometryCollection"

_SCALE = 1e5
_DIM = 2


class PolylineError(ValueError):
    """Raised when an encoded polyline cannot be decoded or encoded."""


@dataclass
class Geometry:
    """A geometry: a type name with coordinates, or a collection of geometries."""

    type: str
    coordinates: Any = None
    geometries: list[Geometry] = field(default_factory=list)

    @classmethod
    def polygon(cls, rings: list[list[list[float]]]) -> Geometry:
        """A polygon geometry from its rings."""
        return cls(POLYGON, rings)


def _round_half_away(value: float) -> int:
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _encode_int(value: int, out: bytearray) -> None:
    unsigned = ~(value << 1) if value < 0 else value << 1
    while unsigned >= 0x20:
        out.append((unsigned & 0x1F) + 95)
        unsigned >>= 5
    out.append(unsigned + 63)


def _decode_int(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    shift = 0
    while pos < len(data):
        byte = data[pos]
        pos += 1
        if not 63 <= byte <= 126:
            raise PolylineError(f"invalid byte {byte} at offset {pos - 1}")
        chunk = byte - 63
        result |= (chunk & 0x1F) << shift
        shift += 5
        if chunk < 0x20:
            value = ~(result >> 1) if result & 1 else result >> 1
            return value, pos
        if shift >= 64:
            raise PolylineError("overflow")
    raise PolylineError("unterminated sequence")


def encode_coords(coords: list[list[float]]) -> bytes:
    """Encode coordinate pairs as a polyline with five decimal places."""
    out = bytearray()
    last = [0] * _DIM
    for coord in coords:
        if len(coord) > _DIM:
            raise PolylineError(f"coordinate has {len(coord)} dimensions, expected {_DIM}")
        for i, value in enumerate(coord):
            scaled = _round_half_away(_SCALE * value)
            _encode_int(scaled - last[i], out)
            last[i] = scaled
    return bytes(out)


def decode_coords(data: bytes | str) -> list[list[float]]:
    """Decode a polyline into coordinate pairs."""
    if isinstance(data, str):
        data = data.encode("ascii", errors="replace")
    coords: list[list[float]] = []
    last = [0] * _DIM
    pos = 0
    while pos < len(data):
        coord = []
        for i in range(_DIM):
            delta, pos = _decode_int(data, pos)
            last[i] += delta
            coord.append(last[i] / _SCALE)
        coords.append(coord)
    return coords


def geometry_to_coordinates(geom: Geometry) -> list[list[float]]:
    """Flatten any geometry into a list of coordinates."""
    kind = geom.type
    if kind == GEOMETRY_COLLECTION:
        return collection_to_coordinates(geom)
    if kind == MULTI_POLYGON:
        return multi_polygon_to_coordinates(geom.coordinates)
    if kind in (POLYGON, MULTI_LINE_STRING):
        return polygon_to_coordinates(geom.coordinates)
    if kind in (LINE_STRING, MULTI_POINT):
        return geom.coordinates
    if kind == POINT:
        return [[geom.coordinates[0], geom.coordinates[1]]]
    return []


def collection_to_coordinates(collection: Geometry) -> list[list[float]]:
    """Flatten every geometry of a collection."""
    return [coord for geom in collection.geometries for coord in geometry_to_coordinates(geom)]


def multi_polygon_to_coordinates(multipolygon: list) -> list[list[float]]:
    """Flatten the rings of every polygon."""
    return [coord for polygon in multipolygon for coord in polygon_to_coordinates(polygon)]


def polygon_to_coordinates(polygon: list) -> list[list[float]]:
    """Flatten the rings of one polygon."""
    return [coord for ring in polygon for coord in ring]


def polyline_to_geom(polyline: bytes | str) -> Geometry:
    """Decode one polyline into a single-ring polygon."""
    try:
        coords = decode_coords(polyline)
    except PolylineError as err:
        raise PolylineError(f"decoding polyline: {err}") from err
    return Geometry.polygon([coords])


def polylines_to_geoms(polylines: list[bytes | str]) -> list[Geometry]:
    """Decode each polyline into a polygon."""
    geoms = []
    for index, polyline in enumerate(polylines):
        try:
            geoms.append(polyline_to_geom(polyline))
        except PolylineError as err:
            raise PolylineError(f"encountered on polyline at idx {index}: {err}") from err
    return geoms


def geom_to_encoded_polyline(geom: Geometry) -> list[bytes]:
    """Encode each ring of a polygon or multipolygon as a polyline."""
    if geom.type == POLYGON:
        return [encode_coords(ring) for ring in geom.coordinates]
    if geom.type == MULTI_POLYGON:
        return [encode_coords(ring) for polygon in geom.coordinates for ring in polygon]
    return []