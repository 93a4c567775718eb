import pytest

from kiwicommon.geo import NZTM, WGS84, BoundingBox, Point, calculate_centroid


def test_null_point_marshals_to_null():
    assert Point().to_json() == "null"


def test_point_marshals_value():
    assert Point(1, 2, WGS84).to_json() == '{"lat":2,"long":1}'


def test_long_as_lon_marshals_both_keys():
    assert Point.long_as_lon(1, 2, WGS84).to_json() == '{"lat":2,"lon":1,"long":1}'


def test_marshal_fractional_values():
    assert Point(174.86, -41.22, WGS84).to_json() == '{"lat":-41.22,"long":174.86}'


def test_unmarshal_null():
    point = Point.from_json("null")
    assert point.is_null() is True


def test_unmarshal_value():
    point = Point.from_json(b'{"lat":2,"long":1}')
    assert point.lat == 2.0
    assert point.long == 1.0
    assert point.srid == WGS84


def test_unmarshal_keeps_known_srid():
    assert Point.from_json('{"lat":2,"long":1,"srid":2193}').srid == NZTM


def test_unmarshal_unknown_srid_defaults_to_wgs84():
    assert Point.from_json('{"lat":2,"long":1,"srid":9999}').srid == WGS84


def test_unmarshal_rejects_non_object():
    with pytest.raises(ValueError):
        Point.from_json("[1, 2]")


def test_unmarshal_rejects_string_coordinate():
    with pytest.raises(ValueError):
        Point.from_json('{"lat":"2","long":1}')


def test_is_null_when_any_part_missing():
    assert Point(1, 0, WGS84).is_null() is True
    assert Point(0, 1, WGS84).is_null() is True
    assert Point(1, 1, 0).is_null() is True
    assert Point(1, 1, WGS84).is_null() is False


def test_str_wgs84():
    assert str(Point(174.86, -41.22, WGS84)) == "ST_GeometryFromText('POINT(174.86 -41.22)', 4326)"


def test_str_other_srid_is_transformed():
    assert str(Point(1, 2, NZTM)) == (
        "ST_Transform(ST_GeometryFromText('POINT(1 2)', 2193),4326)"
    )


def test_str_null():
    assert str(Point()) == "NULL"


def test_compare():
    a = Point(174.0, -41.0, WGS84)
    assert a.compare(Point(174.0001, -41.0001, WGS84), 0.001) is True
    assert a.compare(Point(174.01, -41.0, WGS84), 0.001) is False
    assert a.compare(Point(174.0, -41.0, NZTM), 0.001) is False


def test_distance_is_zero_to_itself_and_symmetric():
    a = Point(174.77, -41.28, WGS84)
    b = Point(174.76, -36.85, WGS84)
    assert a.distance(a) == 0.0
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) > 0


def test_round_in_place():
    point = Point(174.123456, -41.987654, WGS84)
    point.round(2)
    assert point.long == 174.12
    assert point.lat == -41.99


def test_centroid_of_empty_is_none():
    assert calculate_centroid([]) is None


def test_centroid_keeps_first_srid():
    centroid = calculate_centroid([Point(20, 10, NZTM), Point(20, -10, WGS84)])
    assert centroid.srid == NZTM
    assert centroid.lat == pytest.approx(0.0, abs=1e-9)
    assert centroid.long == pytest.approx(20.0)


def test_bounding_box_centroid():
    box = BoundingBox.from_corners(10, 20, -10, 20, WGS84)
    assert box.nw == Point(20, 10, WGS84)
    assert box.se == Point(20, -10, WGS84)
    centroid = box.centroid()
    assert centroid.lat == pytest.approx(0.0, abs=1e-9)
    assert centroid.long == pytest.approx(20.0)
    assert centroid.srid == WGS84