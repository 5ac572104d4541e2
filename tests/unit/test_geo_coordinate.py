from __future__ import annotations

import dataclasses
import math

import pytest

from geocoordinate.domain.exceptions import InvalidInput
from geocoordinate.domain.models.geo import GeoCoordinate


def test_geo_coordinate_accepts_valid_coordinates() -> None:
    p = GeoCoordinate(latitude=28.1234, longitude=-15.4321)
    assert p.latitude == 28.1234
    assert p.longitude == -15.4321


def test_altitude_defaults_to_zero() -> None:
    assert GeoCoordinate(40, 24).altitude == 0.0


def test_altitude_is_kept_when_given() -> None:
    baghdad = GeoCoordinate(35, 45, 120)
    assert baghdad.altitude == 120.0


def test_integer_components_are_stored_as_floats() -> None:
    p = GeoCoordinate(7, 8, 9)
    assert p.as_tuple() == (7.0, 8.0, 9.0)
    assert all(isinstance(v, float) for v in p.as_tuple())


def test_out_of_range_values_are_not_rejected() -> None:
    # Only presence and type are validated.
    p = GeoCoordinate(latitude=91.0, longitude=540.0)
    assert p.longitude == 540.0


@pytest.mark.parametrize(
    ("lat", "lon", "alt"),
    [
        (None, 2, 3),
        (1, None, 0),
        ("wow", 2, 0),
        (1, "2", 0),
        (True, 2, 0),
        (math.nan, 2, 0),
        (1, math.inf, 0),
        (1, 2, None),
    ],
)
def test_geo_coordinate_rejects_missing_or_non_numeric_values(
    lat: object, lon: object, alt: object
) -> None:
    with pytest.raises(InvalidInput):
        GeoCoordinate(lat, lon, alt)  # type: ignore[arg-type]


@pytest.mark.parametrize("args", [(1,), ()])
def test_geo_coordinate_rejects_missing_latitude_or_longitude(
    args: tuple[float, ...],
) -> None:
    with pytest.raises(InvalidInput):
        GeoCoordinate(*args)


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        GeoCoordinate(None, 2)  # type: ignore[arg-type]


def test_geo_coordinate_is_immutable() -> None:
    p = GeoCoordinate(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.latitude = 3.0  # type: ignore[misc]


def test_equal_coordinates_hash_alike() -> None:
    assert GeoCoordinate(1, 2) == GeoCoordinate(1.0, 2.0, 0.0)
    assert len({GeoCoordinate(1, 2), GeoCoordinate(1.0, 2.0)}) == 1


def test_methods_delegate_to_geo_algorithms() -> None:
    origin = GeoCoordinate(0.0, 0.0, 0.0)
    east = GeoCoordinate(0.0, 120.0, 0.0)
    a = GeoCoordinate(52.500235, 13.274623)
    b = GeoCoordinate(52.499516, 13.273739)

    assert origin.bearing_to(east) == 90.0
    assert origin.bearing_rad_to(east) == pytest.approx(math.pi / 2.0)
    assert abs(a.distance_to(b) - 100.0) <= 1.5
    assert abs(a.quick_distance_to(b) - 100.0) <= 1.5


def test_distance_to_is_symmetric_and_zero_for_self() -> None:
    a = GeoCoordinate(52.388053, 13.347313)
    b = GeoCoordinate(52.308504, 13.600255)

    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert a.distance_to(a) == 0.0


def test_as_dict_exposes_field_named_form() -> None:
    p = GeoCoordinate(35, 45, 120)
    assert p.as_dict() == {"latitude": 35.0, "longitude": 45.0, "altitude": 120.0}
