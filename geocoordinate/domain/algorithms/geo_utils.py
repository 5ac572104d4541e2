from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geocoordinate.domain.models import GeoCoordinate

# Mean Earth radius (IUGG), spherical model.
EARTH_RADIUS_M = 6371000.0


def haversine_distance_m(
    a: GeoCoordinate, b: GeoCoordinate, *, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Great-circle distance in meters."""

    lat1 = math.radians(a.latitude)
    lon1 = math.radians(a.longitude)
    lat2 = math.radians(b.latitude)
    lon2 = math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * radius_m * math.asin(math.sqrt(s))


def equirectangular_distance_m(
    a: GeoCoordinate, b: GeoCoordinate, *, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Flat-projection distance in meters, good for short separations only.

    Longitude difference is scaled by the cosine of the mean latitude; a single
    cos call replaces the haversine's sin/cos/asin chain.
    """

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    x = dlon * math.cos((lat1 + lat2) / 2.0)
    return radius_m * math.hypot(x, dlat)


def initial_bearing_rad(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Forward azimuth from a to b in radians, normalized to [0, 2*pi).

    Coincident points yield 0 (atan2(0, 0)).
    """

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        dlon
    )
    theta = math.atan2(y, x)
    if theta < 0.0:
        theta += 2.0 * math.pi
    # A tiny negative angle can round up to exactly 2*pi.
    if theta >= 2.0 * math.pi:
        return 0.0
    return theta


def initial_bearing_deg(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Forward azimuth from a to b in degrees, normalized to [0, 360)."""

    deg = math.degrees(initial_bearing_rad(a, b))
    return 0.0 if deg >= 360.0 else deg
