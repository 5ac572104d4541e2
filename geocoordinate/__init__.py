"""Geographic coordinates with great-circle distance and bearing."""

from geocoordinate.app.services.coordinate_factory import (
    from_mapping,
    from_sequence,
    from_values,
    geo_coordinate,
)
from geocoordinate.domain.algorithms.geo_utils import EARTH_RADIUS_M
from geocoordinate.domain.exceptions import CoordinateError, InvalidInput
from geocoordinate.domain.models import GeoCoordinate

__all__ = [
    "EARTH_RADIUS_M",
    "CoordinateError",
    "GeoCoordinate",
    "InvalidInput",
    "from_mapping",
    "from_sequence",
    "from_values",
    "geo_coordinate",
]
