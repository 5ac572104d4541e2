from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from geocoordinate.adapters.schemas.coordinate import CoordinateSchema
from geocoordinate.domain.exceptions import InvalidInput
from geocoordinate.domain.models import GeoCoordinate

logger = logging.getLogger(__name__)


def _from_components(values: Sequence[Any], *, form: str) -> GeoCoordinate:
    if not 2 <= len(values) <= 3:
        logger.debug("Rejected %s input with %d values", form, len(values))
        raise InvalidInput(
            f"Expected latitude, longitude[, altitude] as {form}; "
            f"got {len(values)} values"
        )
    return GeoCoordinate(*values)


def from_values(*values: Any) -> GeoCoordinate:
    """Build a coordinate from positional `latitude, longitude[, altitude]`."""

    return _from_components(values, form="arguments")


def from_sequence(values: Sequence[Any]) -> GeoCoordinate:
    """Build a coordinate from `[latitude, longitude]` or `[lat, lon, alt]`."""

    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidInput(f"Expected a sequence of numbers, got {values!r}")
    return _from_components(values, form="sequence")


def from_mapping(data: Mapping[str, Any]) -> GeoCoordinate:
    """Build a coordinate from a mapping with `latitude`/`longitude` keys.

    `altitude` is optional and defaults to 0. Extra keys are ignored.
    """

    try:
        parsed = CoordinateSchema.model_validate(dict(data))
    except ValidationError as exc:
        logger.debug("Rejected mapping input %r: %s", data, exc)
        raise InvalidInput(f"Invalid coordinate mapping: {data!r}") from exc

    return GeoCoordinate(
        latitude=parsed.latitude,
        longitude=parsed.longitude,
        altitude=parsed.altitude,
    )


def geo_coordinate(*args: Any) -> GeoCoordinate:
    """Build a coordinate from any supported input shape.

    The first argument picks the form:
      - a mapping: `geo_coordinate({"latitude": 52.5, "longitude": 13.4})`
      - a sequence: `geo_coordinate([52.5, 13.4, 34.0])`
      - otherwise positional values: `geo_coordinate(52.5, 13.4)`

    The result equals `GeoCoordinate(...)` built from the same values.
    """

    if not args:
        raise InvalidInput("No coordinate input given")

    first = args[0]
    if isinstance(first, Mapping):
        if len(args) > 1:
            raise InvalidInput("Unexpected arguments after a coordinate mapping")
        return from_mapping(first)
    if isinstance(first, Sequence) and not isinstance(first, (str, bytes)):
        if len(args) > 1:
            raise InvalidInput("Unexpected arguments after a coordinate sequence")
        return from_sequence(first)
    return from_values(*args)
