from .geo import GeoCoordinate

__all__ = ["GeoCoordinate"]
