class CoordinateError(Exception):
    """Base exception for coordinate handling failures."""


class InvalidInput(CoordinateError, ValueError):
    """Raised when latitude/longitude/altitude input cannot form a coordinate."""
