from .coordinate import CoordinateError, InvalidInput

__all__ = ["CoordinateError", "InvalidInput"]
