from .coordinates import CoordinateError, InvalidLatitude, InvalidLongitude

__all__ = [
    "CoordinateError",
    "InvalidLatitude",
    "InvalidLongitude",
]
