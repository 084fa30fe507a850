from .geo import Coordinates

__all__ = [
    "Coordinates",
]
