"""
Domain models and value objects.

Contains the interpolation Point and the ShareSet input models.
"""

from src.core.domain.point import Point
from src.core.domain.share_set import (
    KEYS_SECTION,
    EncodedShare,
    ShareKeys,
    ShareSet,
)

__all__ = [
    # Point
    "Point",
    # ShareSet models
    "KEYS_SECTION",
    "ShareKeys",
    "EncodedShare",
    "ShareSet",
]
