"""
Location data models.
"""

from dataclasses import dataclass

from ..core.parsing import finite_or_none


@dataclass(frozen=True)
class Point:
    """Geographic point of a forecast location."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {
            "latitude": finite_or_none(self.latitude),
            "longitude": finite_or_none(self.longitude),
        }
