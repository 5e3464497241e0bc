"""
Location view over a DWML <location> element.
"""

from functools import cached_property
from typing import Optional, TYPE_CHECKING

from lxml import etree

from ..core import constants
from ..core.parsing import parse_float
from ..models import Point
from .elements import first_descendant, first_text

if TYPE_CHECKING:
    from .document import DWMLDocument


class DWMLLocation:
    """
    Forecast location.

    Identity is the location key; the point is optional.
    """

    def __init__(self, document: "DWMLDocument", element: etree._Element):
        self.document = document
        self.element = element

    @cached_property
    def location_key(self) -> Optional[str]:
        return first_text(self.element, constants.LOCATION_KEY_ELEMENT)

    @cached_property
    def point(self) -> Optional[Point]:
        """
        Point from the first <point> child.

        Unparsable coordinates come back as NaN; a location without a point
        gives None.
        """
        point_el = first_descendant(self.element, constants.POINT_ELEMENT)
        if point_el is None:
            return None

        return Point(
            latitude=parse_float(point_el.get(constants.LATITUDE_ATTRIBUTE)),
            longitude=parse_float(point_el.get(constants.LONGITUDE_ATTRIBUTE)),
        )

    def __repr__(self) -> str:
        return f"DWMLLocation(key={self.location_key!r}, point={self.point!r})"
