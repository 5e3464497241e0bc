"""
Forecast parameter views.

Each view wraps one element under a <parameters> block. The block's
applicable-location and the element's time-layout attribute are resolved
against the document registries when the view is built; a key with no
matching entry leaves the reference as None.
"""

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, TYPE_CHECKING

from lxml import etree

from ..core import constants
from ..core.parsing import parse_float
from ..models import IconSeriesEntry, ValueSeriesEntry
from .elements import descendants, first_text, local_name
from .location import DWMLLocation
from .time_layout import DWMLTimeLayout

if TYPE_CHECKING:
    from .document import DWMLDocument


class DWMLParameter(ABC):
    """Base class for parameter views."""

    def __init__(
        self,
        document: "DWMLDocument",
        parameters_element: etree._Element,
        element: etree._Element
    ):
        """
        Initialize the view and resolve its references.

        Args:
            document: Owning document (provides the registries)
            parameters_element: Enclosing <parameters> element
            element: The parameter element itself
        """
        self.document = document
        self.element = element

        self.location_key: Optional[str] = (
            parameters_element.get(constants.APPLICABLE_LOCATION_ATTRIBUTE) or None
        )
        self.location: Optional[DWMLLocation] = None
        if self.location_key:
            self.location = document.locations.get(self.location_key)

        self.time_layout_key: Optional[str] = (
            element.get(constants.TIME_LAYOUT_ATTRIBUTE) or None
        )
        self.time_layout: Optional[DWMLTimeLayout] = None
        if self.time_layout_key:
            self.time_layout = document.time_layouts.get(self.time_layout_key)

    @property
    def element_name(self) -> str:
        return local_name(self.element)

    @cached_property
    def name(self) -> Optional[str]:
        return first_text(self.element, constants.NAME_ELEMENT)

    @property
    def type(self) -> Optional[str]:
        return self.element.get(constants.TYPE_ATTRIBUTE)

    @property
    @abstractmethod
    def raw_values(self) -> Tuple[Any, ...]:
        """Raw values in document order, before pairing with valid times."""

    def _pair(self, raw: Tuple[Any, ...]) -> Iterator[Tuple[Any, Any]]:
        # zip stops at the shorter side: extra values have no valid time
        if self.time_layout is None:
            return iter(())
        return zip(self.time_layout.valid_times, raw)

    @abstractmethod
    def iter_series(self) -> Iterator[Any]:
        """Generate series entries pairing raw values with valid times."""

    @cached_property
    def series(self) -> List[Any]:
        return list(self.iter_series())

    def to_dict(self) -> Dict[str, Any]:
        point = self.location.point if self.location is not None else None
        return {
            "element_name": self.element_name,
            "name": self.name,
            "type": self.type,
            "time_layout": (
                self.time_layout.parsed_key.to_dict()
                if self.time_layout is not None else None
            ),
            "point": point.to_dict() if point is not None else None,
            "series": [entry.to_dict() for entry in self.series],
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(element={self.element_name!r}, "
            f"type={self.type!r}, location={self.location_key!r}, "
            f"time_layout={self.time_layout_key!r})"
        )


class DWMLIconSeriesParameter(DWMLParameter):
    """Condition icons: one <icon-link> per valid time."""

    def iter_icon_urls(self) -> Iterator[Optional[str]]:
        # nil icon links keep their position as None
        for link_el in descendants(self.element, constants.ICON_LINK_ELEMENT):
            yield link_el.text

    @cached_property
    def icon_urls(self) -> Tuple[Optional[str], ...]:
        return tuple(self.iter_icon_urls())

    @property
    def raw_values(self) -> Tuple[Optional[str], ...]:
        return self.icon_urls

    def iter_series(self) -> Iterator[IconSeriesEntry]:
        for valid_time, url in self._pair(self.icon_urls):
            yield IconSeriesEntry(time=valid_time, url=url)


class DWMLNumericSeriesParameter(DWMLParameter):
    """Numeric values with units: one <value> per valid time."""

    @property
    def units(self) -> Optional[str]:
        return self.element.get(constants.UNITS_ATTRIBUTE)

    def iter_values(self) -> Iterator[float]:
        for value_el in descendants(self.element, constants.VALUE_ELEMENT):
            yield parse_float(value_el.text)

    @cached_property
    def values(self) -> Tuple[float, ...]:
        return tuple(self.iter_values())

    @property
    def raw_values(self) -> Tuple[float, ...]:
        return self.values

    def iter_series(self) -> Iterator[ValueSeriesEntry]:
        for valid_time, value in self._pair(self.values):
            yield ValueSeriesEntry(time=valid_time, value=value)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["units"] = self.units
        return data


ELEMENT_NAME_TO_PARAMETER_CLASS: Dict[str, Type[DWMLParameter]] = {
    "conditions-icon": DWMLIconSeriesParameter,
    "conditions-icons": DWMLIconSeriesParameter,
    "probability-of-precipitation": DWMLNumericSeriesParameter,
    "temperature": DWMLNumericSeriesParameter,
    "precipitation": DWMLNumericSeriesParameter,
    "wind-speed": DWMLNumericSeriesParameter,
    "direction": DWMLNumericSeriesParameter,
    "cloud-amount": DWMLNumericSeriesParameter,
    "humidity": DWMLNumericSeriesParameter,
}

PARAMETER_KIND_TO_CLASS: Dict[str, Type[DWMLParameter]] = {
    constants.PARAMETER_KIND_ICON: DWMLIconSeriesParameter,
    constants.PARAMETER_KIND_NUMERIC: DWMLNumericSeriesParameter,
}


def build_element_map(extra: Optional[Dict[str, str]] = None) -> Dict[str, Type[DWMLParameter]]:
    """
    Extend the default dispatch table.

    Args:
        extra: Element name to parameter kind ("icon" or "numeric")

    Returns:
        Element name to parameter class mapping

    Raises:
        ValueError: If a kind is unknown
    """
    element_map = dict(ELEMENT_NAME_TO_PARAMETER_CLASS)
    for name, kind in (extra or {}).items():
        if kind not in PARAMETER_KIND_TO_CLASS:
            raise ValueError(f"Unknown parameter kind for {name}: {kind}")
        element_map[name] = PARAMETER_KIND_TO_CLASS[kind]
    return element_map
