"""
DWML document.

Indexes locations and time layouts by key and enumerates the forecast
parameters, wiring each one to its resolved location and time layout.
"""

import logging
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar, Union

from lxml import etree

from ..core import constants
from ..core.exceptions import StructuralError
from .elements import child_elements, descendants, first_in_tree, local_name
from .location import DWMLLocation
from .parameters import DWMLParameter, ELEMENT_NAME_TO_PARAMETER_CLASS
from .time_layout import DWMLTimeLayout

_View = TypeVar("_View", DWMLLocation, DWMLTimeLayout)


class DWMLDocument:
    """
    Digital Weather Markup Language document.

    Built once from a parsed tree. Registries and the parameter list are
    computed on first access and kept for the lifetime of the document.

    Example:
        doc = DWMLDocument.from_file("forecast.xml")
        for parameter in doc.parameters:
            print(parameter.element_name, parameter.series)
    """

    def __init__(
        self,
        xml_document: Union[etree._Element, etree._ElementTree],
        element_map: Optional[Dict[str, Type[DWMLParameter]]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize document.

        Args:
            xml_document: Parsed tree or its root element
            element_map: Element name to parameter class mapping; defaults to
                         ELEMENT_NAME_TO_PARAMETER_CLASS
            logger: Logger instance

        Raises:
            StructuralError: If the tree has no <data> element
        """
        self.logger = logger or logging.getLogger(__name__)

        if isinstance(xml_document, etree._ElementTree):
            xml_document = xml_document.getroot()

        data_el = first_in_tree(xml_document, constants.DATA_ELEMENT)
        if data_el is None:
            raise StructuralError("Missing data element")

        self.xml_document = xml_document
        self.data_element = data_el
        self.element_map = (
            element_map if element_map is not None else ELEMENT_NAME_TO_PARAMETER_CLASS
        )

    @classmethod
    def from_string(cls, text: Union[str, bytes], **kwargs) -> "DWMLDocument":
        from ..reader import parse_xml
        return cls(parse_xml(text), **kwargs)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "DWMLDocument":
        from ..reader import read_xml
        return cls(read_xml(path), **kwargs)

    def _index(self, views: Iterator[_View], key_attr: str, kind: str) -> Dict[str, _View]:
        registry: Dict[str, _View] = {}
        for view in views:
            key = getattr(view, key_attr)
            if not key:
                self.logger.warning(f"Skipping {kind} without a key")
                continue
            if key in registry:
                self.logger.debug(f"Duplicate {kind} key {key!r}, keeping the later one")
            registry[key] = view
        return registry

    def iter_locations(self) -> Iterator[DWMLLocation]:
        for location_el in descendants(self.data_element, constants.LOCATION_ELEMENT):
            yield DWMLLocation(self, location_el)

    @cached_property
    def locations(self) -> Dict[str, DWMLLocation]:
        """Locations by location key (a later duplicate replaces an earlier one)."""
        return self._index(self.iter_locations(), "location_key", "location")

    def iter_time_layouts(self) -> Iterator[DWMLTimeLayout]:
        for layout_el in descendants(self.data_element, constants.TIME_LAYOUT_ELEMENT):
            yield DWMLTimeLayout(self, layout_el)

    @cached_property
    def time_layouts(self) -> Dict[str, DWMLTimeLayout]:
        """Time layouts by layout key (a later duplicate replaces an earlier one)."""
        return self._index(self.iter_time_layouts(), "layout_key", "time layout")

    def iter_parameters(self) -> Iterator[DWMLParameter]:
        """
        Generate parameter views in document order.

        Only direct children of each <parameters> block are considered, and
        only those whose element name is in the dispatch table.
        """
        for parameters_el in descendants(self.data_element, constants.PARAMETERS_ELEMENT):
            for child in child_elements(parameters_el):
                name = local_name(child)
                parameter_class = self.element_map.get(name)
                if parameter_class is None:
                    self.logger.debug(f"No parameter view for element {name!r}")
                    continue
                yield parameter_class(self, parameters_el, child)

    @cached_property
    def parameters(self) -> List[DWMLParameter]:
        return list(self.iter_parameters())

    def to_dict(self) -> Dict[str, Any]:
        return {"parameters": [parameter.to_dict() for parameter in self.parameters]}

    def __repr__(self) -> str:
        return (
            f"DWMLDocument(locations={len(self.locations)}, "
            f"time_layouts={len(self.time_layouts)})"
        )
