"""
Schema-aware views over DWML documents.
"""

from .document import DWMLDocument
from .location import DWMLLocation
from .time_layout import DWMLTimeLayout
from .parameters import (
    DWMLParameter,
    DWMLIconSeriesParameter,
    DWMLNumericSeriesParameter,
    ELEMENT_NAME_TO_PARAMETER_CLASS,
    build_element_map,
)

__all__ = [
    "DWMLDocument",
    "DWMLLocation",
    "DWMLTimeLayout",
    "DWMLParameter",
    "DWMLIconSeriesParameter",
    "DWMLNumericSeriesParameter",
    "ELEMENT_NAME_TO_PARAMETER_CLASS",
    "build_element_map",
]
