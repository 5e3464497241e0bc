"""
Data models for the DWML extractor.

Contains value types for points, valid times, layout keys and series entries.
"""

from .location import Point
from .time_layout import ValidTimeInterval, ParsedLayoutKey
from .series import IconSeriesEntry, ValueSeriesEntry

__all__ = [
    "Point",
    "ValidTimeInterval",
    "ParsedLayoutKey",
    "IconSeriesEntry",
    "ValueSeriesEntry",
]
