"""
Exceptions raised while reading DWML documents.
"""

from typing import Optional


class DWMLError(Exception):
    """Base class for DWML extraction errors."""


class StructuralError(DWMLError):
    """The document lacks an element every DWML product must have."""


class DWMLParseError(DWMLError):
    """The input could not be parsed as XML."""


class MalformedTimestampError(DWMLError, ValueError):
    """A valid-time element holds text that is not an ISO-8601 timestamp."""

    def __init__(self, raw: Optional[str], element: str = "start-valid-time"):
        self.raw = raw
        self.element = element
        super().__init__(f"Malformed {element} value: {raw!r}")
