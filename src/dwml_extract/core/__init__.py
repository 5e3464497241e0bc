"""
Core utilities for the DWML extractor.

Provides configuration management, logging, errors and parsing helpers.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import (
    DWMLError,
    StructuralError,
    DWMLParseError,
    MalformedTimestampError,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "DWMLError",
    "StructuralError",
    "DWMLParseError",
    "MalformedTimestampError",
]
