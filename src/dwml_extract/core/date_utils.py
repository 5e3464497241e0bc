"""
Date and timezone utilities.

Valid times in DWML carry their own UTC offset (e.g. 2024-01-15T06:00:00-05:00).
Both the absolute instant and the literal offset are kept.
"""

from datetime import datetime
from typing import Optional, Tuple

import pytz
from dateutil.parser import isoparse

from .exceptions import MalformedTimestampError


class DateUtils:
    """Utilities for offset-aware timestamp handling."""

    @staticmethod
    def parse_with_offset(
        raw: Optional[str],
        element: str = "start-valid-time"
    ) -> Tuple[datetime, int]:
        """
        Parse an ISO-8601 timestamp, preserving its UTC offset.

        Timestamps without an offset are taken as UTC.

        Args:
            raw: Timestamp text as found in the document
            element: Element name, used in the error message

        Returns:
            Tuple of (aware datetime in the literal offset, offset in seconds)

        Raises:
            MalformedTimestampError: If the text is missing or not ISO-8601
        """
        if raw is None or not raw.strip():
            raise MalformedTimestampError(raw, element)

        try:
            parsed = isoparse(raw.strip())
        except (ValueError, OverflowError) as e:
            raise MalformedTimestampError(raw, element) from e

        if parsed.tzinfo is None:
            parsed = pytz.UTC.localize(parsed)

        offset = parsed.utcoffset()
        return parsed, int(offset.total_seconds())

    @staticmethod
    def to_utc(value: datetime) -> datetime:
        """
        Normalize an aware datetime to UTC.

        Args:
            value: Datetime (naive values are assumed to be UTC)

        Returns:
            Datetime in UTC
        """
        if value.tzinfo is None:
            return pytz.UTC.localize(value)
        return value.astimezone(pytz.UTC)
