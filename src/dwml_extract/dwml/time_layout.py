"""
Time layout view over a DWML <time-layout> element.
"""

import logging
from functools import cached_property
from typing import Iterator, Optional, Tuple, TYPE_CHECKING

from lxml import etree

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.parsing import parse_int
from ..models import ParsedLayoutKey, ValidTimeInterval
from .elements import descendants, first_text

if TYPE_CHECKING:
    from .document import DWMLDocument

logger = logging.getLogger(__name__)


class DWMLTimeLayout:
    """
    Time layout: a keyed, ordered sequence of valid-time intervals.

    Start and end times are paired by position in document order; the schema
    has no explicit link between them.
    """

    def __init__(self, document: "DWMLDocument", element: etree._Element):
        self.document = document
        self.element = element

    @cached_property
    def layout_key(self) -> Optional[str]:
        return first_text(self.element, constants.LAYOUT_KEY_ELEMENT)

    @cached_property
    def parsed_key(self) -> ParsedLayoutKey:
        """
        Decode the layout key, e.g. "k-p24h-n7-1".

        Token 1 is the period, token 2 the number of times and token 3 the
        sequence number. Missing tokens are left as None.
        """
        key = self.layout_key
        if not key:
            return ParsedLayoutKey()

        parts = key.split(constants.LAYOUT_KEY_SEPARATOR)

        def token(index: int) -> Optional[str]:
            return parts[index] if len(parts) > index else None

        return ParsedLayoutKey(
            period=token(1),
            times=token(2),
            seq=parse_int(token(3)),
        )

    @property
    def time_coordinate(self) -> Optional[str]:
        return self.element.get(constants.TIME_COORDINATE_ATTRIBUTE)

    def iter_valid_times(self) -> Iterator[ValidTimeInterval]:
        """
        Generate valid-time intervals in document order.

        Raises:
            MalformedTimestampError: If a start or end time cannot be parsed
        """
        start_els = list(descendants(self.element, constants.START_VALID_TIME_ELEMENT))
        end_els = list(descendants(self.element, constants.END_VALID_TIME_ELEMENT))

        if end_els and len(end_els) != len(start_els):
            logger.debug(
                f"Time layout {self.layout_key}: {len(start_els)} start times, "
                f"{len(end_els)} end times"
            )

        for i, start_el in enumerate(start_els):
            start_raw = start_el.text
            start_instant, start_offset = DateUtils.parse_with_offset(
                start_raw, constants.START_VALID_TIME_ELEMENT
            )

            if i < len(end_els):
                end_raw = end_els[i].text
                end_instant, end_offset = DateUtils.parse_with_offset(
                    end_raw, constants.END_VALID_TIME_ELEMENT
                )
                yield ValidTimeInterval(
                    start_instant=start_instant,
                    start_offset_seconds=start_offset,
                    start_raw=start_raw,
                    end_instant=end_instant,
                    end_offset_seconds=end_offset,
                    end_raw=end_raw,
                )
            else:
                yield ValidTimeInterval(
                    start_instant=start_instant,
                    start_offset_seconds=start_offset,
                    start_raw=start_raw,
                )

    @cached_property
    def valid_times(self) -> Tuple[ValidTimeInterval, ...]:
        return tuple(self.iter_valid_times())

    def __repr__(self) -> str:
        return f"DWMLTimeLayout(key={self.layout_key!r}, coordinate={self.time_coordinate!r})"
