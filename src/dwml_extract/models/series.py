"""
Series entry models.

A series pairs the i-th raw value of a parameter with the i-th valid time of
its time layout.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..core.parsing import finite_or_none
from .time_layout import ValidTimeInterval


@dataclass(frozen=True)
class IconSeriesEntry:
    """Condition icon URL valid for one interval."""

    time: ValidTimeInterval
    url: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time.to_dict(), "url": self.url}


@dataclass(frozen=True)
class ValueSeriesEntry:
    """Numeric value valid for one interval (NaN when unparsable)."""

    time: ValidTimeInterval
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"time": self.time.to_dict(), "value": finite_or_none(self.value)}
