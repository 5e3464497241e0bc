"""
Time layout data models.

Contains the valid-time interval and the decoded layout key.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any

from ..core.date_utils import DateUtils


@dataclass(frozen=True)
class ValidTimeInterval:
    """
    Applicability window of one forecast data point.

    Instants keep the offset written in the document; the offsets are also
    given in seconds east of UTC. End fields are None when the layout has no
    end-valid-time at the same position.
    """

    start_instant: datetime
    start_offset_seconds: int
    start_raw: str
    end_instant: Optional[datetime] = None
    end_offset_seconds: Optional[int] = None
    end_raw: Optional[str] = None

    @property
    def start_utc(self) -> datetime:
        return DateUtils.to_utc(self.start_instant)

    @property
    def end_utc(self) -> Optional[datetime]:
        if self.end_instant is None:
            return None
        return DateUtils.to_utc(self.end_instant)

    @property
    def has_end(self) -> bool:
        return self.end_instant is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "start": self.start_instant.isoformat(),
            "start_offset": self.start_offset_seconds,
            "start_raw": self.start_raw,
        }
        if self.has_end:
            data.update({
                "end": self.end_instant.isoformat(),
                "end_offset": self.end_offset_seconds,
                "end_raw": self.end_raw,
            })
        return data


@dataclass(frozen=True)
class ParsedLayoutKey:
    """
    Layout key decoded by the k-<period>-<times>-<seq> convention.

    Every field is None when the key is absent or too short; seq is None when
    its token is not integer-like.
    """

    period: Optional[str] = None
    times: Optional[str] = None
    seq: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.period is None and self.times is None and self.seq is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period,
            "times": self.times,
            "seq": self.seq,
        }
