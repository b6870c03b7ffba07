from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class EventTimeWindow:
    """
    Interval over DeviceEvent.happened_at, inclusive at both ends.

    A missing bound leaves that side open; with both bounds missing the
    window matches the full history of a device.
    """
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, happened_at: datetime) -> bool:
        if self.start is not None and happened_at < self.start:
            return False
        if self.end is not None and happened_at > self.end:
            return False
        return True
