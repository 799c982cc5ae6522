"""Clock helpers for services that need the current local time."""

from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]


def zoned_clock(timezone_name: str) -> Clock:
    """Return a clock reading the current time in the given timezone."""
    tz = ZoneInfo(timezone_name)

    def now() -> datetime:
        return datetime.now(tz=tz)

    return now
