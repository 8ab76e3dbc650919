"""Clock capability.

The validator never reads wall-clock time directly. It calls an injected clock:
any zero-argument callable returning today's ``datetime.date``. That includes
``datetime.date.today`` itself, ``SystemClock`` and ``FixedClock``.
"""

from datetime import date, datetime
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flightcheck.core.errors import ConfigError


@runtime_checkable
class Clock(Protocol):
    """Source of the current calendar date."""

    def __call__(self) -> date: ...


class SystemClock:
    """Reads today's date from the system clock.

    Args:
        timezone: IANA zone name. None uses the machine's local zone.
    """

    def __init__(self, timezone: str | None = None):
        self.timezone = timezone
        if timezone is None:
            self._tz = None
        else:
            try:
                self._tz = ZoneInfo(timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigError(f"Unknown timezone '{timezone}'") from e

    def __call__(self) -> date:
        if self._tz is None:
            return date.today()
        return datetime.now(self._tz).date()

    def __repr__(self) -> str:
        return f"SystemClock(timezone={self.timezone!r})"


class FixedClock:
    """Always reports the same date. Use in tests and replays."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def __repr__(self) -> str:
        return f"FixedClock({self.today.isoformat()})"
