"""Time window builder for provider ``from``/``to`` query parameters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


def format_minute(moment: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM`` in UTC, the precision the provider accepts."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M")


@dataclass(frozen=True)
class TimeWindow:
    """A closed time range for windowed provider queries.

    Usage:
        TimeWindow.last(90)  # the trailing 90 minutes
        TimeWindow(start, end).to_params()  # [("from", ...), ("to", ...)]
    """

    start: datetime
    end: datetime

    @classmethod
    def last(cls, minutes: float, now: datetime | None = None) -> TimeWindow:
        """Window ending at *now* and spanning the preceding *minutes*."""
        end = now if now is not None else datetime.now(timezone.utc)
        return cls(start=end - timedelta(minutes=minutes), end=end)

    def to_params(self) -> list[tuple[str, str]]:
        return [("from", format_minute(self.start)), ("to", format_minute(self.end))]
