"""
Business Calendar Value Objects

Projects a raw job duration onto the shop's recurring daily work window so
the estimated completion never lands outside opening hours.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class BusinessHours:
    """
    Daily work window [start_hour, end_hour) applied every calendar day.

    Arithmetic happens in the wall-clock time of whatever tzinfo the
    instants carry, so naive and timezone-aware datetimes both work.
    """

    start_hour: int = 10
    end_hour: int = 19

    def __post_init__(self):
        """Validate business hours constraints."""
        if not 0 <= self.start_hour < 24 or not 0 < self.end_hour <= 24:
            raise ValueError("Business hours must fall within a single day")
        if self.end_hour <= self.start_hour:
            raise ValueError("End hour must be after start hour")

    @property
    def window_minutes(self) -> int:
        """Working minutes in one day."""
        return (self.end_hour - self.start_hour) * 60

    def window_start(self, instant: datetime) -> datetime:
        """Opening time on the calendar day of ``instant``."""
        midnight = instant.replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight + timedelta(hours=self.start_hour)

    def window_end(self, instant: datetime) -> datetime:
        """Closing time on the calendar day of ``instant``."""
        midnight = instant.replace(hour=0, minute=0, second=0, microsecond=0)
        return midnight + timedelta(hours=self.end_hour)

    def is_within_hours(self, instant: datetime) -> bool:
        """
        Check if an instant falls inside the work window.

        Args:
            instant: Datetime to check

        Returns:
            True if start <= instant < end on that day
        """
        return self.window_start(instant) <= instant < self.window_end(instant)

    def align(self, instant: datetime) -> datetime:
        """
        Snap an instant forward to the next moment the shop is open.

        Before opening snaps to today's opening; at or after closing snaps to
        tomorrow's opening; inside the window the instant is returned as is.
        """
        opening = self.window_start(instant)
        if instant < opening:
            return opening
        if instant >= self.window_end(instant):
            return self.window_start(opening + timedelta(days=1))
        return instant

    def project(self, start: datetime, duration_hours: float) -> datetime:
        """
        Compute when a job started at ``start`` finishes in working time.

        The duration is rounded to whole minutes and consumed day by day
        against the remaining window. A job that uses up a day's window
        exactly is reported at the next opening.

        Args:
            start: When work is requested to begin
            duration_hours: Working hours the job needs

        Returns:
            Completion instant inside the work window
        """
        current = self.align(start)
        remaining = timedelta(minutes=round(max(duration_hours, 0.0) * 60))

        while remaining > timedelta(0):
            available = self.window_end(current) - current
            if remaining < available:
                return current + remaining
            remaining -= available
            current = self.window_start(current + timedelta(days=1))

        return current

    def __str__(self) -> str:
        return f"{self.start_hour:02d}:00 - {self.end_hour:02d}:00"
