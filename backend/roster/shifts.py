"""Weekly-recurring shifts and the on-duty predicate."""

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum
from typing import Callable, Iterable

from utils.time import format_wall_clock, local_now, parse_wall_clock


class Day(str, Enum):
    """Days of the week, in ISO order."""
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    def next(self) -> "Day":
        """The following day, wrapping SUNDAY to MONDAY."""
        days = list(Day)
        return days[(days.index(self) + 1) % len(days)]

    @classmethod
    def from_date(cls, value: datetime) -> "Day":
        return list(cls)[value.weekday()]

    @classmethod
    def parse(cls, value) -> "Day":
        """Parse a day from "MONDAY", "monday", "Mon" and similar."""
        if isinstance(value, Day):
            return value
        key = str(value).strip().upper()
        for day in cls:
            if day.value == key or day.value[:3] == key:
                return day
        raise ValueError(f"Invalid day of week: {value!r}")


@dataclass(frozen=True)
class Instant:
    """A point in the repeating week: day of week plus wall-clock time."""
    day: Day
    time: time

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        return cls(day=Day.from_date(value), time=value.time().replace(tzinfo=None))

    def __str__(self) -> str:
        return f"{self.day.value} {format_wall_clock(self.time)}"


@dataclass(frozen=True)
class Shift:
    """
    A weekly-recurring interval on one day of the week.

    A shift whose end is at or before its start (including an end of exactly
    00:00) runs past midnight into the next day. Both ends are inclusive.
    """
    day: Day
    start: time
    end: time

    @classmethod
    def parse(cls, day, start, end) -> "Shift":
        return cls(day=Day.parse(day), start=parse_wall_clock(start), end=parse_wall_clock(end))

    @property
    def wraps_midnight(self) -> bool:
        return self.end <= self.start

    @property
    def hours(self) -> int:
        """Whole-hour duration, using hour-of-day only."""
        start_hour = self.start.hour
        end_hour = self.end.hour
        if end_hour >= start_hour:
            return end_hour - start_hour
        return (24 - start_hour) + end_hour

    def covers(self, instant: Instant) -> bool:
        """Check if this shift includes the given instant."""
        if self.wraps_midnight:
            if instant.day == self.day and instant.time >= self.start:
                return True
            return instant.day == self.day.next() and instant.time <= self.end

        return instant.day == self.day and self.start <= instant.time <= self.end

    def to_dict(self) -> dict:
        return {
            "day_of_week": self.day.value,
            "start_time": format_wall_clock(self.start),
            "end_time": format_wall_clock(self.end),
        }

    def __str__(self) -> str:
        return f"{self.day.value} {format_wall_clock(self.start)} - {format_wall_clock(self.end)}"


def covers(shift: Shift, instant: Instant) -> bool:
    return shift.covers(instant)


def is_on_duty(shifts: Iterable[Shift], instant: Instant) -> bool:
    """True if at least one shift covers the instant. No shifts means off duty."""
    return any(shift.covers(instant) for shift in shifts)


def current_instant(clock: Callable[[], datetime] = local_now) -> Instant:
    """The current point in the week, read from the local wall clock."""
    return Instant.from_datetime(clock())
