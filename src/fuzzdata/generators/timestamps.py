"""Random calendar timestamps.

Each field of a :class:`TimeRecord` is drawn independently.  Nothing ties the
fields together: February 31st, a weekday that does not match the date and a
day-of-year unrelated to the month are all legitimate outputs, which is what
makes these records useful against date parsers.
"""

from __future__ import annotations

import calendar
import time
from dataclasses import dataclass

from fuzzdata.sampling import UniformSampler, get_sampler

__all__ = ["TimeRecord", "gen_time", "YEAR_RANGE"]

YEAR_RANGE: tuple[int, int] = (1900, 9999)


@dataclass(slots=True, frozen=True)
class TimeRecord:
    """Broken-down time; ``month`` is 1-12 and ``weekday`` 0-6 with Monday = 0."""

    second: int
    minute: int
    hour: int
    monthday: int
    month: int
    year: int
    weekday: int
    yearday: int
    is_dst: bool
    tzname: str = "GMT"
    utc_offset: int = 0

    def __str__(self) -> str:
        return (
            f"{calendar.day_abbr[self.weekday]} {calendar.month_abbr[self.month]} "
            f"{self.monthday:02d} {self.hour:02d}:{self.minute:02d}:{self.second:02d} "
            f"{self.year}"
        )

    def to_struct_time(self) -> time.struct_time:
        return time.struct_time(
            (
                self.year,
                self.month,
                self.monthday,
                self.hour,
                self.minute,
                self.second,
                self.weekday,
                self.yearday,
                int(self.is_dst),
            )
        )


def gen_time(*, sampler: UniformSampler | None = None) -> TimeRecord:
    """Return a :class:`TimeRecord`, e.g. ``Mon Sep 22 03:43:47 2701``."""

    sampler = sampler or get_sampler()
    return TimeRecord(
        second=sampler.in_range(0, 59),
        minute=sampler.in_range(0, 59),
        hour=sampler.in_range(0, 23),
        monthday=sampler.in_range(1, 31),
        month=sampler.in_range(1, 12),
        year=sampler.in_range(*YEAR_RANGE),
        weekday=sampler.in_range(0, 6),
        yearday=sampler.in_range(1, 366),
        is_dst=sampler.choice((True, False)),
    )
