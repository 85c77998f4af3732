from dataclasses import dataclass
from typing import Optional

from nakedeye.ephem.astro import ut_day_start
from nakedeye.ephem.types import RiseSet
from nakedeye.util.format import format_hours


@dataclass(frozen=True)
class WindowOptions:
    include_horizon: bool = False
    today_only: bool = False


@dataclass(frozen=True)
class VisibilityWindow:
    """Interval of one night in which a body can be seen.

    ``begin`` and ``end`` are noon-centered local hours: -12..+12, negative
    values falling in the evening before local midnight.
    """

    begin: float
    end: float

    @property
    def clock_begin(self) -> float:
        return self.begin % 24.0

    @property
    def clock_end(self) -> float:
        return self.end % 24.0

    @property
    def duration_hours(self) -> float:
        return self.end - self.begin

    def to_julian_days(self, jd: float, tz_hours: float) -> tuple[float, float]:
        """JDs of begin and end for the night that ends on the date of ``jd``.

        Matches windows computed with ``WindowOptions(today_only=True)``,
        where the morning events belong to the date of ``jd``.
        """
        # Negative (evening) hours land on the previous calendar day
        start = ut_day_start(jd)
        return (
            start + (self.begin - tz_hours) / 24.0,
            start + (self.end - tz_hours) / 24.0,
        )

    def describe(self) -> str:
        return f"{format_hours(self.clock_begin)} - {format_hours(self.clock_end)}"


@dataclass(frozen=True)
class NightEvents:
    """Raw threshold crossings behind a visibility window.

    Each entry pairs the evening set with the following (or, in today-only
    mode, the same day's) rise, transit and transit altitude.
    """

    sun_twilight: RiseSet
    body_threshold: RiseSet
    sun_horizon: Optional[RiseSet] = None
    body_horizon: Optional[RiseSet] = None


@dataclass(frozen=True)
class NightVisibility:
    window: Optional[VisibilityWindow]
    events: NightEvents

    @property
    def visible(self) -> bool:
        return self.window is not None


@dataclass(frozen=True)
class BestExcess:
    jd: float
    excess_magnitude: float
    converged: bool
