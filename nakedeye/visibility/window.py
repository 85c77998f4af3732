from enum import Enum
import logging
import math

from nakedeye.ephem.types import Body, Crossing, RiseSet, body_name
from .context import SkyContext
from .types import NightEvents, NightVisibility, VisibilityWindow, WindowOptions

logger = logging.getLogger(__name__)

# Dark interval of a polar night, noon to noon
_POLAR_NIGHT = (-12.0, 12.0)


class _Event(Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    BODY_RISE = "body_rise"
    BODY_SET = "body_set"


# At equal times, events that end visibility come first
_TIE_ORDER = {_Event.SUNRISE: 0, _Event.BODY_SET: 1, _Event.SUNSET: 2, _Event.BODY_RISE: 3}


def normalize_hours(hours: float) -> float:
    """Map a clock time onto the noon-centered range [-12, 12)."""
    return hours - 24.0 * math.floor((hours + 12.0) / 24.0)


def planet_visibility_tonight(
    sky: SkyContext,
    jd: float,
    body: int,
    sun_alt_deg: float,
    body_alt_deg: float,
    options: WindowOptions = WindowOptions(),
) -> NightVisibility:
    """When is ``body`` visible in the night following ``jd``?

    The body counts as visible while it is above ``body_alt_deg`` and the
    Sun is below ``sun_alt_deg``. Set times are taken from the day of
    ``jd``, rise times from the next day (or from the same day with
    ``options.today_only``). ``options.include_horizon`` adds the crossings
    of the true horizon to the returned events.
    """
    events = NightEvents(
        sun_twilight=_night_riset(sky, jd, Body.SUN, sun_alt_deg, options.today_only),
        body_threshold=_night_riset(sky, jd, body, body_alt_deg, options.today_only),
        sun_horizon=_night_riset(sky, jd, Body.SUN, 0.0, options.today_only) if options.include_horizon else None,
        body_horizon=_night_riset(sky, jd, body, 0.0, options.today_only) if options.include_horizon else None,
    )
    window = _classify(events.sun_twilight, events.body_threshold, body_alt_deg)
    logger.debug(
        "%s on JD %.5f: %s",
        body_name(body),
        jd,
        window.describe() if window else "not visible",
    )
    return NightVisibility(window=window, events=events)


def visibility_tonight(
    sky: SkyContext,
    jd: float,
    body: int,
    options: WindowOptions = WindowOptions(),
) -> NightVisibility:
    """``planet_visibility_tonight`` with the thresholds configured on ``sky``."""
    return planet_visibility_tonight(
        sky,
        jd,
        body,
        sky.twilight_sun_altitude_deg,
        sky.min_body_altitude_deg,
        options,
    )


def _night_riset(sky: SkyContext, jd: float, body: int, altitude_deg: float, today_only: bool) -> RiseSet:
    today = sky.riset(jd, body, altitude_deg)
    if today_only:
        return today

    tomorrow = sky.riset(jd + 1.0, body, altitude_deg)
    crossing = today.crossing if not today.crosses else tomorrow.crossing
    degenerate = crossing is not Crossing.NORMAL
    return RiseSet(
        rise=0.0 if degenerate else tomorrow.rise,
        transit=tomorrow.transit,
        set=0.0 if degenerate else today.set,
        rise_az_rad=tomorrow.rise_az_rad,
        transit_alt_rad=tomorrow.transit_alt_rad,
        set_az_rad=today.set_az_rad,
        crossing=crossing,
    )


def _classify(sun: RiseSet, body: RiseSet, body_alt_deg: float) -> VisibilityWindow | None:
    if sun.crossing is Crossing.ALWAYS_ABOVE:
        return None
    if sun.crossing is Crossing.NEVER_ABOVE:
        dusk, dawn = _POLAR_NIGHT
    else:
        dusk, dawn = normalize_hours(sun.set), normalize_hours(sun.rise)

    if not body.crosses:
        if math.degrees(body.transit_alt_rad) > body_alt_deg:
            return VisibilityWindow(begin=dusk, end=dawn)
        return None

    rise = normalize_hours(body.rise)
    set_ = normalize_hours(body.set)
    events = sorted(
        [
            (dawn, _Event.SUNRISE),
            (dusk, _Event.SUNSET),
            (rise, _Event.BODY_RISE),
            (set_, _Event.BODY_SET),
        ],
        key=lambda e: (e[0], _TIE_ORDER[e[1]]),
    )

    # State at local noon
    sun_up = True
    body_up = rise >= 0.0 and rise > set_
    visible = body_up and not sun_up

    begin = end = None
    for t, event in events:
        if event is _Event.SUNRISE:
            sun_up = True
        elif event is _Event.SUNSET:
            sun_up = False
        elif event is _Event.BODY_RISE:
            body_up = True
        else:
            body_up = False

        now_visible = body_up and not sun_up
        if now_visible and not visible and begin is None:
            begin = t
        if visible and not now_visible and end is None:
            end = t
        visible = now_visible

    if begin is None or end is None or end <= begin:
        return None
    return VisibilityWindow(begin=begin, end=end)
