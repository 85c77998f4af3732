import logging
import math

from nakedeye.ephem.astro import (
    calendar_to_jd,
    day_of_year_to_month_day,
    ecliptic_to_equatorial,
    jd_to_calendar,
    mean_obliquity_rad,
    ut_day_start,
    wrap_pi,
)
from nakedeye.ephem.comets import comet_geocentric, comet_magnitude
from nakedeye.ephem.types import Body, Crossing, body_name
from nakedeye.solver import minimum_solver, root_solver
from nakedeye.util.format import format_hours, rad_to_hms
from .context import SkyContext
from .excess import excess_magnitude
from .types import BestExcess, WindowOptions
from .window import normalize_hours, planet_visibility_tonight

logger = logging.getLogger(__name__)

# Daily motion of the mean Sun, rad/day
_SUN_DAILY_MOTION = 0.017202791805
# Day of year on which the Sun is at RA 0h, plus the offset of opposition
_OPPOSITION_DOY_OFFSET = 266
_DATE_SEARCH_DAYS = 10.0
_DATE_TOLERANCE_DAYS = 0.1

_BEST_EXCESS_TOLERANCE_DAYS = 1e-3

_DARK_SUN_ALT_DEG = -6.0
_MIN_RELAXED_SUN_ALT_DEG = -0.25
_MAX_RELAXATIONS = 16


def transit_altitude(lat_rad: float, dec_rad: float) -> float:
    """Altitude of an object with declination ``dec_rad`` at transit."""
    s = math.sin(lat_rad) * math.sin(dec_rad) + math.cos(lat_rad) * math.cos(dec_rad)
    return math.asin(max(-1.0, min(1.0, s)))


def best_excess_magnitude(sky: SkyContext, jd: float, body: int) -> BestExcess | None:
    """Moment of the night of ``jd`` at which ``body`` is most easily seen.

    Minimises the excess magnitude between the moments the body and the Sun
    cross the horizon. Returns None when the body is not above the horizon
    at night.
    """
    night = planet_visibility_tonight(sky, jd, body, 0.0, 0.0, WindowOptions(today_only=True))
    if night.window is None:
        logger.debug("%s not above the horizon at night on JD %.5f", body_name(body), jd)
        return None

    jd1, jd2 = night.window.to_julian_days(jd, sky.site.tz_hours)

    def objective(t: float) -> float:
        return excess_magnitude(sky, t, body)

    result = minimum_solver(objective, jd1, (jd1 + jd2) / 2.0, jd2, _BEST_EXCESS_TOLERANCE_DAYS)
    if not result.converged:
        logger.warning(
            "Best excess magnitude of %s did not converge after %d evaluations: %s",
            body_name(body),
            result.iterations,
            result.message,
        )
    logger.debug(
        "%s best at JD %.5f, excess magnitude %.2f (%d evaluations)",
        body_name(body),
        result.x,
        result.fx,
        result.iterations,
    )
    return BestExcess(jd=result.x, excess_magnitude=result.fx, converged=result.converged)


def best_visibility_moment(sky: SkyContext, jd: float, body: int) -> float:
    """Estimate the JD at which ``body`` is best placed on the day of ``jd``.

    This is the transit when the sky is dark by then. Otherwise the
    twilight nearest to the transit is used, with the Sun threshold
    relaxed until the body stands high enough at that twilight.
    """
    tz = sky.site.tz_hours
    day_start = ut_day_start(jd)
    transit_hour = sky.riset(jd, body, 0.0).transit
    best = day_start + (transit_hour - tz) / 24.0

    if math.degrees(sky.position_fast(best, Body.SUN).alt_rad) < _DARK_SUN_ALT_DEG:
        return best

    sun_alt = 2.0 * _DARK_SUN_ALT_DEG
    for _ in range(_MAX_RELAXATIONS):
        if sun_alt >= _MIN_RELAXED_SUN_ALT_DEG:
            break
        sun_alt /= 2.0
        sun = sky.riset(jd, Body.SUN, sun_alt)
        if sun.crossing is Crossing.NEVER_ABOVE:
            return best
        if sun.crossing is Crossing.ALWAYS_ABOVE:
            continue

        if abs(normalize_hours(transit_hour - sun.set)) < abs(normalize_hours(transit_hour - sun.rise)):
            twilight = sun.set
        else:
            twilight = sun.rise
        best = day_start + (twilight - tz) / 24.0
        body_alt = math.degrees(sky.position(best, body).alt_rad)
        logger.debug(
            "%s at %s (Sun %.3f deg): altitude %.2f deg",
            body_name(body),
            format_hours(twilight),
            sun_alt,
            body_alt,
        )
        if body_alt > -sun_alt / 2.0:
            break

    return best


def best_observing_date(sky: SkyContext, year: int, ra_rad: float, accurate: bool = False) -> tuple[int, int]:
    """(month, day) in ``year`` on which a fixed object at ``ra_rad`` is in opposition.

    The fast estimate assumes a uniformly moving Sun. With ``accurate`` the
    date is refined against the Sun's actual right ascension.
    """
    doy = (int(math.floor(ra_rad / _SUN_DAILY_MOTION + 0.5)) + _OPPOSITION_DOY_OFFSET + 3660) % 366
    if not accurate:
        return day_of_year_to_month_day(year, doy)

    jd0 = calendar_to_jd(year, 1, 1.0) + doy - 1

    def elongation_from_opposition(t: float) -> float:
        return wrap_pi(ra_rad - sky.position_fast(t, Body.SUN).ra_rad - math.pi)

    result = root_solver(
        elongation_from_opposition,
        jd0 - _DATE_SEARCH_DAYS,
        jd0 + _DATE_SEARCH_DAYS,
        _DATE_TOLERANCE_DAYS,
    )
    if not result.converged:
        logger.warning("Opposition date for RA %s not refined: %s", rad_to_hms(ra_rad), result.message)
        return day_of_year_to_month_day(year, doy)

    _, month, day = jd_to_calendar(ut_day_start(result.x + 0.5))
    logger.debug("RA %s in opposition on JD %.2f", rad_to_hms(ra_rad), result.x)
    return month, int(round(day))


def comet_invisible(
    sky: SkyContext,
    jd: float,
    comet_index: int,
    mag_limit: float,
    min_alt_deg: float,
) -> bool:
    """Quick rejection of comets that cannot be seen on ``jd``.

    True when the comet is fainter than ``mag_limit``, or never gets higher
    than ``min_alt_deg`` at the site. Only the magnitude is computed for
    faint comets.
    """
    elements = sky.provider.comet_elements(comet_index)
    r, lon, lat, delta = comet_geocentric(jd, elements)
    if comet_magnitude(elements, r, delta) > mag_limit:
        return True

    _, dec = ecliptic_to_equatorial(lon, lat, mean_obliquity_rad(jd))
    return math.degrees(transit_altitude(sky.site.latitude_rad, dec)) < min_alt_deg
