"""Excess magnitude: how much fainter than the sky allows a body is.

A negative excess magnitude means the body should be visible to the naked
eye. This is a heuristic; it ignores the size of extended objects and the
observer's experience.
"""

from nakedeye.ephem.astro import angular_separation_rad, jd_to_calendar
from nakedeye.ephem.types import Body
from .context import SkyContext
from .extinction import airmass, extinction_per_airmass
from .limmag import limiting_magnitude_full, limiting_magnitude_sun

# Extinction per airmass at sea level
SEA_LEVEL_EXTINCTION = 0.2811


def limiting_magnitude_at(
    sky: SkyContext,
    jd: float,
    ra_rad: float,
    dec_rad: float,
    alt_rad: float,
) -> float:
    """Naked-eye limiting magnitude in the given direction at ``jd``."""
    sun = sky.position_fast(jd, Body.SUN)
    moon = sky.position_fast(jd, Body.MOON)
    year, month, _ = jd_to_calendar(jd)
    return limiting_magnitude_full(
        year=year,
        month=month,
        elevation_m=sky.site.elevation_m,
        lat_rad=sky.site.latitude_rad,
        sun_alt_rad=sun.alt_rad,
        sun_elong_rad=angular_separation_rad(ra_rad, dec_rad, sun.ra_rad, sun.dec_rad),
        moon_phase=moon.phase,
        moon_alt_rad=moon.alt_rad,
        moon_elong_rad=angular_separation_rad(ra_rad, dec_rad, moon.ra_rad, moon.dec_rad),
        obj_alt_rad=alt_rad,
    )


def limiting_magnitude_for_body(sky: SkyContext, jd: float, body: int) -> float:
    pos = sky.position(jd, body)
    return limiting_magnitude_at(sky, jd, pos.ra_rad, pos.dec_rad, pos.alt_rad)


def excess_magnitude(sky: SkyContext, jd: float, body: int) -> float:
    """Magnitude of ``body`` minus the limiting magnitude in its direction.

    Extinction is part of the limiting magnitude model, so the catalogue
    magnitude of the body is used as is.

    For ``Body.MOON`` the Moon lies at zero elongation from itself, so its
    own scattered light swamps the sky brightness and the result is a large
    positive number for any lit Moon. Use ``extincted_magnitude`` instead.
    """
    pos = sky.position(jd, body)
    return pos.magnitude - limiting_magnitude_at(sky, jd, pos.ra_rad, pos.dec_rad, pos.alt_rad)


def excess_magnitude_low_accuracy(sky: SkyContext, jd: float, body: int) -> float:
    """Cheaper excess magnitude from the Sun altitude alone.

    Ignores the Moon and the position of the body w.r.t. the Sun, and
    assumes sea-level extinction.
    """
    pos = sky.position(jd, body)
    sun = sky.position_fast(jd, Body.SUN)
    extincted = pos.magnitude + SEA_LEVEL_EXTINCTION * airmass(pos.alt_rad)
    return extincted - limiting_magnitude_sun(sun.alt_rad)


def extincted_magnitude(sky: SkyContext, jd: float, body: int) -> float:
    """Apparent magnitude of ``body`` after extinction at the site's elevation."""
    pos = sky.position(jd, body)
    return pos.magnitude + extinction_per_airmass(sky.site.elevation_m) * airmass(pos.alt_rad)
