from abc import ABC, abstractmethod
import math
from typing import Sequence

from nakedeye.errors import UnknownBodyError
from .astro import (
    J2000_JD,
    angular_separation_rad,
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    local_sidereal_time_rad,
    mean_obliquity_rad,
    wrap_two_pi,
)
from .comets import CometElements, comet_geocentric, comet_magnitude
from .orbits import days_since_epoch, earth_heliocentric, planet_heliocentric
from .types import ApparentPosition, Body, ObserverSite, comet_index, is_comet

SUN_MAGNITUDE = -26.74
AU_KM = 149597870.7


class PositionProvider(ABC):
    name: str

    @abstractmethod
    def position(self, jd: float, body: int, site: ObserverSite) -> ApparentPosition:
        raise NotImplementedError

    def position_fast(self, jd: float, body: int, site: ObserverSite) -> ApparentPosition:
        """Reduced-accuracy variant for use inside solvers; defaults to ``position``."""
        return self.position(jd, body, site)

    def comet_elements(self, index: int) -> CometElements:
        raise UnknownBodyError(f"{type(self).__name__} has no orbital elements for comet #{index}")


class LowPrecisionProvider(PositionProvider):
    """Mean-element positions for the Sun, Moon, planets and comets.

    Accuracy is of the order of a few arcminutes for the planets and a
    fraction of a degree for the Moon: enough for visibility estimates, not
    for astrometry. No nutation, aberration, parallax or refraction.

    The model is cheap already, so ``position_fast`` is the same computation
    as ``position``.
    """

    name = "low_precision"

    def __init__(self, comets: Sequence[CometElements] = ()):
        self._comets = tuple(comets)

    def comet_elements(self, index: int) -> CometElements:
        if not 0 <= index < len(self._comets):
            raise UnknownBodyError(f"No orbital elements for comet #{index}")
        return self._comets[index]

    def position(self, jd: float, body: int, site: ObserverSite) -> ApparentPosition:
        if is_comet(body):
            lon, lat, magnitude, phase, delta, r = self._comet(jd, self.comet_elements(comet_index(body)))
        elif body == Body.SUN:
            lon, lat, delta = _sun_ecliptic(jd)
            magnitude, phase, r = SUN_MAGNITUDE, 1.0, None
        elif body == Body.MOON:
            lon, lat, magnitude, phase, delta = _moon(jd)
            r = None
        elif body in _PLANETS:
            lon, lat, magnitude, phase, delta, r = _planet(jd, Body(body))
        else:
            raise UnknownBodyError(f"Unknown body id: {body}")

        eps = mean_obliquity_rad(jd)
        ra, dec = ecliptic_to_equatorial(lon, lat, eps)
        lst = local_sidereal_time_rad(jd, site.longitude_deg)
        alt, az = equatorial_to_horizontal(ra, dec, site.latitude_rad, lst)
        return ApparentPosition(
            ra_rad=ra,
            dec_rad=dec,
            alt_rad=alt,
            az_rad=az,
            magnitude=magnitude,
            ecl_lon_rad=lon,
            ecl_lat_rad=lat,
            obliquity_rad=eps,
            phase=phase,
            distance_au=delta,
            helio_distance_au=r,
        )

    @staticmethod
    def _comet(jd: float, elements: CometElements):
        r, lon, lat, delta = comet_geocentric(jd, elements)
        earth_r = math.sqrt(sum(c * c for c in earth_heliocentric(days_since_epoch(jd))))
        phase_angle = _phase_angle(r, delta, earth_r)
        return lon, lat, comet_magnitude(elements, r, delta), (1.0 + math.cos(phase_angle)) / 2.0, delta, r


_PLANETS = {
    Body.MERCURY: "mercury",
    Body.VENUS: "venus",
    Body.MARS: "mars",
    Body.JUPITER: "jupiter",
    Body.SATURN: "saturn",
    Body.URANUS: "uranus",
    Body.NEPTUNE: "neptune",
}


def _sun_ecliptic(jd: float) -> tuple[float, float, float]:
    n = jd - J2000_JD
    g = math.radians((357.528 + 0.9856003 * n) % 360.0)
    l = math.radians((280.460 + 0.9856474 * n) % 360.0)
    lam = l + math.radians(1.915) * math.sin(g) + math.radians(0.020) * math.sin(2 * g)
    dist = 1.00014 - 0.01671 * math.cos(g) - 0.00014 * math.cos(2 * g)
    return wrap_two_pi(lam), 0.0, dist


def _moon(jd: float) -> tuple[float, float, float, float, float]:
    n = jd - J2000_JD
    l = math.radians((218.316 + 13.176396 * n) % 360.0)
    m = math.radians((134.963 + 13.064993 * n) % 360.0)
    f = math.radians((93.272 + 13.229350 * n) % 360.0)
    lam = wrap_two_pi(l + math.radians(6.289) * math.sin(m))
    beta = math.radians(5.128) * math.sin(f)
    dist_km = 385001.0 - 20905.0 * math.cos(m)

    sun_lon, _, _ = _sun_ecliptic(jd)
    elong = angular_separation_rad(lam, beta, sun_lon, 0.0)
    illum = (1.0 - math.cos(elong)) / 2.0
    phase_angle_deg = 180.0 - math.degrees(elong)
    magnitude = -12.73 + 0.026 * abs(phase_angle_deg) + 4e-9 * phase_angle_deg**4
    return lam, beta, magnitude, illum, dist_km / AU_KM


# Meeus, Astronomical Algorithms, ch. 41: (V(1,0), coefficients of i, i^2, i^3)
_MAGNITUDE_LAWS = {
    Body.MERCURY: (-0.42, 0.0380, -0.000273, 0.000002),
    Body.VENUS: (-4.40, 0.0009, 0.000239, -0.00000065),
    Body.MARS: (-1.52, 0.016, 0.0, 0.0),
    Body.JUPITER: (-9.40, 0.005, 0.0, 0.0),
    Body.SATURN: (-8.88, 0.0, 0.0, 0.0),
    Body.URANUS: (-7.19, 0.0, 0.0, 0.0),
    Body.NEPTUNE: (-6.87, 0.0, 0.0, 0.0),
}


def _planet(jd: float, body: Body):
    d = days_since_epoch(jd)
    xh, yh, zh = planet_heliocentric(_PLANETS[body], d)
    xe, ye, ze = earth_heliocentric(d)
    xg = xh - xe
    yg = yh - ye
    zg = zh - ze
    r = math.sqrt(xh * xh + yh * yh + zh * zh)
    delta = math.sqrt(xg * xg + yg * yg + zg * zg)
    earth_r = math.sqrt(xe * xe + ye * ye + ze * ze)
    lon = wrap_two_pi(math.atan2(yg, xg))
    lat = math.atan2(zg, math.sqrt(xg * xg + yg * yg))

    phase_angle = _phase_angle(r, delta, earth_r)
    i = math.degrees(phase_angle)
    v0, c1, c2, c3 = _MAGNITUDE_LAWS[body]
    magnitude = v0 + 5.0 * math.log10(r * delta) + c1 * i + c2 * i**2 + c3 * i**3
    return lon, lat, magnitude, (1.0 + math.cos(phase_angle)) / 2.0, delta, r


def _phase_angle(r: float, delta: float, earth_r: float) -> float:
    cos_i = (r * r + delta * delta - earth_r * earth_r) / (2.0 * r * delta)
    return math.acos(max(-1.0, min(1.0, cos_i)))
