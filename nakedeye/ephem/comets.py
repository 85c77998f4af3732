from dataclasses import dataclass
import math

from .orbits import GAUSS_K, days_since_epoch, earth_heliocentric, orbit_to_ecliptic, solve_kepler

_PARABOLIC_TOLERANCE = 1e-8


@dataclass(frozen=True)
class CometElements:
    """Osculating elements of a comet or asteroid (J2000 ecliptic).

    ``abs_mag`` and ``slope`` are the H and K of the magnitude law
    ``m = H + 5 log10(delta) + 2.5 K log10(r)``.
    """

    name: str
    perihelion_jd: float
    q_au: float
    e: float
    i_deg: float
    peri_deg: float
    node_deg: float
    abs_mag: float
    slope: float


def comet_heliocentric(jd: float, elements: CometElements) -> tuple[float, float, float]:
    dt = jd - elements.perihelion_jd
    q = elements.q_au
    e = elements.e

    if abs(e - 1.0) < _PARABOLIC_TOLERANCE:
        # Barker's equation
        w = 3.0 * GAUSS_K / math.sqrt(2.0 * q**3) * dt
        y = (w / 2.0 + math.sqrt(w * w / 4.0 + 1.0)) ** (1.0 / 3.0)
        s = y - 1.0 / y
        v = 2.0 * math.atan(s)
        r = q * (1.0 + s * s)
        xv = r * math.cos(v)
        yv = r * math.sin(v)
    elif e < 1.0:
        a = q / (1.0 - e)
        m = GAUSS_K * dt / a**1.5
        e_anom = solve_kepler(math.remainder(m, 2.0 * math.pi), e)
        xv = a * (math.cos(e_anom) - e)
        yv = a * math.sqrt(1.0 - e * e) * math.sin(e_anom)
    else:
        a = q / (e - 1.0)
        m = GAUSS_K * dt / a**1.5
        h = math.asinh(m / e)
        for _ in range(100):
            delta = (e * math.sinh(h) - h - m) / (e * math.cosh(h) - 1.0)
            h -= delta
            if abs(delta) < 1e-12:
                break
        xv = a * (e - math.cosh(h))
        yv = a * math.sqrt(e * e - 1.0) * math.sinh(h)

    return orbit_to_ecliptic(
        xv,
        yv,
        math.radians(elements.node_deg),
        math.radians(elements.i_deg),
        math.radians(elements.peri_deg),
    )


def comet_geocentric(jd: float, elements: CometElements) -> tuple[float, float, float, float]:
    """Heliocentric distance, geocentric ecliptic lon/lat (rad) and geocentric distance."""
    xh, yh, zh = comet_heliocentric(jd, elements)
    xe, ye, ze = earth_heliocentric(days_since_epoch(jd))
    xg = xh - xe
    yg = yh - ye
    zg = zh - ze
    r = math.sqrt(xh * xh + yh * yh + zh * zh)
    delta = math.sqrt(xg * xg + yg * yg + zg * zg)
    lon = math.atan2(yg, xg) % (2.0 * math.pi)
    lat = math.atan2(zg, math.sqrt(xg * xg + yg * yg))
    return r, lon, lat, delta


def comet_magnitude(elements: CometElements, r_au: float, delta_au: float) -> float:
    return elements.abs_mag + 5.0 * math.log10(delta_au) + 2.5 * elements.slope * math.log10(r_au)
