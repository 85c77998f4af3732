"""Limiting magnitude of the naked eye against a bright sky.

Port of the sky-brightness and vision model of B.E. Schaefer (Sky &
Telescope, May 1998, p. 57). The numeric constants are empirical
calibration values and are kept exactly as published.
"""

from enum import IntEnum
import math

import numpy as np


class Band(IntEnum):
    U = 0
    B = 1
    V = 2
    R = 3
    I = 4


# Per-band tables, indexed by Band
WAVELENGTH_UM = np.array([0.365, 0.44, 0.55, 0.7, 0.9])
MOON_ZERO_POINT = np.array([-10.93, -10.45, -11.05, -11.90, -12.70])
OZONE = np.array([0.000, 0.000, 0.031, 0.008, 0.000])
WATER_VAPOUR = np.array([0.074, 0.045, 0.031, 0.020, 0.015])
DARK_SKY = np.array([8.0e-14, 7.0e-14, 1.0e-13, 1.0e-13, 3.0e-13])
MOON_COLOUR = np.array([1.36, 0.91, 0.00, -0.76, -1.17])
SUN_MAGNITUDE = np.array([-25.96, -26.09, -26.74, -27.26, -27.55])

HUMIDITY_PCT = 50.0
TEMPERATURE_C = 10.0
SNELLEN_RATIO = 1.0

# Sky brightness (V) separating the scotopic and photopic regimes, nanolamberts
REGIME_BOUNDARY_NL = 1500.0

# Smallest elongation used, keeps the scattering functions finite
_MIN_ELONGATION_DEG = 1e-6


def limiting_magnitude_full(
    *,
    year: int,
    month: int,
    elevation_m: float,
    lat_rad: float,
    sun_alt_rad: float,
    sun_elong_rad: float,
    moon_phase: float,
    moon_alt_rad: float,
    moon_elong_rad: float,
    obj_alt_rad: float,
) -> float:
    """Visual limiting magnitude for an object, given the Sun, the Moon and the atmosphere.

    Args:
        year: year of observation (solar-cycle modulation of the night sky).
        month: month of observation (crude solar right ascension).
        elevation_m: observer elevation above sea level.
        lat_rad: observer latitude.
        sun_alt_rad: altitude of the Sun.
        sun_elong_rad: elongation object - Sun.
        moon_phase: illuminated fraction of the Moon (0 = new).
        moon_alt_rad: altitude of the Moon.
        moon_elong_rad: elongation object - Moon.
        obj_alt_rad: altitude of the object.
    """
    moon_phase_angle = (1.0 - moon_phase) * 180.0
    moon_zenith = 90.0 - math.degrees(moon_alt_rad)
    moon_elong = max(math.degrees(moon_elong_rad), _MIN_ELONGATION_DEG)
    sun_zenith = 90.0 - math.degrees(sun_alt_rad)
    sun_elong = max(math.degrees(sun_elong_rad), _MIN_ELONGATION_DEG)
    lat_deg = math.degrees(lat_rad)
    zenith = 90.0 - math.degrees(obj_alt_rad)

    k, dm = _extinction(elevation_m, lat_deg, month, math.radians(zenith))

    zz = math.radians(zenith)
    x = _sky_airmass(zenith)
    xs = 40.0 if sun_zenith > 90.0 else _sky_airmass(sun_zenith)
    faint = 1.0 - 10.0 ** (-0.4 * k * x)

    # Dark night sky
    bn = DARK_SKY * (1.0 + 0.3 * math.cos(6.283 * (year - 1992) / 11.0))
    bn = bn * (0.4 + 0.6 / math.sqrt(1.0 - 0.96 * math.sin(zz) ** 2))
    bn = bn * 10.0 ** (-0.4 * k * x)

    # Twilight
    sun_alt_deg = 90.0 - sun_zenith
    bt = 10.0 ** (-0.4 * (SUN_MAGNITUDE - MOON_ZERO_POINT + 32.5 - sun_alt_deg - (zenith / (360.0 * k))))
    bt = bt * (100.0 / sun_elong) * faint

    # Daylight
    c4 = 10.0 ** (-0.4 * k * xs)
    bd = 10.0 ** (-0.4 * (SUN_MAGNITUDE - MOON_ZERO_POINT + 43.27))
    bd = bd * faint * (_scattering(sun_elong) * c4 + 440000.0 * (1.0 - c4))

    # Daylight only where it is dimmer than the twilight term, keeps the model continuous
    b = bn + np.where(bd < bt, bd, bt)

    if moon_zenith < 90.0:
        xm = _sky_airmass(moon_zenith)
        moon_mag = -12.73 + 0.026 * abs(moon_phase_angle) + 4e-9 * moon_phase_angle**4 + MOON_COLOUR
        c3 = 10.0 ** (-0.4 * k * xm)
        bm = 10.0 ** (-0.4 * (moon_mag - MOON_ZERO_POINT + 43.27))
        bm = bm * faint * (_scattering(moon_elong) * c3 + 440000.0 * (1.0 - c3))
        b = b + bm

    b = b * 1e12  # ergs -> picoergs
    return _visual_limit(float(b[Band.V]), float(dm[Band.V]))


def limiting_magnitude_sun(sun_alt_rad: float) -> float:
    """Limiting magnitude from the altitude of the Sun alone.

    Precomputed form of :func:`limiting_magnitude_full` for an object in the
    zenith, no Moon, humidity 50%, T = 10 C, latitude 45 deg, Snellen ratio 1.
    """
    dm = 0.285667465769191  # extinction
    bn = 7.686577723230466e-14  # dark night sky, no solar cycle, zenith
    bt = 10.0 ** (-0.4 * (-26.74 + 11.05 + 32.5 - math.degrees(sun_alt_rad))) * 0.12852345982053
    bd = 9.456022312552874e-7
    bl = 1e12 * (bn + min(bd, bt)) / 1.11e-3
    return _threshold_magnitude(bl) - dm


def _extinction(
    elevation_m: float,
    lat_deg: float,
    month: int,
    zz: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Extinction coefficients per band and total extinction along the line of sight."""
    lt = math.radians(lat_deg)
    ra = math.radians((month - 3) * 30)  # rough solar right ascension
    hemisphere = math.copysign(1.0, lat_deg)

    xg = 1.0 / (math.cos(zz) + 0.0286 * math.exp(-10.5 * math.cos(zz)))  # gas
    xa = 1.0 / (math.cos(zz) + 0.0123 * math.exp(-24.5 * math.cos(zz)))  # aerosol
    xo = 1.0 / math.sqrt(1.0 - (math.sin(zz) / (1.0 + (20.0 / 6378.0))) ** 2)  # ozone

    kr = 0.1066 * math.exp(-elevation_m / 8200.0) * (WAVELENGTH_UM / 0.55) ** (-4)
    ka = 0.1 * (WAVELENGTH_UM / 0.55) ** (-1.3) * math.exp(-elevation_m / 1500.0)
    ka = ka * (1.0 - 0.32 / math.log(HUMIDITY_PCT / 100.0)) ** 1.33 * (1.0 + 0.33 * hemisphere * math.sin(ra))
    ko = OZONE * (3.0 + 0.4 * (lt * math.cos(ra) - math.cos(3 * lt))) / 3.0
    kw = (
        WATER_VAPOUR
        * 0.94
        * (HUMIDITY_PCT / 100.0)
        * math.exp(TEMPERATURE_C / 15.0)
        * math.exp(-elevation_m / 8200.0)
    )
    k = kr + ka + ko + kw
    dm = kr * xg + ka * xa + ko * xo + kw * xg
    return k, dm


def _sky_airmass(zenith_deg: float) -> float:
    cz = math.cos(math.radians(zenith_deg))
    return 1.0 / (cz + 0.025 * math.exp(-11 * cz))


def _scattering(elong_deg: float) -> float:
    f = 6.2e7 / (elong_deg * elong_deg) + 10.0 ** (6.15 - elong_deg / 40.0)
    return f + 10.0**5.36 * (1.06 + math.cos(math.radians(elong_deg)) ** 2)


def _threshold_magnitude(bl: float) -> float:
    if bl < REGIME_BOUNDARY_NL:
        c1 = 10.0 ** (-9.8)
        c2 = 10.0 ** (-1.9)
    else:
        c1 = 10.0 ** (-8.350001)
        c2 = 10.0 ** (-5.9)
    th = c1 * (1.0 + math.sqrt(c2 * bl)) ** 2
    return -16.57 - 2.5 * math.log10(th)


def _visual_limit(b_v: float, dm_v: float) -> float:
    bl = b_v / 1.11e-3  # V-band sky brightness in nanolamberts
    return _threshold_magnitude(bl) - dm_v + 5 * math.log10(SNELLEN_RATIO)
