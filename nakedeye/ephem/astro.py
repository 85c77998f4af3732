import datetime
import math

from astropy.time import Time

J2000_JD = 2451545.0
SIDEREAL_RATE = 1.00273790935


# Calendar arithmetic only: "tt" keeps astropy away from leap-second tables.
def jd_to_calendar(jd: float) -> tuple[int, int, float]:
    ymdhms = Time(jd, format="jd", scale="tt").ymdhms
    day = (
        int(ymdhms["day"])
        + (int(ymdhms["hour"]) + (int(ymdhms["minute"]) + float(ymdhms["second"]) / 60.0) / 60.0) / 24.0
    )
    return int(ymdhms["year"]), int(ymdhms["month"]), day


def calendar_to_jd(year: int, month: int, day: float) -> float:
    # Fractional and out-of-range days roll over, as in day-of-month arithmetic.
    first = Time(datetime.datetime(year, month, 1), scale="tt").jd
    return first + day - 1.0


def day_of_year_to_month_day(year: int, doy: int) -> tuple[int, int]:
    jd = calendar_to_jd(year, 1, 1.0) + doy - 1
    _, month, day = jd_to_calendar(jd)
    return month, int(day)


def ut_day_start(jd: float) -> float:
    """JD of 0h UT on the calendar date containing ``jd``."""
    return math.floor(jd + 0.5) - 0.5


def wrap_two_pi(angle: float) -> float:
    return angle % (2.0 * math.pi)


def wrap_pi(angle: float) -> float:
    return (angle + math.pi) % (2.0 * math.pi) - math.pi


def gmst_rad(jd: float) -> float:
    d = jd - J2000_JD
    gmst_hours = 18.697374558 + 24.06570982441908 * d
    return wrap_two_pi(math.radians((gmst_hours % 24.0) * 15.0))


def local_sidereal_time_rad(jd: float, longitude_deg: float) -> float:
    return wrap_two_pi(gmst_rad(jd) + math.radians(longitude_deg))


def mean_obliquity_rad(jd: float) -> float:
    return math.radians(23.4393 - 3.563e-7 * (jd - J2000_JD))


def ecliptic_to_equatorial(lon_rad: float, lat_rad: float, eps_rad: float) -> tuple[float, float]:
    sin_dec = math.sin(lat_rad) * math.cos(eps_rad) + math.cos(lat_rad) * math.sin(eps_rad) * math.sin(lon_rad)
    dec = math.asin(max(-1.0, min(1.0, sin_dec)))
    y = math.sin(lon_rad) * math.cos(eps_rad) - math.tan(lat_rad) * math.sin(eps_rad)
    x = math.cos(lon_rad)
    return wrap_two_pi(math.atan2(y, x)), dec


def equatorial_to_horizontal(
    ra_rad: float,
    dec_rad: float,
    lat_rad: float,
    lst_rad: float,
) -> tuple[float, float]:
    """Altitude and azimuth (from north, through east) of an equatorial direction."""
    ha = wrap_two_pi(lst_rad - ra_rad)
    sin_alt = math.sin(dec_rad) * math.sin(lat_rad) + math.cos(dec_rad) * math.cos(lat_rad) * math.cos(ha)
    alt = math.asin(max(-1.0, min(1.0, sin_alt)))
    az = math.atan2(
        -math.sin(ha),
        math.tan(dec_rad) * math.cos(lat_rad) - math.sin(lat_rad) * math.cos(ha),
    )
    return alt, wrap_two_pi(az)


def angular_separation_rad(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    cos_sep = math.sin(dec1) * math.sin(dec2) + math.cos(dec1) * math.cos(dec2) * math.cos(ra1 - ra2)
    cos_sep = max(-1.0, min(1.0, cos_sep))
    return math.acos(cos_sep)
