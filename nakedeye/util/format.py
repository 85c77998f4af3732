import math
from typing import Tuple


def _wrap_hours(hours: float) -> float:
    return hours % 24.0


def _split_dms(angle_deg: float, precision: int) -> Tuple[int, int, int, float]:
    sign = -1 if angle_deg < 0 else 1
    a = abs(angle_deg)
    total_seconds = round(a * 3600.0, precision)
    deg = int(total_seconds // 3600)
    rem = total_seconds - deg * 3600
    minutes = int(rem // 60)
    seconds = rem - minutes * 60
    return sign, deg, minutes, seconds


def _split_hms(hours: float, precision: int) -> Tuple[int, int, float]:
    h = _wrap_hours(hours)
    total_seconds = round(h * 3600.0, precision) % (24.0 * 3600.0)
    hours_int = int(total_seconds // 3600)
    rem = total_seconds - hours_int * 3600
    minutes = int(rem // 60)
    seconds = rem - minutes * 60
    return hours_int, minutes, seconds


def format_hours(hours: float) -> str:
    """Clock time ``HH:MM`` for a time in hours, wrapped to 0-24."""
    h = _wrap_hours(hours)
    total_minutes = round(h * 60.0) % (24 * 60)
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def rad_to_hms(rad: float, precision: int = 2) -> str:
    hours = math.degrees(rad) / 15.0
    h, m, s = _split_hms(hours, precision)
    s_fmt = f"{s:0{3 + precision}.{precision}f}"
    return f"{h:02d}:{m:02d}:{s_fmt}"


def rad_to_dms(rad: float, precision: int = 2) -> str:
    deg = math.degrees(rad)
    sign_val, d, m, s = _split_dms(deg, precision)
    sign = "-" if sign_val < 0 else "+"
    s_fmt = f"{s:0{3 + precision}.{precision}f}"
    return f"{sign}{d:02d}:{m:02d}:{s_fmt}"
