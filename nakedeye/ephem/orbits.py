import math

# Days since 2000 Jan 0.0 UT, the epoch of the mean elements below
ELEMENTS_EPOCH_JD = 2451543.5

GAUSS_K = 0.01720209895


def days_since_epoch(jd: float) -> float:
    return jd - ELEMENTS_EPOCH_JD


def solve_kepler(m: float, e: float) -> float:
    e_anom = m + e * math.sin(m) if e < 0.8 else math.pi
    for _ in range(50):
        delta = (e_anom - e * math.sin(e_anom) - m) / (1 - e * math.cos(e_anom))
        e_anom -= delta
        if abs(delta) < 1e-12:
            break
    return e_anom


def orbit_to_ecliptic(
    xv: float,
    yv: float,
    node_rad: float,
    incl_rad: float,
    peri_rad: float,
) -> tuple[float, float, float]:
    """Rotate an in-plane position into heliocentric ecliptic coordinates."""
    v = math.atan2(yv, xv)
    r = math.sqrt(xv * xv + yv * yv)
    xh = r * (math.cos(node_rad) * math.cos(v + peri_rad) - math.sin(node_rad) * math.sin(v + peri_rad) * math.cos(incl_rad))
    yh = r * (math.sin(node_rad) * math.cos(v + peri_rad) + math.cos(node_rad) * math.sin(v + peri_rad) * math.cos(incl_rad))
    zh = r * (math.sin(v + peri_rad) * math.sin(incl_rad))
    return xh, yh, zh


def planet_heliocentric(planet: str, d: float) -> tuple[float, float, float]:
    elems = planet_elements(planet, d)
    a = elems["a"]
    e = elems["e"]
    e_anom = solve_kepler(math.radians(elems["M"]), e)
    xv = a * (math.cos(e_anom) - e)
    yv = a * (math.sqrt(1.0 - e * e) * math.sin(e_anom))
    return orbit_to_ecliptic(
        xv,
        yv,
        math.radians(elems["N"]),
        math.radians(elems["i"]),
        math.radians(elems["w"]),
    )


def earth_heliocentric(d: float) -> tuple[float, float, float]:
    # The "sun" elements describe the Sun's orbit around the Earth.
    xs, ys, zs = planet_heliocentric("sun", d)
    return -xs, -ys, -zs


def planet_elements(planet: str, d: float) -> dict:
    if planet == "mercury":
        return {"N": 48.3313 + 3.24587e-5 * d, "i": 7.0047 + 5.00e-8 * d, "w": 29.1241 + 1.01444e-5 * d, "a": 0.387098, "e": 0.205635 + 5.59e-10 * d, "M": 168.6562 + 4.0923344368 * d}
    if planet == "venus":
        return {"N": 76.6799 + 2.46590e-5 * d, "i": 3.3946 + 2.75e-8 * d, "w": 54.8910 + 1.38374e-5 * d, "a": 0.723330, "e": 0.006773 - 1.302e-9 * d, "M": 48.0052 + 1.6021302244 * d}
    if planet == "sun":
        return {"N": 0.0, "i": 0.0, "w": 282.9404 + 4.70935e-5 * d, "a": 1.0, "e": 0.016709 - 1.151e-9 * d, "M": 356.0470 + 0.9856002585 * d}
    if planet == "mars":
        return {"N": 49.5574 + 2.11081e-5 * d, "i": 1.8497 - 1.78e-8 * d, "w": 286.5016 + 2.92961e-5 * d, "a": 1.523688, "e": 0.093405 + 2.516e-9 * d, "M": 18.6021 + 0.5240207766 * d}
    if planet == "jupiter":
        return {"N": 100.4542 + 2.76854e-5 * d, "i": 1.3030 - 1.557e-7 * d, "w": 273.8777 + 1.64505e-5 * d, "a": 5.20256, "e": 0.048498 + 4.469e-9 * d, "M": 19.8950 + 0.0830853001 * d}
    if planet == "saturn":
        return {"N": 113.6634 + 2.38980e-5 * d, "i": 2.4886 - 1.081e-7 * d, "w": 339.3939 + 2.97661e-5 * d, "a": 9.55475, "e": 0.055546 - 9.499e-9 * d, "M": 316.9670 + 0.0334442282 * d}
    if planet == "uranus":
        return {"N": 74.0005 + 1.3978e-5 * d, "i": 0.7733 + 1.9e-8 * d, "w": 96.6612 + 3.0565e-5 * d, "a": 19.18171 - 1.55e-8 * d, "e": 0.047318 + 7.45e-9 * d, "M": 142.5905 + 0.011725806 * d}
    if planet == "neptune":
        return {"N": 131.7806 + 3.0173e-5 * d, "i": 1.7700 - 2.55e-7 * d, "w": 272.8461 - 6.027e-6 * d, "a": 30.05826 + 3.313e-8 * d, "e": 0.008606 + 2.15e-9 * d, "M": 260.2471 + 0.005995147 * d}
    raise ValueError(f"Unknown planet: {planet}")
