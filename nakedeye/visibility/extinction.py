import math

# Below the horizon: at least ~30 mag of extinction, worse the deeper the body is
_BELOW_HORIZON_PENALTY = 1000.0
_BELOW_HORIZON_OFFSET = 0.15


def airmass(alt_rad: float) -> float:
    """Airmass for a body at altitude ``alt_rad``, Kasten & Young (1989).

    Results lie between 1 (zenith) and ~38 (horizon). Below the horizon a
    large penalty that keeps growing with depth is returned instead, so that
    continuous solvers are steered back above the horizon.
    """
    if alt_rad < 0.0:
        return _BELOW_HORIZON_PENALTY * (_BELOW_HORIZON_OFFSET + abs(alt_rad))
    z = min(math.pi / 2.0 - alt_rad, math.pi / 2.0)
    z_deg = math.degrees(z)
    return max(1.0 / (math.cos(z) + 0.50572 * (96.07995 - z_deg) ** (-1.6364)), 1.0)


def extinction_per_airmass(elevation_m: float) -> float:
    """Extinction in magnitudes per unit airmass for an observer at ``elevation_m``.

    A magnitude corrected for extinction is ``m + extinction_per_airmass(h) * airmass(alt)``.
    See Green, ICQ 14, 55 (1992).
    """
    ozone = 0.016
    rayleigh = 0.1451 * math.exp(-elevation_m / 7996.0)
    aerosol = 0.120 * math.exp(-elevation_m / 1500.0)
    return ozone + rayleigh + aerosol
