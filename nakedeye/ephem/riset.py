import logging
import math

from .astro import SIDEREAL_RATE, local_sidereal_time_rad, ut_day_start, wrap_pi
from .positions import PositionProvider
from .types import Crossing, ObserverSite, RiseSet, body_name

logger = logging.getLogger(__name__)

_TRANSIT_ITERATIONS = 10
_CROSSING_ITERATIONS = 20
_TOLERANCE_DAYS = 1e-7


class RiseSetSolver:
    """Rise, transit and set of a body w.r.t. an altitude threshold on one local day.

    The local day is the UT calendar date of ``jd`` shifted by the site's time
    zone. Events are searched by iterating the provider positions, so the
    motion of the Moon and planets during the day is taken into account.
    Degenerate days are returned as tagged results with ``rise == set == 0``.
    """

    def __init__(self, provider: PositionProvider):
        self._provider = provider

    def riset(self, jd: float, body: int, altitude_deg: float, site: ObserverSite) -> RiseSet:
        day_start = ut_day_start(jd) - site.tz_hours / 24.0
        h0 = math.radians(altitude_deg)
        lat = site.latitude_rad

        m_transit = self._transit(day_start, body, site)
        transit_pos = self._provider.position(day_start + m_transit, body, site)
        transit_hour = _fold_hours(m_transit)

        denom = math.cos(lat) * math.cos(transit_pos.dec_rad)
        if abs(denom) < 1e-12:
            cos_h0 = -2.0 if transit_pos.alt_rad > h0 else 2.0
        else:
            cos_h0 = (math.sin(h0) - math.sin(lat) * math.sin(transit_pos.dec_rad)) / denom

        if cos_h0 > 1.0 or cos_h0 < -1.0:
            crossing = Crossing.NEVER_ABOVE if cos_h0 > 1.0 else Crossing.ALWAYS_ABOVE
            logger.debug(
                "%s does not cross %.2f deg on JD %.5f: %s",
                body_name(body),
                altitude_deg,
                jd,
                crossing.value,
            )
            return RiseSet(
                rise=0.0,
                transit=transit_hour,
                set=0.0,
                rise_az_rad=0.0,
                transit_alt_rad=transit_pos.alt_rad,
                set_az_rad=0.0,
                crossing=crossing,
            )

        semi_arc = math.acos(cos_h0) / (2.0 * math.pi * SIDEREAL_RATE)
        m_rise, rise_az = self._crossing(day_start, m_transit - semi_arc, body, h0, site)
        m_set, set_az = self._crossing(day_start, m_transit + semi_arc, body, h0, site)
        return RiseSet(
            rise=_fold_hours(m_rise),
            transit=transit_hour,
            set=_fold_hours(m_set),
            rise_az_rad=rise_az,
            transit_alt_rad=transit_pos.alt_rad,
            set_az_rad=set_az,
        )

    def _transit(self, day_start: float, body: int, site: ObserverSite) -> float:
        m = 0.5
        for _ in range(_TRANSIT_ITERATIONS):
            jd = day_start + m
            pos = self._provider.position(jd, body, site)
            ha = wrap_pi(local_sidereal_time_rad(jd, site.longitude_deg) - pos.ra_rad)
            dm = -ha / (2.0 * math.pi * SIDEREAL_RATE)
            m += dm
            if abs(dm) < _TOLERANCE_DAYS:
                break
        return m

    def _crossing(
        self,
        day_start: float,
        m: float,
        body: int,
        h0: float,
        site: ObserverSite,
    ) -> tuple[float, float]:
        lat = site.latitude_rad
        az = 0.0
        for _ in range(_CROSSING_ITERATIONS):
            jd = day_start + m
            pos = self._provider.position(jd, body, site)
            az = pos.az_rad
            ha = wrap_pi(local_sidereal_time_rad(jd, site.longitude_deg) - pos.ra_rad)
            denom = 2.0 * math.pi * math.cos(pos.dec_rad) * math.cos(lat) * math.sin(ha)
            if abs(denom) < 1e-12:
                break
            dm = (pos.alt_rad - h0) / denom
            m += dm
            if abs(dm) < _TOLERANCE_DAYS:
                break
        return m, az


def _fold_hours(m: float) -> float:
    return (m % 1.0) * 24.0
