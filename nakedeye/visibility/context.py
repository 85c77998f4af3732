from dataclasses import dataclass, field
from typing import Sequence

from nakedeye.ephem.comets import CometElements
from nakedeye.ephem.positions import LowPrecisionProvider, PositionProvider
from nakedeye.ephem.riset import RiseSetSolver
from nakedeye.ephem.types import ApparentPosition, ObserverSite, RiseSet
from .aperture import DEFAULT_PUPIL_MM, aperture


@dataclass(frozen=True)
class SkyContext:
    """Observer site and ephemeris shared by all visibility computations.

    The thresholds are the defaults used by ``visibility_tonight``; the
    lower level functions take them as explicit arguments.
    """

    site: ObserverSite
    provider: PositionProvider
    twilight_sun_altitude_deg: float = -6.0
    min_body_altitude_deg: float = 0.0
    pupil_mm: float = DEFAULT_PUPIL_MM
    riset_solver: RiseSetSolver = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "riset_solver", RiseSetSolver(self.provider))

    @classmethod
    def for_site(cls, site: ObserverSite, comets: Sequence[CometElements] = (), **thresholds) -> "SkyContext":
        return cls(site=site, provider=LowPrecisionProvider(comets), **thresholds)

    @classmethod
    def from_config(cls, config) -> "SkyContext":
        return cls.for_site(
            config.observer_site(),
            config.comets(),
            twilight_sun_altitude_deg=float(config.twilight_sun_altitude_deg),
            min_body_altitude_deg=float(config.min_body_altitude_deg),
            pupil_mm=float(config.pupil_mm),
        )

    def position(self, jd: float, body: int) -> ApparentPosition:
        return self.provider.position(jd, body, self.site)

    def position_fast(self, jd: float, body: int) -> ApparentPosition:
        return self.provider.position_fast(jd, body, self.site)

    def riset(self, jd: float, body: int, altitude_deg: float) -> RiseSet:
        return self.riset_solver.riset(jd, body, altitude_deg, self.site)

    def aperture(self, excess_mag: float) -> float:
        """Aperture in cm needed for ``excess_mag`` with the configured pupil size."""
        return aperture(excess_mag, self.pupil_mm)
