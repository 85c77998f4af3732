from dataclasses import dataclass
from enum import Enum, IntEnum
import math


class Body(IntEnum):
    MOON = 0
    MERCURY = 1
    VENUS = 2
    SUN = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8


# Comets and asteroids are numbered from here on: body id = COMET_OFFSET + index
COMET_OFFSET = 10


def is_comet(body: int) -> bool:
    return body >= COMET_OFFSET


def comet_body(index: int) -> int:
    if index < 0:
        raise ValueError(f"Comet index must be non-negative, got {index}")
    return COMET_OFFSET + index


def comet_index(body: int) -> int:
    return body - COMET_OFFSET


def body_name(body: int) -> str:
    if is_comet(body):
        return f"comet #{comet_index(body)}"
    return Body(body).name.capitalize()


@dataclass(frozen=True)
class ObserverSite:
    latitude_deg: float
    longitude_deg: float
    elevation_m: float = 0.0
    tz_hours: float = 0.0
    name: str | None = None

    @property
    def latitude_rad(self) -> float:
        return math.radians(self.latitude_deg)


@dataclass(frozen=True)
class ApparentPosition:
    ra_rad: float
    dec_rad: float
    alt_rad: float
    az_rad: float
    magnitude: float
    ecl_lon_rad: float
    ecl_lat_rad: float
    obliquity_rad: float
    phase: float = 1.0
    distance_au: float | None = None
    helio_distance_au: float | None = None


class Crossing(Enum):
    NORMAL = "normal"
    ALWAYS_ABOVE = "always_above"
    NEVER_ABOVE = "never_above"


@dataclass(frozen=True)
class RiseSet:
    """Threshold crossings of one body on one local day.

    Times are local civil hours (0-24). When the body does not cross the
    threshold, ``crossing`` says which way it failed and ``rise`` and ``set``
    are both 0.0.
    """

    rise: float
    transit: float
    set: float
    rise_az_rad: float
    transit_alt_rad: float
    set_az_rad: float
    crossing: Crossing = Crossing.NORMAL

    @property
    def crosses(self) -> bool:
        return self.crossing is Crossing.NORMAL
