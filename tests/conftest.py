import math

import pytest

from nakedeye.ephem.astro import equatorial_to_horizontal, local_sidereal_time_rad, mean_obliquity_rad
from nakedeye.ephem.positions import PositionProvider
from nakedeye.ephem.types import ApparentPosition, Body, ObserverSite
from nakedeye.errors import UnknownBodyError
from nakedeye.visibility.context import SkyContext

# 2024-03-20 0h UT; the Sun is at RA ~0h and transits ~12h UT at longitude 0
EQUINOX_JD = 2460389.5

# New Moon far below the horizon for mid-northern sites
_HIDDEN_MOON = (0.0, math.radians(-80.0), -12.0)


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run tests marked as integration",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(
                pytest.mark.skip(
                    reason="need --integration option to run integration tests"
                )
            )


class FixedSkyProvider(PositionProvider):
    """Bodies fixed on the celestial sphere; only the Earth turns."""

    name = "fixed_sky"

    def __init__(self, bodies: dict):
        # body -> (ra_rad, dec_rad, magnitude)
        self._bodies = {Body.MOON: _HIDDEN_MOON, **bodies}

    def position(self, jd, body, site):
        if body not in self._bodies:
            raise UnknownBodyError(f"Unknown body id: {body}")
        ra, dec, magnitude = self._bodies[body]
        lst = local_sidereal_time_rad(jd, site.longitude_deg)
        alt, az = equatorial_to_horizontal(ra, dec, site.latitude_rad, lst)
        return ApparentPosition(
            ra_rad=ra,
            dec_rad=dec,
            alt_rad=alt,
            az_rad=az,
            magnitude=magnitude,
            ecl_lon_rad=0.0,
            ecl_lat_rad=0.0,
            obliquity_rad=mean_obliquity_rad(jd),
            phase=0.0,
        )


class ConstantSkyProvider(PositionProvider):
    """Every body keeps the same apparent position at all times."""

    name = "constant_sky"

    def __init__(self, positions: dict):
        self._positions = positions

    def position(self, jd, body, site):
        if body not in self._positions:
            raise UnknownBodyError(f"Unknown body id: {body}")
        return self._positions[body]


def make_position(ra_deg, dec_deg, alt_deg, magnitude, phase=1.0):
    return ApparentPosition(
        ra_rad=math.radians(ra_deg),
        dec_rad=math.radians(dec_deg),
        alt_rad=math.radians(alt_deg),
        az_rad=0.0,
        magnitude=magnitude,
        ecl_lon_rad=0.0,
        ecl_lat_rad=0.0,
        obliquity_rad=math.radians(23.44),
        phase=phase,
    )


@pytest.fixture
def equinox_jd():
    return EQUINOX_JD


@pytest.fixture
def site():
    return ObserverSite(latitude_deg=45.0, longitude_deg=0.0, elevation_m=0.0, tz_hours=0.0, name="test")


@pytest.fixture
def fixed_sky(site):
    """Factory for a SkyContext over fixed (ra_deg, dec_deg, magnitude) bodies."""

    def make(bodies, at_site=None):
        provider = FixedSkyProvider(
            {
                body: (math.radians(ra_deg), math.radians(dec_deg), magnitude)
                for body, (ra_deg, dec_deg, magnitude) in bodies.items()
            }
        )
        return SkyContext(site=at_site or site, provider=provider)

    return make


@pytest.fixture
def constant_sky(site):
    """Factory for a SkyContext over frozen ApparentPositions.

    Bodies are given as ``(ra_deg, dec_deg, alt_deg, magnitude)``.
    """

    def make(bodies):
        provider = ConstantSkyProvider({body: make_position(*args) for body, args in bodies.items()})
        return SkyContext(site=site, provider=provider)

    return make
