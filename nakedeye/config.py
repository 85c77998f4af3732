from pathlib import Path
from typing import TYPE_CHECKING

from nakedeye.ephem.comets import CometElements
from nakedeye.ephem.types import ObserverSite
from nakedeye.errors import ConfigError

if TYPE_CHECKING:
    import tomli as tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # Python < 3.11
        import tomli as tomllib

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "nakedeye" / "config.toml"

_COMET_FIELDS = ("name", "perihelion_jd", "q_au", "e", "i_deg", "peri_deg", "node_deg", "abs_mag", "slope")


class Config:
    def __init__(self, data: dict):
        self._data = data

    def _site_data(self) -> dict:
        return self._data.get("site", {})

    def _visibility_data(self) -> dict:
        return self._data.get("visibility", {})

    @property
    def site_name(self):
        return self._site_data().get("name", None)

    @property
    def site_latitude_deg(self):
        return self._site_data().get("latitude_deg", None)

    @property
    def site_longitude_deg(self):
        return self._site_data().get("longitude_deg", None)

    @property
    def site_elevation_m(self):
        return self._site_data().get("elevation_m", 0.0)

    @property
    def site_tz_hours(self):
        return self._site_data().get("tz_hours", 0.0)

    @property
    def pupil_mm(self):
        return self._visibility_data().get("pupil_mm", 7.0)

    @property
    def twilight_sun_altitude_deg(self):
        return self._visibility_data().get("twilight_sun_altitude_deg", -6.0)

    @property
    def min_body_altitude_deg(self):
        return self._visibility_data().get("min_body_altitude_deg", 0.0)

    def observer_site(self) -> ObserverSite:
        lat = self.site_latitude_deg
        lon = self.site_longitude_deg
        if lat is None or lon is None:
            raise ConfigError("Site latitude_deg and longitude_deg must be configured")
        return ObserverSite(
            latitude_deg=float(lat),
            longitude_deg=float(lon),
            elevation_m=float(self.site_elevation_m),
            tz_hours=float(self.site_tz_hours),
            name=self.site_name,
        )

    def comets(self) -> list[CometElements]:
        comets = []
        for i, entry in enumerate(self._data.get("comets", [])):
            missing = [name for name in _COMET_FIELDS if name not in entry]
            if missing:
                raise ConfigError(f"Comet #{i} is missing {', '.join(missing)}")
            comets.append(
                CometElements(
                    name=str(entry["name"]),
                    **{name: float(entry[name]) for name in _COMET_FIELDS[1:]},
                )
            )
        return comets


def load_config(path: Path | None = None) -> Config:
    explicit_path = path
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Return default config if default file missing
        return Config({})

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Config(data)
