import pytest

from nakedeye import config as config_module
from nakedeye.config import Config, load_config
from nakedeye.ephem.positions import LowPrecisionProvider
from nakedeye.errors import ConfigError
from nakedeye.visibility.context import SkyContext

CONFIG_TOML = """
[site]
name = "Utrecht"
latitude_deg = 52.09
longitude_deg = 5.12
elevation_m = 5
tz_hours = 1

[visibility]
pupil_mm = 6.0
twilight_sun_altitude_deg = -12.0

[[comets]]
name = "2P/Encke"
perihelion_jd = 2460243.5
q_au = 0.3393
e = 0.8471
i_deg = 11.35
peri_deg = 187.27
node_deg = 334.17
abs_mag = 11.5
slope = 6.0
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML)
    return path


def test_load_config(config_path):
    config = load_config(config_path)
    assert config.site_name == "Utrecht"
    assert config.pupil_mm == 6.0
    assert config.twilight_sun_altitude_deg == -12.0
    # not in the file
    assert config.min_body_altitude_deg == 0.0


def test_observer_site(config_path):
    site = load_config(config_path).observer_site()
    assert site.latitude_deg == 52.09
    assert site.longitude_deg == 5.12
    assert site.elevation_m == 5.0
    assert site.tz_hours == 1.0
    assert site.name == "Utrecht"


def test_comets(config_path):
    comets = load_config(config_path).comets()
    assert len(comets) == 1
    assert comets[0].name == "2P/Encke"
    assert comets[0].q_au == 0.3393


def test_comet_missing_field():
    config = Config({"comets": [{"name": "broken", "q_au": 1.0}]})
    with pytest.raises(ConfigError, match="perihelion_jd"):
        config.comets()


def test_site_requires_coordinates():
    with pytest.raises(ConfigError):
        Config({"site": {"latitude_deg": 52.0}}).observer_site()


def test_defaults():
    config = Config({})
    assert config.pupil_mm == 7.0
    assert config.twilight_sun_altitude_deg == -6.0
    assert config.site_elevation_m == 0.0
    assert config.comets() == []


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "absent.toml")
    config = load_config()
    assert config.site_latitude_deg is None


def test_sky_context_from_config(config_path):
    sky = SkyContext.from_config(load_config(config_path))
    assert sky.site.name == "Utrecht"
    assert isinstance(sky.provider, LowPrecisionProvider)
    assert sky.provider.comet_elements(0).name == "2P/Encke"


def test_sky_context_thresholds_from_config(config_path):
    sky = SkyContext.from_config(load_config(config_path))
    assert sky.twilight_sun_altitude_deg == -12.0
    assert sky.min_body_altitude_deg == 0.0
    assert sky.aperture(5.0) == pytest.approx(6.0)
