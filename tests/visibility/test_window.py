import pytest

from nakedeye.ephem.types import Body, Crossing, ObserverSite
from nakedeye.visibility.context import SkyContext
from nakedeye.visibility.types import VisibilityWindow, WindowOptions
from nakedeye.visibility.window import normalize_hours, planet_visibility_tonight, visibility_tonight

SUN = (0.0, 0.0, -26.74)


@pytest.mark.parametrize("hours", [-36.0, -12.0, -0.5, 0.0, 6.25, 11.999, 12.0, 18.0, 23.5, 30.0])
def test_normalize_hours_range_and_idempotent(hours):
    h = normalize_hours(hours)
    assert -12.0 <= h < 12.0
    assert normalize_hours(h) == h
    assert (h - hours) / 24.0 == pytest.approx(round((h - hours) / 24.0))


def test_normalize_hours_evening_is_negative():
    assert normalize_hours(18.0) == -6.0
    assert normalize_hours(12.0) == -12.0
    assert normalize_hours(6.0) == 6.0


def test_body_in_opposition_visible_all_night(fixed_sky, equinox_jd):
    sky = fixed_sky({Body.SUN: SUN, Body.JUPITER: (135.0, 20.0, -2.5)})
    night = planet_visibility_tonight(sky, equinox_jd, Body.JUPITER, -6.0, 0.0)
    sun = night.events.sun_twilight
    body = night.events.body_threshold
    assert night.visible
    # the body rises before dusk and sets before dawn
    assert normalize_hours(body.rise) < normalize_hours(sun.set)
    assert night.window.begin == pytest.approx(normalize_hours(sun.set))
    assert night.window.end == pytest.approx(normalize_hours(body.set))
    assert night.window.begin < 0.0 < night.window.end


def test_body_with_the_sun_not_visible(fixed_sky, equinox_jd):
    sky = fixed_sky({Body.SUN: SUN, Body.MERCURY: (0.0, 0.0, -1.0)})
    night = planet_visibility_tonight(sky, equinox_jd, Body.MERCURY, -6.0, 0.0)
    assert night.window is None
    assert not night.visible


def test_body_setting_with_the_sun_not_visible(fixed_sky, equinox_jd):
    # Sun and body cross the same threshold at the same moments
    sky = fixed_sky({Body.SUN: SUN, Body.MERCURY: (0.0, 0.0, -1.0)})
    night = planet_visibility_tonight(sky, equinox_jd, Body.MERCURY, 0.0, 0.0, WindowOptions(today_only=True))
    assert night.events.body_threshold.set == pytest.approx(night.events.sun_twilight.set)
    assert night.window is None


def test_evening_body_window_ends_at_its_set(fixed_sky, equinox_jd):
    # 45 deg east of the Sun: sets about three hours after it
    sky = fixed_sky({Body.SUN: SUN, Body.VENUS: (45.0, 15.0, -4.2)})
    night = planet_visibility_tonight(sky, equinox_jd, Body.VENUS, -6.0, 0.0)
    assert night.visible
    assert night.window.begin == pytest.approx(normalize_hours(night.events.sun_twilight.set))
    assert night.window.end == pytest.approx(normalize_hours(night.events.body_threshold.set))
    assert 0.5 < night.window.duration_hours < 5.0


def test_morning_body_window_starts_at_its_rise(fixed_sky, equinox_jd):
    sky = fixed_sky({Body.SUN: SUN, Body.VENUS: (-45.0, -15.0, -4.2)})
    night = planet_visibility_tonight(sky, equinox_jd, Body.VENUS, -6.0, 0.0)
    assert night.visible
    assert night.window.begin == pytest.approx(normalize_hours(night.events.body_threshold.rise))
    assert night.window.end == pytest.approx(normalize_hours(night.events.sun_twilight.rise))
    assert night.window.begin > 0.0


def test_circumpolar_body_visible_between_twilights(fixed_sky, equinox_jd):
    north = ObserverSite(latitude_deg=60.0, longitude_deg=0.0)
    sky = fixed_sky({Body.SUN: SUN, Body.SATURN: (100.0, 80.0, 0.8)}, at_site=north)
    night = planet_visibility_tonight(sky, equinox_jd, Body.SATURN, -6.0, 10.0)
    assert night.events.body_threshold.crossing is Crossing.ALWAYS_ABOVE
    assert night.window == VisibilityWindow(
        begin=normalize_hours(night.events.sun_twilight.set),
        end=normalize_hours(night.events.sun_twilight.rise),
    )


def test_never_rising_body_not_visible(fixed_sky, equinox_jd):
    north = ObserverSite(latitude_deg=60.0, longitude_deg=0.0)
    sky = fixed_sky({Body.SUN: SUN, Body.SATURN: (180.0, -40.0, 0.8)}, at_site=north)
    night = planet_visibility_tonight(sky, equinox_jd, Body.SATURN, -6.0, 0.0)
    assert night.events.body_threshold.crossing is Crossing.NEVER_ABOVE
    assert night.window is None


def test_no_dark_night_means_not_visible(fixed_sky, equinox_jd):
    # Midsummer Sun seen from 65 N stays above -6 deg
    arctic = ObserverSite(latitude_deg=65.0, longitude_deg=0.0)
    sky = fixed_sky({Body.SUN: (90.0, 23.44, -26.74), Body.SATURN: (270.0, -10.0, 0.8)}, at_site=arctic)
    night = planet_visibility_tonight(sky, equinox_jd, Body.SATURN, -6.0, 0.0)
    assert night.events.sun_twilight.crossing is Crossing.ALWAYS_ABOVE
    assert night.window is None


def test_polar_night_spans_noon_to_noon(fixed_sky, equinox_jd):
    arctic = ObserverSite(latitude_deg=80.0, longitude_deg=0.0)
    sky = fixed_sky({Body.SUN: (270.0, -23.44, -26.74), Body.SATURN: (90.0, 60.0, 0.8)}, at_site=arctic)
    night = planet_visibility_tonight(sky, equinox_jd, Body.SATURN, -6.0, 0.0)
    assert night.events.sun_twilight.crossing is Crossing.NEVER_ABOVE
    assert night.window == VisibilityWindow(begin=-12.0, end=12.0)


def test_horizon_events_only_on_request(fixed_sky, equinox_jd):
    sky = fixed_sky({Body.SUN: SUN, Body.JUPITER: (135.0, 20.0, -2.5)})
    plain = planet_visibility_tonight(sky, equinox_jd, Body.JUPITER, -6.0, 0.0)
    full = planet_visibility_tonight(
        sky, equinox_jd, Body.JUPITER, -6.0, 0.0, WindowOptions(include_horizon=True)
    )
    assert plain.events.sun_horizon is None
    assert plain.events.body_horizon is None
    assert full.events.sun_horizon.set < full.events.sun_twilight.set
    assert full.events.body_horizon.crosses
    assert full.window == plain.window


def test_today_only_uses_same_day_rise(fixed_sky, equinox_jd):
    sky = fixed_sky({Body.SUN: SUN, Body.JUPITER: (135.0, 20.0, -2.5)})
    today = planet_visibility_tonight(sky, equinox_jd, Body.JUPITER, -6.0, 0.0, WindowOptions(today_only=True))
    sun_today = sky.riset(equinox_jd, Body.SUN, -6.0)
    sun_tomorrow = sky.riset(equinox_jd + 1.0, Body.SUN, -6.0)
    assert today.events.sun_twilight.rise == sun_today.rise
    assert sun_tomorrow.rise != sun_today.rise


def test_window_clock_times():
    window = VisibilityWindow(begin=-2.5, end=4.0)
    assert window.clock_begin == 21.5
    assert window.clock_end == 4.0
    assert window.duration_hours == 6.5
    assert window.describe() == "21:30 - 04:00"


def test_window_to_julian_days():
    window = VisibilityWindow(begin=-2.0, end=3.0)
    jd1, jd2 = window.to_julian_days(2460390.2, 1.0)
    assert jd1 == pytest.approx(2460389.5 - 3.0 / 24.0)
    assert jd2 == pytest.approx(2460389.5 + 2.0 / 24.0)


def test_visibility_tonight_uses_context_thresholds(fixed_sky, equinox_jd, site):
    bodies = {Body.SUN: SUN, Body.JUPITER: (135.0, 20.0, -2.5)}
    sky = fixed_sky(bodies)
    strict = SkyContext(site=site, provider=sky.provider, twilight_sun_altitude_deg=-18.0)
    assert visibility_tonight(sky, equinox_jd, Body.JUPITER) == planet_visibility_tonight(
        sky, equinox_jd, Body.JUPITER, -6.0, 0.0
    )
    assert visibility_tonight(strict, equinox_jd, Body.JUPITER).window.begin > visibility_tonight(
        sky, equinox_jd, Body.JUPITER
    ).window.begin
