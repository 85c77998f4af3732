from .aperture import aperture
from .best import (
    best_excess_magnitude,
    best_observing_date,
    best_visibility_moment,
    comet_invisible,
    transit_altitude,
)
from .context import SkyContext
from .excess import (
    excess_magnitude,
    excess_magnitude_low_accuracy,
    extincted_magnitude,
    limiting_magnitude_at,
    limiting_magnitude_for_body,
)
from .extinction import airmass, extinction_per_airmass
from .limmag import Band, limiting_magnitude_full, limiting_magnitude_sun
from .types import BestExcess, NightEvents, NightVisibility, VisibilityWindow, WindowOptions
from .window import normalize_hours, planet_visibility_tonight, visibility_tonight

__all__ = [
    "Band",
    "BestExcess",
    "NightEvents",
    "NightVisibility",
    "SkyContext",
    "VisibilityWindow",
    "WindowOptions",
    "airmass",
    "aperture",
    "best_excess_magnitude",
    "best_observing_date",
    "best_visibility_moment",
    "comet_invisible",
    "excess_magnitude",
    "excess_magnitude_low_accuracy",
    "extincted_magnitude",
    "extinction_per_airmass",
    "limiting_magnitude_at",
    "limiting_magnitude_for_body",
    "limiting_magnitude_full",
    "limiting_magnitude_sun",
    "normalize_hours",
    "planet_visibility_tonight",
    "transit_altitude",
    "visibility_tonight",
]
