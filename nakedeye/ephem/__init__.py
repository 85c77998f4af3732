from .comets import CometElements, comet_geocentric, comet_magnitude
from .positions import LowPrecisionProvider, PositionProvider
from .riset import RiseSetSolver
from .types import (
    COMET_OFFSET,
    ApparentPosition,
    Body,
    Crossing,
    ObserverSite,
    RiseSet,
    comet_body,
    is_comet,
)

__all__ = [
    "COMET_OFFSET",
    "ApparentPosition",
    "Body",
    "CometElements",
    "Crossing",
    "LowPrecisionProvider",
    "ObserverSite",
    "PositionProvider",
    "RiseSet",
    "RiseSetSolver",
    "comet_body",
    "comet_geocentric",
    "comet_magnitude",
    "is_comet",
]
