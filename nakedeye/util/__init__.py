from .format import (
    format_hours,
    rad_to_dms,
    rad_to_hms,
)

__all__ = [
    "format_hours",
    "rad_to_dms",
    "rad_to_hms",
]
