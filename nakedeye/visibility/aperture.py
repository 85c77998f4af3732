import math

DEFAULT_PUPIL_MM = 7.0


def aperture(excess_mag: float, pupil_mm: float = DEFAULT_PUPIL_MM) -> float:
    """Telescope aperture in cm needed to see an object ``excess_mag`` fainter than the eye can.

    Returns 0 when the object is visible to the naked eye.
    """
    if excess_mag <= 0.0:
        return 0.0
    return pupil_mm * math.sqrt(10.0 ** (excess_mag / 2.5)) / 10.0
