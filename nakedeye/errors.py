class NakedEyeError(Exception):
    """Base exception for nakedeye errors."""


class ConfigError(NakedEyeError):
    """Raised for incomplete or invalid configuration."""


class UnknownBodyError(NakedEyeError, ValueError):
    """Raised when a body id cannot be resolved by a position provider."""


class SolverError(NakedEyeError):
    """Raised for malformed solver brackets."""
