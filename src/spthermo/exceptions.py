"""Exception types raised by SpThermo."""


class SpThermoError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SpThermoError, ValueError):
    """Raised when coefficients, temperature limits or reference pressure are invalid."""


class SpeciesIndexError(SpThermoError, IndexError):
    """Raised for a species index that is out of bounds or not yet installed."""


class NotReadyError(SpThermoError, RuntimeError):
    """Raised when properties are requested before every species is installed."""


class InconsistentReferenceStateError(ConfigurationError):
    """Raised when a phase requires one reference pressure and a species disagrees."""
