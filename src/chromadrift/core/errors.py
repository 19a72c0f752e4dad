"""Exception types raised by the engine and the exporter."""


class ChromadriftError(Exception):
    """Base class for every error raised by chromadrift."""


class ConfigError(ChromadriftError, ValueError):
    """A run was configured with values the engine cannot simulate."""


class NonFiniteStateError(ChromadriftError, FloatingPointError):
    """Positions, movements or canvas values stopped being finite."""


class ExportError(ChromadriftError, OSError):
    """The final image could not be written."""
