"""Error types raised by the layout engine."""


class ConfigError(ValueError):
    """Raised when a grid or item configuration is invalid.

    Configuration errors are fatal: they are raised before any layout pass
    produces output and are never silently defaulted.
    """
