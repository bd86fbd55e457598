"""Exception hierarchy for duration conversion."""


class DurationError(Exception):
    """Base class for all mb-ms errors."""


class InvalidInputError(DurationError, ValueError):
    """Conversion input is not a non-empty string or a finite number."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class ConfigError(DurationError):
    """Configuration file exists but cannot be read."""
