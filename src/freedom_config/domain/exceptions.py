"""Custom exceptions for Freedom configuration."""


class FreedomConfigError(Exception):
    """Base exception for freedom_config errors."""

    pass


class MissingVariableError(FreedomConfigError):
    """Raised when a required environment variable is unset or empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Environment variable {name} is not set")


class InvalidEnvironmentError(FreedomConfigError):
    """Raised when a value does not name a known ATLAS environment."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown ATLAS environment: {value!r}")


class IncompleteConfigError(FreedomConfigError):
    """Raised when a Config is built before every field has been set.

    The builder checks environment, key and secret in that order, so
    ``field`` names the first one still missing.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Cannot build Config: {field} was never set")
