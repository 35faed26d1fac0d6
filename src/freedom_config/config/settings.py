import typing as t
from dataclasses import dataclass, fields, replace
from enum import StrEnum


class LogLevel(StrEnum):
    """Log levels understood by the loguru sink."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings container for the package's own logging.

    Holds nothing about ATLAS credentials; those live on Config.
    """

    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = False


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings from keyword overrides, ignoring ones set to None.

    Args:
        **overrides: Field values keyed by Settings field name.

    Returns:
        Settings with every non-None override applied to the defaults.

    Raises:
        TypeError: If an override does not name a Settings field.
    """
    known = {field.name for field in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    applied = {name: value for name, value in overrides.items() if value is not None}
    return replace(Settings(), **applied)
