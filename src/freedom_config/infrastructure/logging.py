"""Loguru-based logging setup.

get_logger() only binds a component name; it never adds or removes sinks,
so records flow to whatever sinks the host application installed. Call
setup_logging() or configure_logger() to have this package install its own
stderr sink instead.
"""

import sys
import typing as t

from loguru import logger as _logger

from ..config.settings import LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    json_logs: bool = False,
) -> None:
    """Replace any existing sinks with a single stderr sink.

    This is process-wide: sinks added elsewhere are removed too.

    Args:
        level: Minimum level emitted by the sink.
        json_logs: Serialize records as JSON instead of the human format.
    """
    global _configured

    _logger.remove()
    if json_logs:
        _logger.add(sys.stderr, level=str(level), serialize=True)
    else:
        _logger.add(sys.stderr, level=str(level), format=_HUMAN_FORMAT)
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from a Settings instance."""
    configure_logger(level=settings.log_level, json_logs=settings.json_logs)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to the given component name."""
    return _logger.bind(name=name)


def is_configured() -> bool:
    """Whether this package has installed its own sink."""
    return _configured


def reset_logging() -> None:
    """Remove all sinks and mark logging as unconfigured."""
    global _configured

    _logger.remove()
    _configured = False
