"""Runtime settings for the freedom_config package."""

from .settings import LogLevel, Settings, build_settings

__all__ = ["LogLevel", "Settings", "build_settings"]
