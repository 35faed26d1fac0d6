"""Core configuration objects."""

from .config import Config, ConfigBuilder

__all__ = ["Config", "ConfigBuilder"]
