"""Domain types - ATLAS environments and configuration errors."""

from .environment import AtlasEnvironment
from .exceptions import (
    FreedomConfigError,
    IncompleteConfigError,
    InvalidEnvironmentError,
    MissingVariableError,
)

__all__ = [
    "AtlasEnvironment",
    "FreedomConfigError",
    "IncompleteConfigError",
    "InvalidEnvironmentError",
    "MissingVariableError",
]
