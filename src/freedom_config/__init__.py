"""freedom_config - configuration builder for the ATLAS Freedom API client."""

from .constants import ATLAS_ENV_VAR, ATLAS_KEY_VAR, ATLAS_SECRET_VAR
from .core import Config, ConfigBuilder
from .domain import (
    AtlasEnvironment,
    FreedomConfigError,
    IncompleteConfigError,
    InvalidEnvironmentError,
    MissingVariableError,
)

__all__ = [
    # Configuration
    "Config",
    "ConfigBuilder",
    "AtlasEnvironment",
    # Environment variable names
    "ATLAS_ENV_VAR",
    "ATLAS_KEY_VAR",
    "ATLAS_SECRET_VAR",
    # Errors
    "FreedomConfigError",
    "MissingVariableError",
    "InvalidEnvironmentError",
    "IncompleteConfigError",
]
