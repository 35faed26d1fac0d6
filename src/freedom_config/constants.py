"""Names of the environment variables read by ConfigBuilder."""

from typing import Final

ATLAS_ENV_VAR: Final = "ATLAS_ENV"
ATLAS_KEY_VAR: Final = "ATLAS_KEY"
ATLAS_SECRET_VAR: Final = "ATLAS_SECRET"
