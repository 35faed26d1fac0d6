"""Freedom API configuration and its builder.

A ConfigBuilder accumulates the ATLAS environment, key and secret, from
explicit values or from environment variables, and build() turns a fully
populated builder into an immutable Config.
"""

import os
import typing as t

from pydantic import BaseModel, ConfigDict, SecretStr

from .. import constants
from ..domain.environment import AtlasEnvironment
from ..domain.exceptions import IncompleteConfigError, MissingVariableError
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


class Config(BaseModel):
    """Configuration consumed when creating a Freedom API client.

    Instances are frozen. Use ``with_environment``/``with_key``/``with_secret``
    to derive a modified copy. The secret is stored as a SecretStr, so it is
    masked in repr, str and serialized output.

    Example:
        >>> config = (
        ...     Config.builder()
        ...     .environment(AtlasEnvironment.TEST)
        ...     .key("my_key")
        ...     .secret("my_secret")
        ...     .build()
        ... )
        >>> config.key
        'my_key'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ATLAS_ENV_VAR: t.ClassVar[str] = constants.ATLAS_ENV_VAR
    ATLAS_KEY_VAR: t.ClassVar[str] = constants.ATLAS_KEY_VAR
    ATLAS_SECRET_VAR: t.ClassVar[str] = constants.ATLAS_SECRET_VAR

    environment: AtlasEnvironment
    key: str
    secret: SecretStr

    @classmethod
    def builder(cls, logger: t.Optional["loguru.Logger"] = None) -> "ConfigBuilder":
        """Construct an empty ConfigBuilder."""
        return ConfigBuilder(logger=logger)

    @classmethod
    def from_env(cls, logger: t.Optional["loguru.Logger"] = None) -> "Config":
        """Build the entire configuration from environment variables.

        Raises:
            MissingVariableError: If any of the ATLAS variables is unset.
            InvalidEnvironmentError: If ATLAS_ENV names no known environment.
        """
        return (
            cls.builder(logger=logger)
            .environment_from_env()
            .key_from_env()
            .secret_from_env()
            .build()
        )

    @classmethod
    def new(
        cls,
        environment: AtlasEnvironment,
        key: str,
        secret: str,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> "Config":
        """Construct a Config from explicit values in one call."""
        return (
            cls.builder(logger=logger)
            .environment(environment)
            .key(key)
            .secret(secret)
            .build()
        )

    @property
    def environment_str(self) -> str:
        """String form of the environment, e.g. ``"test"``."""
        return self.environment.value

    def expose_secret(self) -> str:
        """Return the raw secret.

        Use with care: the returned string is no longer masked.
        """
        return self.secret.get_secret_value()

    def with_environment(self, environment: AtlasEnvironment) -> "Config":
        """Return a copy of this Config with the environment replaced."""
        return Config.new(environment, self.key, self.expose_secret())

    def with_key(self, key: str) -> "Config":
        """Return a copy of this Config with the key replaced."""
        return Config.new(self.environment, key, self.expose_secret())

    def with_secret(self, secret: str) -> "Config":
        """Return a copy of this Config with the secret replaced."""
        return Config.new(self.environment, self.key, secret)


class ConfigBuilder:
    """Accumulates Config fields and validates them on build().

    Setters return the builder so calls can be chained in any order. Setting
    a field again overwrites the previous value. A builder is not safe for
    concurrent use from several threads.
    """

    def __init__(self, logger: t.Optional["loguru.Logger"] = None) -> None:
        """Initialize an empty builder.

        Args:
            logger: Logger for recording where values were loaded from.
                   If None, a default logger will be created.
        """
        self._logger = logger or get_logger(__name__)
        self._environment: AtlasEnvironment | None = None
        self._key: str | None = None
        self._secret: SecretStr | None = None

    def environment(self, environment: AtlasEnvironment) -> "ConfigBuilder":
        """Set the ATLAS environment."""
        self._environment = environment
        return self

    def key(self, key: str) -> "ConfigBuilder":
        """Set the ATLAS key."""
        self._key = key
        return self

    def secret(self, secret: str) -> "ConfigBuilder":
        """Set the ATLAS secret."""
        self._secret = SecretStr(secret)
        return self

    def environment_from_env(self) -> "ConfigBuilder":
        """Load the ATLAS environment from ATLAS_ENV.

        Raises:
            MissingVariableError: If ATLAS_ENV is unset or empty.
            InvalidEnvironmentError: If ATLAS_ENV names no known environment.
        """
        raw = self._read_variable(constants.ATLAS_ENV_VAR)
        self.environment(AtlasEnvironment.parse(raw))
        self._logger.debug(
            f"Loaded environment '{self._environment}' from {constants.ATLAS_ENV_VAR}"
        )
        return self

    def key_from_env(self) -> "ConfigBuilder":
        """Load the ATLAS key from ATLAS_KEY.

        Raises:
            MissingVariableError: If ATLAS_KEY is unset or empty.
        """
        self.key(self._read_variable(constants.ATLAS_KEY_VAR))
        self._logger.debug(f"Loaded key from {constants.ATLAS_KEY_VAR}")
        return self

    def secret_from_env(self) -> "ConfigBuilder":
        """Load the ATLAS secret from ATLAS_SECRET.

        Raises:
            MissingVariableError: If ATLAS_SECRET is unset or empty.
        """
        self.secret(self._read_variable(constants.ATLAS_SECRET_VAR))
        self._logger.debug(f"Loaded secret from {constants.ATLAS_SECRET_VAR}")
        return self

    def build(self) -> Config:
        """Build the Config and reset the builder.

        Fields are checked in the order environment, key, secret. On failure
        the builder keeps its values; on success it is emptied, so building
        again requires setting every field anew.

        Returns:
            The assembled Config.

        Raises:
            IncompleteConfigError: Naming the first field that was never set.
        """
        for field, value in (
            ("environment", self._environment),
            ("key", self._key),
            ("secret", self._secret),
        ):
            if value is None:
                self._logger.debug(f"Cannot build Config: missing {field}")
                raise IncompleteConfigError(field)

        config = Config(
            environment=self._environment,
            key=self._key,
            secret=self._secret,
        )
        self._environment = None
        self._key = None
        self._secret = None

        self._logger.debug(f"Built Config for the {config.environment_str} environment")
        return config

    def _read_variable(self, name: str) -> str:
        # An empty value is treated the same as an unset one
        value = os.environ.get(name)
        if not value:
            raise MissingVariableError(name)
        return value
