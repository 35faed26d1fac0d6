"""ATLAS deployment environments."""

import enum

from pydantic import HttpUrl

from .exceptions import InvalidEnvironmentError


class AtlasEnvironment(enum.StrEnum):
    """Deployment target of the ATLAS Freedom API."""

    TEST = "test"
    PROD = "prod"

    @classmethod
    def parse(cls, value: str) -> "AtlasEnvironment":
        """Parse an environment name, ignoring case.

        Surrounding whitespace is not stripped, so ``" test"`` is rejected.

        Raises:
            InvalidEnvironmentError: If value matches no environment.
        """
        try:
            return cls(value.lower())
        except ValueError as exc:
            raise InvalidEnvironmentError(value) from exc

    @property
    def fps_host(self) -> str:
        """Hostname of the FPS for this environment."""
        return {
            AtlasEnvironment.TEST: "fps.test.atlasground.com",
            AtlasEnvironment.PROD: "fps.atlasground.com",
        }[self]

    @property
    def freedom_entrypoint(self) -> HttpUrl:
        """Root of the Freedom API; every request starts from its /api path."""
        return {
            AtlasEnvironment.TEST: HttpUrl("https://test-api.atlasground.com/api"),
            AtlasEnvironment.PROD: HttpUrl("https://api.atlasground.com/api"),
        }[self]
