"""Target environments an SSR service can be queried for."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidEnvironmentTarget


class Environment(Enum):
    """A deployment environment, in its fixed display order."""

    DEV = "dev"
    QA = "qa"
    UAT = "uat"
    PROD = "prod"

    @classmethod
    def parse(cls, text: str) -> Environment:
        """Return the environment named exactly by ``text``."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidEnvironmentTarget(text) from None

    def __str__(self) -> str:
        return self.value