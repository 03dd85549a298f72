"""
Deployment environment enumeration.

The three environments are the only keys accepted by the configuration and
feature flag registries.
"""

import enum

from infra.exceptions import ConfigNotFoundError


class EnvironmentName(str, enum.Enum):
    """
    Deployment environments.

    DEV: Developer sandbox, smallest footprint
    STAGING: Pre-production mirror used for release verification
    PROD: Customer-facing production
    """

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"

    @classmethod
    def parse(cls, value: "EnvironmentName | str") -> "EnvironmentName":
        """
        Convert a raw environment string into an EnvironmentName.

        Args:
            value: Environment member or its string value (e.g. 'dev')

        Returns:
            EnvironmentName: Matching member

        Raises:
            ConfigNotFoundError: If value is not a known environment
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigNotFoundError(
                str(value),
                details={"valid_environments": [env.value for env in cls]},
            ) from None

    def __str__(self) -> str:
        return self.value
