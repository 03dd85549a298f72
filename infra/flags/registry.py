"""
Feature flag registry.

Defines the closed set of feature flags and their per-environment values.
Built once at import time and exposed read-only.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from infra.configs.environment import EnvironmentName
from infra.exceptions import UnknownFeatureFlagError


class FlagName(str, enum.Enum):
    """
    Defined feature flags.

    ENABLE_MONITORING: Database performance insights and CPU alarms
    ENABLE_AUTO_SCALING: Database storage autoscaling
    ENABLE_DISASTER_RECOVERY: Deletion protection and final snapshots
    """

    ENABLE_MONITORING = "enableMonitoring"
    ENABLE_AUTO_SCALING = "enableAutoScaling"
    ENABLE_DISASTER_RECOVERY = "enableDisasterRecovery"

    @property
    def attribute(self) -> str:
        """Get the FeatureFlags attribute holding this flag."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: "FlagName | str") -> "FlagName":
        """
        Convert a raw flag name into a FlagName.

        Accepts the flag value ('enableMonitoring') or its attribute name
        ('enable_monitoring').

        Raises:
            UnknownFeatureFlagError: If value names no defined flag
        """
        if isinstance(value, cls):
            return value
        for flag in cls:
            if value in (flag.value, flag.attribute):
                return flag
        raise UnknownFeatureFlagError(
            str(value),
            details={"valid_flags": [flag.value for flag in cls]},
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FeatureFlags:
    """
    Feature flag values for one environment.

    Attributes:
        enable_monitoring: Provision monitoring resources
        enable_auto_scaling: Provision autoscaling
        enable_disaster_recovery: Provision disaster recovery safeguards
    """
    enable_monitoring: bool
    enable_auto_scaling: bool
    enable_disaster_recovery: bool

    def get(self, flag: FlagName) -> bool:
        """Get the value of a single flag."""
        return getattr(self, flag.attribute)


FLAG_REGISTRY: Mapping[EnvironmentName, FeatureFlags] = MappingProxyType({
    EnvironmentName.DEV: FeatureFlags(
        enable_monitoring=False,
        enable_auto_scaling=False,
        enable_disaster_recovery=False,
    ),
    EnvironmentName.STAGING: FeatureFlags(
        enable_monitoring=True,
        enable_auto_scaling=False,
        enable_disaster_recovery=False,
    ),
    EnvironmentName.PROD: FeatureFlags(
        enable_monitoring=True,
        enable_auto_scaling=True,
        enable_disaster_recovery=True,
    ),
})


def get_registered_flags(
    environment: EnvironmentName,
    registry: Mapping[EnvironmentName, FeatureFlags] = FLAG_REGISTRY,
) -> FeatureFlags | None:
    """Look up the registered flags for an environment, or None."""
    return registry.get(environment)
