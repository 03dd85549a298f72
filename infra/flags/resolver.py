"""
Feature flag resolution.

Answers whether a flag is enabled for an environment. Unknown environments
and unknown flag names fail fast instead of reading as disabled.
"""

from collections.abc import Mapping

from infra.configs.environment import EnvironmentName
from infra.exceptions import ConfigNotFoundError
from infra.flags.registry import FLAG_REGISTRY, FeatureFlags, FlagName, get_registered_flags


def get_flags(
    environment: EnvironmentName | str,
    registry: Mapping[EnvironmentName, FeatureFlags] = FLAG_REGISTRY,
) -> FeatureFlags:
    """
    Get every flag value for an environment.

    Args:
        environment: Environment member or name
        registry: Registry to resolve from (defaults to FLAG_REGISTRY)

    Returns:
        FeatureFlags: Flag values for the environment

    Raises:
        ConfigNotFoundError: If the environment is unknown or unregistered
    """
    env = EnvironmentName.parse(environment)
    flags = get_registered_flags(env, registry)
    if flags is None:
        raise ConfigNotFoundError(env.value, details={"reason": "no feature flags registered"})
    return flags


def is_enabled(
    environment: EnvironmentName | str,
    flag: FlagName | str,
    registry: Mapping[EnvironmentName, FeatureFlags] = FLAG_REGISTRY,
) -> bool:
    """
    Check whether a feature flag is enabled for an environment.

    Args:
        environment: Environment member or name
        flag: Flag member or name ('enableMonitoring' or 'enable_monitoring')
        registry: Registry to resolve from (defaults to FLAG_REGISTRY)

    Returns:
        bool: Flag value

    Raises:
        ConfigNotFoundError: If the environment is unknown or unregistered
        UnknownFeatureFlagError: If the flag is not defined
    """
    # Flag name is checked before the environment
    flag_name = FlagName.parse(flag)
    return get_flags(environment, registry).get(flag_name)
