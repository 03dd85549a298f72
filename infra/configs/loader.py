"""
Environment configuration loader.

Resolves an environment name to its registered configuration and validates
it. This is the only entry point provisioning code should use to obtain an
AppConfig.
"""

from collections.abc import Mapping

from infra.configs.base import AppConfig
from infra.configs.environment import EnvironmentName
from infra.configs.registry import CONFIG_REGISTRY, get_registered_config
from infra.configs.validator import validate_config
from infra.exceptions import ConfigNotFoundError, InfraConfigError
from infra.utils.logger import get_logger

logger = get_logger(__name__)


def load_config(
    environment: EnvironmentName | str,
    registry: Mapping[EnvironmentName, AppConfig] = CONFIG_REGISTRY,
) -> AppConfig:
    """
    Load and validate the configuration for an environment.

    Validation runs on every call; nothing is cached beyond the registry.

    Args:
        environment: Environment member or name ('dev', 'staging', 'prod')
        registry: Registry to resolve from (defaults to CONFIG_REGISTRY)

    Returns:
        AppConfig: Validated configuration object

    Raises:
        ConfigNotFoundError: If the environment is unknown or unregistered
        ConfigValidationError: If the registered configuration is inconsistent
    """
    try:
        env = EnvironmentName.parse(environment)
        config = get_registered_config(env, registry)
        if config is None:
            raise ConfigNotFoundError(env.value, details={"reason": "not registered"})
        validate_config(config)
    except InfraConfigError as e:
        logger.warning(f"Configuration rejected for {environment!s}: {e}")
        raise

    logger.debug(
        f"Loaded configuration for {env.value}: "
        f"account={config.aws.account} region={config.aws.region}"
    )
    return config
