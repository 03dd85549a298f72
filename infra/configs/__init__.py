"""
Configuration module for infrastructure deployment.

Provides the environment enumeration, the immutable configuration registry,
validation rules, and the load_config entry point.
"""

from infra.configs.base import (
    AppConfig,
    AwsConfig,
    DatabaseConfig,
    InstanceClass,
    InstanceSize,
    StorageConfig,
    VpcConfig,
)
from infra.configs.environment import EnvironmentName
from infra.configs.loader import load_config
from infra.configs.registry import CONFIG_REGISTRY
from infra.configs.validator import VALIDATION_RULES, validate_config

__all__ = [
    "AppConfig",
    "AwsConfig",
    "DatabaseConfig",
    "InstanceClass",
    "InstanceSize",
    "StorageConfig",
    "VpcConfig",
    "EnvironmentName",
    "load_config",
    "CONFIG_REGISTRY",
    "VALIDATION_RULES",
    "validate_config",
]
