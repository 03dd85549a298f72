"""
Environment configuration registry.

Holds the fixed configuration of every deployment environment. The registry
is built once at import time and exposed read-only.
"""

from collections.abc import Mapping
from types import MappingProxyType

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


CONFIG_REGISTRY: Mapping[EnvironmentName, AppConfig] = MappingProxyType({
    EnvironmentName.DEV: AppConfig(
        environment=EnvironmentName.DEV,
        aws=AwsConfig(account="123456789012", region="us-east-1"),
        vpc=VpcConfig(max_azs=2, nat_gateways=1, cidr="10.0.0.0/16"),
        database=DatabaseConfig(
            instance_class=InstanceClass.T3,
            instance_size=InstanceSize.MICRO,
            allocated_storage=20,
            backup_retention=1,
            multi_az=False,
        ),
        storage=StorageConfig(
            bucket_name="my-app-dev-bucket",
            versioned=False,
            lifecycle_rules=False,
        ),
        tags={
            "Environment": "Development",
            "CostCenter": "Engineering",
            "ManagedBy": "CDK",
        },
    ),
    EnvironmentName.STAGING: AppConfig(
        environment=EnvironmentName.STAGING,
        aws=AwsConfig(account="123456789013", region="us-east-1"),
        vpc=VpcConfig(max_azs=2, nat_gateways=2, cidr="10.1.0.0/16"),
        database=DatabaseConfig(
            instance_class=InstanceClass.T3,
            instance_size=InstanceSize.SMALL,
            allocated_storage=50,
            backup_retention=7,
            multi_az=False,
        ),
        storage=StorageConfig(
            bucket_name="my-app-staging-bucket",
            versioned=True,
            lifecycle_rules=True,
        ),
        tags={
            "Environment": "Staging",
            "CostCenter": "Engineering",
            "ManagedBy": "CDK",
        },
    ),
    EnvironmentName.PROD: AppConfig(
        environment=EnvironmentName.PROD,
        aws=AwsConfig(account="123456789014", region="us-east-1"),
        vpc=VpcConfig(max_azs=3, nat_gateways=3, cidr="10.2.0.0/16"),
        database=DatabaseConfig(
            instance_class=InstanceClass.M5,
            instance_size=InstanceSize.LARGE,
            allocated_storage=100,
            backup_retention=30,
            multi_az=True,
        ),
        storage=StorageConfig(
            bucket_name="my-app-prod-bucket",
            versioned=True,
            lifecycle_rules=True,
        ),
        tags={
            "Environment": "Production",
            "CostCenter": "Operations",
            "ManagedBy": "CDK",
            "Compliance": "SOC2",
        },
    ),
})


def get_registered_config(
    environment: EnvironmentName,
    registry: Mapping[EnvironmentName, AppConfig] = CONFIG_REGISTRY,
) -> AppConfig | None:
    """
    Look up the registered configuration for an environment.

    Args:
        environment: Environment to look up
        registry: Registry to read from (defaults to CONFIG_REGISTRY)

    Returns:
        AppConfig if registered, otherwise None
    """
    return registry.get(environment)
