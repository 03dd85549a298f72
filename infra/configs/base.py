"""
Configuration dataclasses for environment settings.

Provides the immutable, nested configuration structure resolved for one
deployment environment. Field types are checked by construction only as far
as dataclasses go; cross-field rules live in infra.configs.validator.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from infra.configs.environment import EnvironmentName


class InstanceClass(str, enum.Enum):
    """Database instance families."""

    T3 = "t3"
    T4G = "t4g"
    M5 = "m5"
    M6G = "m6g"
    R5 = "r5"
    R6G = "r6g"


class InstanceSize(str, enum.Enum):
    """Database instance sizes."""

    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    XLARGE2 = "2xlarge"


@dataclass(frozen=True)
class AwsConfig:
    """
    Target AWS account and region.

    Attributes:
        account: 12 digit AWS account ID
        region: Deployment region (e.g. 'us-east-1')
    """
    account: str
    region: str


@dataclass(frozen=True)
class VpcConfig:
    """
    Network layout.

    Attributes:
        max_azs: Upper bound on availability zones used
        nat_gateways: Number of NAT gateways, never more than max_azs
        cidr: IPv4 CIDR block of the VPC
    """
    max_azs: int
    nat_gateways: int
    cidr: str


@dataclass(frozen=True)
class DatabaseConfig:
    """
    PostgreSQL instance sizing and durability.

    Attributes:
        instance_class: Instance family
        instance_size: Instance size within the family
        allocated_storage: Storage in GiB
        backup_retention: Automated backup retention in days
        multi_az: Enable multi-AZ standby
    """
    instance_class: InstanceClass
    instance_size: InstanceSize
    allocated_storage: int
    backup_retention: int
    multi_az: bool

    @property
    def rds_instance_class(self) -> str:
        """Get the RDS instance class string (e.g. 'db.t3.micro')."""
        return f"db.{self.instance_class.value}.{self.instance_size.value}"


@dataclass(frozen=True)
class StorageConfig:
    """
    Object storage bucket settings.

    Attributes:
        bucket_name: Globally unique bucket name
        versioned: Keep previous object versions
        lifecycle_rules: Expire noncurrent versions
    """
    bucket_name: str
    versioned: bool
    lifecycle_rules: bool


@dataclass(frozen=True)
class AppConfig:
    """
    Resolved configuration for one deployment environment.

    Attributes:
        environment: Environment this configuration belongs to
        aws: Target account and region
        vpc: Network layout
        database: Database sizing
        storage: Bucket settings
        tags: Tags applied to every resource (read-only)
    """
    environment: EnvironmentName
    aws: AwsConfig
    vpc: VpcConfig
    database: DatabaseConfig
    storage: StorageConfig
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy so the caller's dict cannot be used to mutate the frozen config
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def __hash__(self) -> int:
        # Tags are hashed by content, ignoring insertion order
        return hash((
            self.environment,
            self.aws,
            self.vpc,
            self.database,
            self.storage,
            frozenset(self.tags.items()),
        ))

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment is EnvironmentName.PROD

    @property
    def stack_name(self) -> str:
        """Get the stack identifier for this environment."""
        return f"MyApp-{self.environment.value}-Stack"

    def get_tags(self) -> dict[str, str]:
        """Get a mutable copy of the environment tags."""
        return dict(self.tags)
