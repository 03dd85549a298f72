"""
Application stack and stack factory.

Turns a validated AppConfig into resources in dependency order:
1. AWS provider pinned to the configured account and region
2. VPC
3. RDS PostgreSQL in the private subnets
4. S3 bucket
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.components.networking.vpc import VpcComponent
from infra.components.storage.rds_postgres import RdsPostgresComponent
from infra.components.storage.s3_bucket import S3BucketComponent
from infra.configs.base import AppConfig
from infra.configs.environment import EnvironmentName
from infra.configs.loader import load_config
from infra.configs.settings import InfraSettings, get_settings
from infra.flags.registry import FeatureFlags
from infra.flags.resolver import get_flags
from infra.utils.logger import get_logger
from infra.utils.naming import ResourceNamer

logger = get_logger(__name__)


@dataclass
class StackOutputs:
    """Output values exported by the application stack."""
    vpc_id: pulumi.Output[str]
    private_subnet_ids: list[pulumi.Output[str]]
    rds_endpoint: pulumi.Output[str]
    bucket_name: pulumi.Output[str]
    bucket_arn: pulumi.Output[str]


class AppStack(pulumi.ComponentResource):
    """
    All resources of one environment, parented under a single component.

    Holds no logic beyond wiring: every value comes from the AppConfig and
    FeatureFlags it is given.
    """

    def __init__(
        self,
        name: str,
        config: AppConfig,
        flags: FeatureFlags,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("myapp:stack:AppStack", name, None, opts)
        self.config = config
        self.flags = flags

        self.provider = aws.Provider(
            f"{name}-aws",
            region=config.aws.region,
            allowed_account_ids=[config.aws.account],
            opts=pulumi.ResourceOptions(parent=self),
        )
        child_opts = pulumi.ResourceOptions(parent=self, providers=[self.provider])
        base_name = namer.name()

        self.vpc = VpcComponent(
            name=base_name,
            config=config,
            namer=namer,
            opts=child_opts,
        )
        vpc_outputs = self.vpc.get_outputs()

        self.database = RdsPostgresComponent(
            name=base_name,
            config=config,
            flags=flags,
            vpc_id=vpc_outputs.vpc_id,
            subnet_ids=vpc_outputs.private_subnet_ids,
            namer=namer,
            opts=child_opts,
        )

        self.storage = S3BucketComponent(
            name=base_name,
            config=config,
            namer=namer,
            opts=child_opts,
        )

        outputs = self.get_outputs()
        self.register_outputs({
            "vpc_id": outputs.vpc_id,
            "private_subnet_ids": outputs.private_subnet_ids,
            "rds_endpoint": outputs.rds_endpoint,
            "bucket_name": outputs.bucket_name,
            "bucket_arn": outputs.bucket_arn,
        })

    def get_outputs(self) -> StackOutputs:
        """Get stack output values."""
        vpc_outputs = self.vpc.get_outputs()
        rds_outputs = self.database.get_outputs()
        s3_outputs = self.storage.get_outputs()
        return StackOutputs(
            vpc_id=vpc_outputs.vpc_id,
            private_subnet_ids=vpc_outputs.private_subnet_ids,
            rds_endpoint=rds_outputs.endpoint,
            bucket_name=s3_outputs.bucket_name,
            bucket_arn=s3_outputs.bucket_arn,
        )


def create_stack(
    environment: EnvironmentName | str,
    project: str | None = None,
) -> AppStack:
    """
    Resolve configuration for an environment and build its stack.

    Args:
        environment: Environment member or name
        project: Resource name prefix (defaults to settings.project)

    Returns:
        AppStack: Stack component holding every resource

    Raises:
        InfraConfigError: If the configuration cannot be resolved
    """
    config = load_config(environment)
    flags = get_flags(config.environment)
    namer = ResourceNamer(
        project=project or get_settings().project,
        environment=config.environment,
    )

    logger.info(
        f"Creating {config.stack_name} in {config.aws.account}/{config.aws.region} "
        f"(monitoring={flags.enable_monitoring}, auto_scaling={flags.enable_auto_scaling}, "
        f"disaster_recovery={flags.enable_disaster_recovery})"
    )
    return AppStack(config.stack_name, config=config, flags=flags, namer=namer)


def resolve_environment(stack_value: str | None, settings: InfraSettings) -> str:
    """
    Pick the environment name for this Pulumi run.

    Args:
        stack_value: 'environment' from the Pulumi stack config, if set
        settings: Process settings supplying INFRA_ENVIRONMENT

    Returns:
        str: Stack config value, else the settings value

    Raises:
        pulumi.RunError: If neither source names an environment
    """
    environment = stack_value or settings.environment
    if not environment:
        raise pulumi.RunError("Please specify environment: pulumi config set environment dev")
    return environment
