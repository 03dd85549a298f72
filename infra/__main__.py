"""
Pulumi program entry point for my-app infrastructure.

Environment is taken from stack config, falling back to INFRA_ENVIRONMENT:

    pulumi config set environment dev
    pulumi up
"""

import pulumi

from infra.configs.settings import get_settings
from infra.stack import create_stack, resolve_environment
from infra.utils.logger import configure_logging


def main() -> None:
    """Deploy my-app infrastructure for the selected environment."""
    settings = get_settings()
    configure_logging(settings.log_level)

    environment = resolve_environment(pulumi.Config().get("environment"), settings)

    stack = create_stack(environment, project=settings.project)
    outputs = stack.get_outputs()

    exports = {
        "environment": stack.config.environment.value,
        "vpc_id": outputs.vpc_id,
        "private_subnet_ids": outputs.private_subnet_ids,
        "rds_endpoint": outputs.rds_endpoint,
        "bucket_name": outputs.bucket_name,
        "bucket_arn": outputs.bucket_arn,
    }
    for key, value in exports.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ {stack.config.stack_name} declared")


# Execute
main()
