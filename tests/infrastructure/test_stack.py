"""
Tests for the application stack using Pulumi mocks.

Resources are created against an in-memory mock engine; nothing is deployed.
"""

import pulumi
import pytest


class InfraMocks(pulumi.runtime.Mocks):
    """Echo resource inputs back as outputs."""

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        return [f"{args.name}_id", args.inputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


pulumi.runtime.set_mocks(InfraMocks(), preview=False)

from infra.exceptions import ConfigNotFoundError  # noqa: E402
from infra.configs.settings import InfraSettings  # noqa: E402
from infra.stack import create_stack, resolve_environment  # noqa: E402


class TestCreateStack:
    """Tests for create_stack wiring."""

    def test_unknown_environment_creates_nothing(self):
        """Resolution errors surface before any resource is declared."""
        with pytest.raises(ConfigNotFoundError):
            create_stack("qa", project="my-app")

    @pulumi.runtime.test
    def test_dev_topology(self):
        """Dev gets two AZs, one NAT gateway and no optional resources."""
        stack = create_stack("dev", project="other-app")

        assert len(stack.vpc.public_subnets) == 2
        assert len(stack.vpc.private_subnets) == 2
        assert len(stack.vpc.nat_gateways) == 1
        assert stack.database.cpu_alarm is None
        assert stack.storage.versioning is None
        assert stack.storage.lifecycle is None

        def check(args):
            bucket, instance_class, multi_az, vpc_tags, bucket_tags = args
            assert bucket == "my-app-dev-bucket"
            assert instance_class == "db.t3.micro"
            assert not multi_az
            assert vpc_tags["Project"] == "other-app"
            assert vpc_tags["Name"] == "other-app-dev-vpc"
            assert bucket_tags["Project"] == "other-app"

        return pulumi.Output.all(
            stack.storage.bucket.bucket,
            stack.database.instance.instance_class,
            stack.database.instance.multi_az,
            stack.vpc.vpc.tags,
            stack.storage.bucket.tags,
        ).apply(check)

    @pulumi.runtime.test
    def test_prod_topology(self):
        """Prod gets three AZs, three NAT gateways and every safeguard."""
        stack = create_stack("prod", project="my-app")

        assert stack.config.stack_name == "MyApp-prod-Stack"
        assert len(stack.vpc.private_subnets) == 3
        assert len(stack.vpc.nat_gateways) == 3
        assert stack.database.cpu_alarm is not None
        assert stack.storage.versioning is not None
        assert stack.storage.lifecycle is not None

        def check(args):
            deletion_protection, max_storage, retention, tags = args
            assert deletion_protection is True
            assert max_storage == 400
            assert retention == 30
            assert tags["Environment"] == "Production"
            assert tags["Compliance"] == "SOC2"
            assert tags["Name"] == "my-app-prod-vpc"
            assert tags["Project"] == "my-app"

        return pulumi.Output.all(
            stack.database.instance.deletion_protection,
            stack.database.instance.max_allocated_storage,
            stack.database.instance.backup_retention_period,
            stack.vpc.vpc.tags,
        ).apply(check)

    @pulumi.runtime.test
    def test_staging_monitoring_without_disaster_recovery(self):
        """Staging has monitoring but skips the final snapshot."""
        stack = create_stack("staging", project="my-app")

        assert stack.database.cpu_alarm is not None
        assert stack.provider is not None
        assert stack.config.aws.account == "123456789013"

        def check(args):
            skip_final_snapshot, insights = args
            assert skip_final_snapshot is True
            assert insights is True

        return pulumi.Output.all(
            stack.database.instance.skip_final_snapshot,
            stack.database.instance.performance_insights_enabled,
        ).apply(check)



class TestResolveEnvironment:
    """Tests for picking the environment of a Pulumi run."""

    def test_stack_config_wins(self):
        """Stack config value is used even when settings name another."""
        settings = InfraSettings(environment="dev")
        assert resolve_environment("prod", settings) == "prod"

    def test_falls_back_to_settings(self):
        """INFRA_ENVIRONMENT is used when stack config is unset."""
        settings = InfraSettings(environment="staging")
        assert resolve_environment(None, settings) == "staging"

    def test_missing_everywhere_raises(self):
        """Neither source set gives an actionable error."""
        settings = InfraSettings(environment=None)

        with pytest.raises(pulumi.RunError, match="Please specify environment"):
            resolve_environment(None, settings)
