"""Tests for the configuration registry data."""

import ipaddress
from itertools import combinations

import pytest

from infra.configs.base import AppConfig, InstanceClass, InstanceSize
from infra.configs.constants import REQUIRED_TAGS
from infra.configs.environment import EnvironmentName
from infra.configs.registry import CONFIG_REGISTRY, get_registered_config


class TestRegistryCompleteness:
    """Every environment must be registered exactly once."""

    def test_every_environment_registered(self) -> None:
        """Registry keys are exactly the environment members."""
        assert set(CONFIG_REGISTRY) == set(EnvironmentName)

    @pytest.mark.parametrize("env", list(EnvironmentName))
    def test_entry_environment_matches_key(self, env: EnvironmentName) -> None:
        """Each config names the environment it is registered under."""
        assert CONFIG_REGISTRY[env].environment is env

    def test_registry_is_read_only(self) -> None:
        """Registry cannot be modified."""
        with pytest.raises(TypeError):
            CONFIG_REGISTRY[EnvironmentName.DEV] = CONFIG_REGISTRY[EnvironmentName.PROD]  # type: ignore[index]

    def test_get_registered_config_missing_returns_none(self) -> None:
        """Lookup in an incomplete registry returns None."""
        assert get_registered_config(EnvironmentName.PROD, {}) is None


class TestRegistryData:
    """Registry holds the fixed per-environment values."""

    @pytest.mark.parametrize("env", list(EnvironmentName))
    def test_required_tags_present(self, env: EnvironmentName) -> None:
        """Every environment defines Environment, CostCenter and ManagedBy."""
        assert REQUIRED_TAGS <= set(CONFIG_REGISTRY[env].tags)

    @pytest.mark.parametrize("env", list(EnvironmentName))
    def test_region_not_empty(self, env: EnvironmentName) -> None:
        """Every environment targets a region."""
        assert CONFIG_REGISTRY[env].aws.region

    def test_cidrs_valid_and_disjoint(self) -> None:
        """VPC CIDRs parse and do not overlap across environments."""
        networks = [ipaddress.IPv4Network(c.vpc.cidr) for c in CONFIG_REGISTRY.values()]
        for first, second in combinations(networks, 2):
            assert not first.overlaps(second)

    def test_bucket_names_unique(self) -> None:
        """Bucket names are distinct across environments."""
        names = [c.storage.bucket_name for c in CONFIG_REGISTRY.values()]
        assert len(names) == len(set(names))

    def test_dev_values(self) -> None:
        """Dev is the smallest footprint."""
        config = CONFIG_REGISTRY[EnvironmentName.DEV]
        assert config.aws.account == "123456789012"
        assert (config.vpc.max_azs, config.vpc.nat_gateways) == (2, 1)
        assert config.vpc.cidr == "10.0.0.0/16"
        assert config.database.instance_class is InstanceClass.T3
        assert config.database.instance_size is InstanceSize.MICRO
        assert config.database.rds_instance_class == "db.t3.micro"
        assert config.storage.versioned is False
        assert config.storage.lifecycle_rules is False
        assert config.tags["Environment"] == "Development"

    def test_staging_values(self) -> None:
        """Staging enables versioning and lifecycle rules."""
        config = CONFIG_REGISTRY[EnvironmentName.STAGING]
        assert config.aws.account == "123456789013"
        assert config.vpc.nat_gateways == 2
        assert config.database.allocated_storage == 50
        assert config.database.backup_retention == 7
        assert config.storage.bucket_name == "my-app-staging-bucket"
        assert config.storage.versioned is True

    def test_prod_values(self) -> None:
        """Prod is multi-AZ with compliance tagging."""
        config = CONFIG_REGISTRY[EnvironmentName.PROD]
        assert (config.vpc.max_azs, config.vpc.nat_gateways) == (3, 3)
        assert config.database.rds_instance_class == "db.m5.large"
        assert config.database.multi_az is True
        assert config.database.backup_retention == 30
        assert config.tags["CostCenter"] == "Operations"
        assert config.tags["Compliance"] == "SOC2"


class TestAppConfigImmutability:
    """AppConfig values cannot be changed after construction."""

    def test_fields_frozen(self, dev_config: AppConfig) -> None:
        """Assigning a field raises."""
        with pytest.raises(AttributeError):
            dev_config.environment = EnvironmentName.PROD  # type: ignore[misc]

    def test_nested_fields_frozen(self, dev_config: AppConfig) -> None:
        """Nested sections are frozen too."""
        with pytest.raises(AttributeError):
            dev_config.vpc.nat_gateways = 5  # type: ignore[misc]

    def test_tags_read_only(self, dev_config: AppConfig) -> None:
        """Tags mapping rejects writes."""
        with pytest.raises(TypeError):
            dev_config.tags["Owner"] = "me"  # type: ignore[index]

    def test_source_dict_not_shared(self, dev_config: AppConfig) -> None:
        """Mutating the dict used to build a config does not leak in."""
        source = {"Environment": "Development"}
        config = AppConfig(
            environment=dev_config.environment,
            aws=dev_config.aws,
            vpc=dev_config.vpc,
            database=dev_config.database,
            storage=dev_config.storage,
            tags=source,
        )
        source["Environment"] = "Changed"
        assert config.tags["Environment"] == "Development"

    def test_get_tags_returns_copy(self, dev_config: AppConfig) -> None:
        """get_tags hands out a mutable copy."""
        tags = dev_config.get_tags()
        tags["Owner"] = "me"
        assert "Owner" not in dev_config.tags

    def test_hashable(self, dev_config: AppConfig) -> None:
        """Configs can be hashed and used in sets."""
        configs = {dev_config, CONFIG_REGISTRY[EnvironmentName.DEV]}
        assert len(configs) == 1

    def test_equal_configs_hash_equal(self, dev_config: AppConfig) -> None:
        """Equal configs built separately share a hash, whatever the tag order."""
        reordered = AppConfig(
            environment=dev_config.environment,
            aws=dev_config.aws,
            vpc=dev_config.vpc,
            database=dev_config.database,
            storage=dev_config.storage,
            tags=dict(reversed(list(dev_config.tags.items()))),
        )
        assert reordered == dev_config
        assert hash(reordered) == hash(dev_config)

    def test_different_configs_not_equal(self, dev_config: AppConfig, prod_config: AppConfig) -> None:
        """Different environments are distinct set members."""
        assert len({dev_config, prod_config}) == 2

    def test_derived_properties(self, prod_config: AppConfig, dev_config: AppConfig) -> None:
        """Stack name and production flag derive from the environment."""
        assert prod_config.stack_name == "MyApp-prod-Stack"
        assert prod_config.is_production
        assert not dev_config.is_production
