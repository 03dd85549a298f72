"""
Cross-field validation for resolved configurations.

Rules run in order and the first violation raises. Each rule is a plain
function taking an AppConfig and raising a ConfigValidationError subclass;
new checks are added by appending to VALIDATION_RULES.

Region non-emptiness, bucket name uniqueness and CIDR validity are assumed
by the registry data but deliberately not checked here.
"""

import re
from collections.abc import Callable

from infra.configs.base import AppConfig
from infra.configs.constants import ACCOUNT_ID_PATTERN
from infra.exceptions import InvalidAccountIdError, InvalidNatGatewayTopologyError

_ACCOUNT_ID_RE = re.compile(ACCOUNT_ID_PATTERN, re.ASCII)

ValidationRule = Callable[[AppConfig], None]


def check_account_id(config: AppConfig) -> None:
    """
    Require the AWS account ID to be exactly 12 decimal digits.

    Raises:
        InvalidAccountIdError: If the account ID is malformed
    """
    if not _ACCOUNT_ID_RE.fullmatch(config.aws.account):
        raise InvalidAccountIdError(config.aws.account, environment=config.environment.value)


def check_nat_gateway_topology(config: AppConfig) -> None:
    """
    Require at most one NAT gateway per availability zone.

    Raises:
        InvalidNatGatewayTopologyError: If nat_gateways exceeds max_azs
    """
    if config.vpc.nat_gateways > config.vpc.max_azs:
        raise InvalidNatGatewayTopologyError(
            config.vpc.nat_gateways,
            config.vpc.max_azs,
            environment=config.environment.value,
        )


VALIDATION_RULES: tuple[ValidationRule, ...] = (
    check_account_id,
    check_nat_gateway_topology,
)


def validate_config(config: AppConfig) -> AppConfig:
    """
    Run every validation rule against a configuration.

    Args:
        config: Configuration to check

    Returns:
        AppConfig: The same configuration, unchanged

    Raises:
        ConfigValidationError: On the first rule that fails
    """
    for rule in VALIDATION_RULES:
        rule(config)
    return config
