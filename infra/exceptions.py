"""
Exception hierarchy for infrastructure configuration.

Every failure raised while resolving an environment's configuration or its
feature flags derives from InfraConfigError. All of them are terminal: the
data they describe is static, so retrying reproduces the same error.

Dependencies: None (pure domain layer)
System role: Centralized configuration error reporting
"""

from typing import Any


class InfraConfigError(Exception):
    """Base exception for all configuration resolution errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigNotFoundError(InfraConfigError):
    """Raised when an environment is unknown or has no registered configuration."""

    def __init__(self, environment: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize config not found error.

        Args:
            environment: Requested environment name
            details: Additional context
        """
        details = details or {}
        details["environment"] = environment
        super().__init__(f"Configuration not found for environment: {environment}", details)
        self.environment = environment


class ConfigValidationError(InfraConfigError):
    """Base exception for configurations that violate a cross-field rule."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Dotted path of the field that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class InvalidAccountIdError(ConfigValidationError):
    """Raised when the AWS account identifier is not exactly 12 digits."""

    def __init__(self, account: str, environment: str | None = None) -> None:
        details: dict[str, Any] = {"account": account}
        if environment:
            details["environment"] = environment
        super().__init__("Invalid AWS account number", field="aws.account", details=details)


class InvalidNatGatewayTopologyError(ConfigValidationError):
    """Raised when more NAT gateways are requested than availability zones."""

    def __init__(
        self,
        nat_gateways: int,
        max_azs: int,
        environment: str | None = None,
    ) -> None:
        details: dict[str, Any] = {"nat_gateways": nat_gateways, "max_azs": max_azs}
        if environment:
            details["environment"] = environment
        super().__init__(
            "NAT gateways cannot exceed max AZs",
            field="vpc.nat_gateways",
            details=details,
        )


class UnknownFeatureFlagError(InfraConfigError):
    """Raised when a feature flag name is not one of the defined flags."""

    def __init__(self, flag: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["flag"] = flag
        super().__init__(f"Unknown feature flag: {flag}", details)
        self.flag = flag
