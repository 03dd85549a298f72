"""
Infrastructure constants for my-app.

Contains required tag keys, engine versions, and resource defaults.
"""

from typing import Final

# Tag keys every environment must define
REQUIRED_TAGS: Final[frozenset[str]] = frozenset({
    "Environment",
    "CostCenter",
    "ManagedBy",
})

# AWS account IDs are exactly 12 decimal digits
ACCOUNT_ID_PATTERN: Final[str] = r"\d{12}"

# Subnet prefix length carved out of the VPC CIDR
SUBNET_PREFIX_LENGTH: Final[int] = 24

# RDS configuration
RDS_DEFAULTS: Final[dict[str, str | int]] = {
    "engine": "postgres",
    "engine_version": "14.6",
    "port": 5432,
    "database_name": "myapp",
    "username": "postgres",
}

# Storage autoscaling ceiling as a multiple of allocated storage
RDS_MAX_STORAGE_MULTIPLIER: Final[int] = 4

# CloudWatch CPU alarm threshold (percent)
RDS_CPU_ALARM_THRESHOLD: Final[float] = 80.0

# S3 lifecycle configuration
S3_LIFECYCLE_DEFAULTS: Final[dict[str, str | int]] = {
    "rule_id": "delete-old-versions",
    "noncurrent_version_expiration_days": 90,
}
