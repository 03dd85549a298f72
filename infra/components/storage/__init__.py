"""
Storage components for S3 and RDS.

Components:
- S3BucketComponent: Application bucket with optional versioning and lifecycle
- RdsPostgresComponent: RDS PostgreSQL database
"""

from infra.components.storage.s3_bucket import S3BucketComponent, S3BucketOutputs
from infra.components.storage.rds_postgres import RdsPostgresComponent, RdsOutputs

__all__ = [
    "S3BucketComponent",
    "S3BucketOutputs",
    "RdsPostgresComponent",
    "RdsOutputs",
]
