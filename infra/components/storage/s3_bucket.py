"""
S3 Bucket Component for application object storage.

One private bucket per environment, named by storage.bucket_name:
- Versioning when storage.versioned is set.
- Lifecycle rule 'delete-old-versions' expiring noncurrent versions after
  90 days when storage.lifecycle_rules is set.
- Encryption (AES256) and PublicAccessBlock always.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.configs.base import AppConfig
from infra.configs.constants import S3_LIFECYCLE_DEFAULTS
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass
class S3BucketOutputs:
    """Output values from S3 bucket component."""
    bucket_name: pulumi.Output[str]
    bucket_arn: pulumi.Output[str]


class S3BucketComponent(pulumi.ComponentResource):
    """
    Private S3 bucket configured from StorageConfig.
    """

    def __init__(
        self,
        name: str,
        config: AppConfig,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("myapp:storage:S3Bucket", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        storage = config.storage

        self.bucket = aws.s3.Bucket(
            f"{name}-bucket",
            bucket=storage.bucket_name,
            tags=create_tags(config.tags, storage.bucket_name, namer.project),
            opts=child_opts,
        )

        self.versioning: aws.s3.BucketVersioning | None = None
        if storage.versioned:
            self.versioning = aws.s3.BucketVersioning(
                f"{name}-bucket-versioning",
                bucket=self.bucket.id,
                versioning_configuration=aws.s3.BucketVersioningVersioningConfigurationArgs(
                    status="Enabled",
                ),
                opts=child_opts,
            )

        self.lifecycle: aws.s3.BucketLifecycleConfiguration | None = None
        if storage.lifecycle_rules:
            depends_on = [self.versioning] if self.versioning else []
            self.lifecycle = aws.s3.BucketLifecycleConfiguration(
                f"{name}-bucket-lifecycle",
                bucket=self.bucket.id,
                rules=[aws.s3.BucketLifecycleConfigurationRuleArgs(
                    id=S3_LIFECYCLE_DEFAULTS["rule_id"],
                    status="Enabled",
                    filter=aws.s3.BucketLifecycleConfigurationRuleFilterArgs(),
                    noncurrent_version_expiration=aws.s3.BucketLifecycleConfigurationRuleNoncurrentVersionExpirationArgs(
                        noncurrent_days=S3_LIFECYCLE_DEFAULTS["noncurrent_version_expiration_days"],
                    ),
                )],
                opts=pulumi.ResourceOptions(parent=self, depends_on=depends_on),
            )

        aws.s3.BucketServerSideEncryptionConfiguration(
            f"{name}-bucket-encryption",
            bucket=self.bucket.id,
            rules=[aws.s3.BucketServerSideEncryptionConfigurationRuleArgs(
                apply_server_side_encryption_by_default=aws.s3.BucketServerSideEncryptionConfigurationRuleApplyServerSideEncryptionByDefaultArgs(
                    sse_algorithm="AES256",
                ),
            )],
            opts=child_opts,
        )

        aws.s3.BucketPublicAccessBlock(
            f"{name}-bucket-public-block",
            bucket=self.bucket.id,
            block_public_acls=True,
            block_public_policy=True,
            ignore_public_acls=True,
            restrict_public_buckets=True,
            opts=child_opts,
        )

        self.register_outputs({
            "bucket_name": self.bucket.bucket,
            "bucket_arn": self.bucket.arn,
        })

    def get_outputs(self) -> S3BucketOutputs:
        """Get S3 bucket output values."""
        return S3BucketOutputs(
            bucket_name=self.bucket.bucket,
            bucket_arn=self.bucket.arn,
        )
