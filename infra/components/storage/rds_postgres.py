"""
RDS PostgreSQL Component for Relational Database.

Sizing comes from DatabaseConfig; optional safeguards come from feature flags:
1. enable_monitoring: Performance Insights plus a CloudWatch CPU alarm.
2. enable_auto_scaling: Storage autoscaling up to a multiple of allocated storage.
3. enable_disaster_recovery: Deletion protection and a final snapshot on delete.

Access Control:
- database_sg allows port 5432 from inside the VPC CIDR only.
- manage_master_user_password=True means AWS generates the password and keeps
  it in Secrets Manager.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.configs.base import AppConfig
from infra.configs.constants import (
    RDS_CPU_ALARM_THRESHOLD,
    RDS_DEFAULTS,
    RDS_MAX_STORAGE_MULTIPLIER,
)
from infra.flags.registry import FeatureFlags
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    endpoint: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]
    security_group_id: pulumi.Output[str]


class RdsPostgresComponent(pulumi.ComponentResource):
    """
    RDS PostgreSQL database sized from the environment configuration.
    """

    def __init__(
        self,
        name: str,
        config: AppConfig,
        flags: FeatureFlags,
        vpc_id: pulumi.Input[str],
        subnet_ids: list[pulumi.Input[str]],
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("myapp:storage:RdsPostgres", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        db = config.database
        port = int(RDS_DEFAULTS["port"])

        self.security_group = aws.ec2.SecurityGroup(
            f"{name}-database-sg",
            vpc_id=vpc_id,
            description="PostgreSQL access from inside the VPC",
            ingress=[
                aws.ec2.SecurityGroupIngressArgs(
                    protocol="tcp",
                    from_port=port,
                    to_port=port,
                    cidr_blocks=[config.vpc.cidr],
                ),
            ],
            tags=create_tags(config.tags, f"{name}-database-sg", namer.project),
            opts=child_opts,
        )

        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            tags=create_tags(config.tags, f"{name}-subnet-group", namer.project),
            opts=child_opts,
        )

        max_allocated_storage = (
            db.allocated_storage * RDS_MAX_STORAGE_MULTIPLIER
            if flags.enable_auto_scaling
            else None
        )

        self.instance = aws.rds.Instance(
            f"{name}-postgres",
            identifier=f"{name}-postgres",
            engine=RDS_DEFAULTS["engine"],
            engine_version=RDS_DEFAULTS["engine_version"],
            instance_class=db.rds_instance_class,
            allocated_storage=db.allocated_storage,
            max_allocated_storage=max_allocated_storage,
            storage_type="gp3",
            storage_encrypted=True,
            db_name=RDS_DEFAULTS["database_name"],
            username=RDS_DEFAULTS["username"],
            port=port,
            manage_master_user_password=True,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[self.security_group.id],
            multi_az=db.multi_az,
            backup_retention_period=db.backup_retention,
            backup_window="03:00-04:00",
            maintenance_window="Mon:04:00-Mon:05:00",
            performance_insights_enabled=flags.enable_monitoring,
            deletion_protection=flags.enable_disaster_recovery,
            skip_final_snapshot=not flags.enable_disaster_recovery,
            final_snapshot_identifier=(
                f"{name}-final-snapshot" if flags.enable_disaster_recovery else None
            ),
            copy_tags_to_snapshot=True,
            tags=create_tags(config.tags, f"{name}-postgres", namer.project),
            opts=child_opts,
        )

        self.cpu_alarm: aws.cloudwatch.MetricAlarm | None = None
        if flags.enable_monitoring:
            self.cpu_alarm = aws.cloudwatch.MetricAlarm(
                f"{name}-postgres-cpu",
                namespace="AWS/RDS",
                metric_name="CPUUtilization",
                dimensions={"DBInstanceIdentifier": self.instance.identifier},
                statistic="Average",
                period=300,
                evaluation_periods=3,
                threshold=RDS_CPU_ALARM_THRESHOLD,
                comparison_operator="GreaterThanThreshold",
                alarm_description=f"{name} PostgreSQL CPU above {RDS_CPU_ALARM_THRESHOLD}%",
                tags=create_tags(config.tags, f"{name}-postgres-cpu", namer.project),
                opts=child_opts,
            )

        self.register_outputs({
            "endpoint": self.instance.endpoint,
            "port": self.instance.port,
            "database_name": self.instance.db_name,
            "security_group_id": self.security_group.id,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            endpoint=self.instance.endpoint,
            port=self.instance.port,
            database_name=self.instance.db_name,
            security_group_id=self.security_group.id,
        )
