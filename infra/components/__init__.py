"""
Pulumi component resources for my-app infrastructure.

Each submodule provides ComponentResource classes built from a validated
AppConfig:
- networking: VPC, subnets, NAT gateways, route tables
- storage: S3 bucket, RDS PostgreSQL
"""
