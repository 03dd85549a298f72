"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public/private subnets per AZ, NAT gateways, route tables
"""

from infra.components.networking.vpc import VpcComponent, VpcOutputs, plan_subnet_cidrs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "plan_subnet_cidrs",
]
