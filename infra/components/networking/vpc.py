"""
VPC Component Resource for Network Infrastructure.

Layout, sized from VpcConfig:
1. VPC on the configured CIDR block.
2. Internet Gateway for the public tier.
3. One public and one private /24 subnet per availability zone, up to max_azs.
   Public subnets take the first max_azs blocks, private subnets the next.
4. nat_gateways NAT gateways (each with an Elastic IP) in the first public
   subnets. Zero NAT gateways leaves the private tier without egress.
5. Route tables:
   - Public RT: 0.0.0.0/0 -> IGW, shared by all public subnets.
   - Private RT per AZ: 0.0.0.0/0 -> NAT gateway (AZ index modulo nat_gateways).
"""

import ipaddress
from dataclasses import dataclass
from itertools import islice

import pulumi
import pulumi_aws as aws

from infra.configs.base import AppConfig
from infra.configs.constants import SUBNET_PREFIX_LENGTH
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    private_subnet_ids: list[pulumi.Output[str]]
    nat_gateway_ids: list[pulumi.Output[str]]


def plan_subnet_cidrs(vpc_cidr: str, max_azs: int) -> tuple[list[str], list[str]]:
    """
    Split the VPC CIDR into public and private subnet blocks.

    Args:
        vpc_cidr: VPC CIDR block (e.g. '10.0.0.0/16')
        max_azs: Number of availability zones

    Returns:
        Tuple of (public CIDRs, private CIDRs), one per AZ

    Raises:
        ValueError: If the CIDR is invalid or too small for 2 * max_azs subnets
    """
    network = ipaddress.IPv4Network(vpc_cidr)
    count = max_azs * 2
    blocks = [
        str(block)
        for block in islice(network.subnets(new_prefix=SUBNET_PREFIX_LENGTH), count)
    ]
    if len(blocks) < count:
        raise ValueError(f"CIDR {vpc_cidr} cannot hold {count} /{SUBNET_PREFIX_LENGTH} subnets")
    return blocks[:max_azs], blocks[max_azs:]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public and private subnets and NAT gateways.

    Subnet count follows vpc.max_azs and NAT gateway count follows
    vpc.nat_gateways from the resolved configuration.
    """

    def __init__(
        self,
        name: str,
        config: AppConfig,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("myapp:networking:Vpc", name, None, opts)
        self.config = config
        self.namer = namer

        child_opts = pulumi.ResourceOptions(parent=self)
        public_cidrs, private_cidrs = plan_subnet_cidrs(config.vpc.cidr, config.vpc.max_azs)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=config.vpc.cidr,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(config.tags, f"{name}-vpc", namer.project),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(config.tags, f"{name}-igw", namer.project),
            opts=child_opts,
        )

        self.public_subnets: list[aws.ec2.Subnet] = []
        self.private_subnets: list[aws.ec2.Subnet] = []
        for index in range(config.vpc.max_azs):
            az = namer.az_name(config.aws.region, index)
            self.public_subnets.append(aws.ec2.Subnet(
                f"{name}-public-subnet-{index}",
                vpc_id=self.vpc.id,
                cidr_block=public_cidrs[index],
                availability_zone=az,
                map_public_ip_on_launch=True,
                tags=create_tags(config.tags, f"{name}-public-subnet-{index}", namer.project, Tier="public"),
                opts=child_opts,
            ))
            self.private_subnets.append(aws.ec2.Subnet(
                f"{name}-private-subnet-{index}",
                vpc_id=self.vpc.id,
                cidr_block=private_cidrs[index],
                availability_zone=az,
                tags=create_tags(config.tags, f"{name}-private-subnet-{index}", namer.project, Tier="private"),
                opts=child_opts,
            ))

        self.nat_gateways: list[aws.ec2.NatGateway] = []
        for index in range(config.vpc.nat_gateways):
            eip = aws.ec2.Eip(
                f"{name}-nat-eip-{index}",
                domain="vpc",
                tags=create_tags(config.tags, f"{name}-nat-eip-{index}", namer.project),
                opts=child_opts,
            )
            self.nat_gateways.append(aws.ec2.NatGateway(
                f"{name}-nat-{index}",
                allocation_id=eip.id,
                subnet_id=self.public_subnets[index].id,
                tags=create_tags(config.tags, f"{name}-nat-{index}", namer.project),
                opts=pulumi.ResourceOptions(parent=self, depends_on=[self.igw]),
            ))

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "public_subnet_ids": [subnet.id for subnet in self.public_subnets],
            "private_subnet_ids": [subnet.id for subnet in self.private_subnets],
            "nat_gateway_ids": [nat.id for nat in self.nat_gateways],
        })

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and private subnets."""
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.config.tags, f"{name}-public-rt", self.namer.project),
            opts=opts,
        )

        for index, subnet in enumerate(self.public_subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=public_rt.id,
                opts=opts,
            )

        for index, subnet in enumerate(self.private_subnets):
            routes = []
            if self.nat_gateways:
                nat = self.nat_gateways[index % len(self.nat_gateways)]
                routes.append(aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    nat_gateway_id=nat.id,
                ))

            private_rt = aws.ec2.RouteTable(
                f"{name}-private-rt-{index}",
                vpc_id=self.vpc.id,
                routes=routes,
                tags=create_tags(self.config.tags, f"{name}-private-rt-{index}", self.namer.project),
                opts=opts,
            )

            aws.ec2.RouteTableAssociation(
                f"{name}-private-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=private_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            private_subnet_ids=[subnet.id for subnet in self.private_subnets],
            nat_gateway_ids=[nat.id for nat in self.nat_gateways],
        )
