"""
VPC Component Resource for the isolated search network.

Steps & Architecture:
1. VPC (10.0.0.0/16): Defines the isolated network container.
2. Subnets: One isolated subnet per availability zone (two by default), so the
   EFS mount targets and the Lambda ENIs are spread across zones.
3. Route Table: A single isolated route table with NO routes besides the
   implicit "local" route. The S3 gateway endpoint later adds its prefix-list
   route to this table.
4. Associations: Every subnet is explicitly linked to the isolated route table.

Gateways:
- No Internet Gateway, no NAT Gateway, no egress-only gateway. There is no
  public egress path by construction; S3 is reached through the gateway
  endpoint (see vpc_endpoints.py) and EFS through in-VPC mount targets.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.configs.constants import VPC_CIDR, SUBNET_CIDRS
from search_infra.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    subnet_ids: list[pulumi.Output[str]]
    route_table_id: pulumi.Output[str]
    availability_zones: list[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with isolated subnets and no gateways.

    Creates a VPC spanning `max_azs` availability zones with one isolated
    subnet per zone, all sharing a route table without an internet route.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        max_azs: int = 2,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.availability_zones = self._select_availability_zones(max_azs)

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=VPC_CIDR,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        self.subnets: list[aws.ec2.Subnet] = []
        for index, zone in enumerate(self.availability_zones):
            subnet_name = f"{name}-isolated-subnet-{index + 1}"
            self.subnets.append(
                aws.ec2.Subnet(
                    subnet_name,
                    vpc_id=self.vpc.id,
                    cidr_block=SUBNET_CIDRS[index],
                    availability_zone=zone,
                    map_public_ip_on_launch=False,
                    tags=create_tags(environment, subnet_name, Tier="isolated"),
                    opts=child_opts,
                )
            )

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "subnet_ids": [subnet.id for subnet in self.subnets],
            "route_table_id": self.isolated_rt.id,
        })

    @staticmethod
    def _select_availability_zones(max_azs: int) -> list[str]:
        """Pick the first `max_azs` available zones of the provider region."""
        zones = aws.get_availability_zones(state="available").names
        if len(zones) < max_azs:
            raise ValueError(
                f"Network needs {max_azs} availability zones, region offers {len(zones)}"
            )
        return list(zones[:max_azs])

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create the isolated route table and associate every subnet."""
        # No default route: traffic stays inside the VPC or goes through endpoints
        self.isolated_rt = aws.ec2.RouteTable(
            f"{name}-isolated-rt",
            vpc_id=self.vpc.id,
            routes=[],
            tags=create_tags(self.environment, f"{name}-isolated-rt"),
            opts=opts,
        )

        for index, subnet in enumerate(self.subnets):
            aws.ec2.RouteTableAssociation(
                f"{name}-isolated-rt-assoc-{index + 1}",
                subnet_id=subnet.id,
                route_table_id=self.isolated_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            subnet_ids=[subnet.id for subnet in self.subnets],
            route_table_id=self.isolated_rt.id,
            availability_zones=self.availability_zones,
        )
