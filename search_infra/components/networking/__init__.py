"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with isolated subnets, no gateways
- SecurityGroupsComponent: Security groups for the functions and EFS
- VpcEndpointsComponent: S3 gateway endpoint
"""

from search_infra.components.networking.vpc import VpcComponent, VpcOutputs
from search_infra.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs
from search_infra.components.networking.vpc_endpoints import VpcEndpointsComponent, VpcEndpointOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
    "VpcEndpointsComponent",
    "VpcEndpointOutputs",
]
