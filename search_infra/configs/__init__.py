"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from search_infra.configs.base import StackConfig
from search_infra.configs.environment import get_config
from search_infra.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDRS,
    DEFAULT_TAGS,
    RemovalPolicy,
)

__all__ = [
    "StackConfig",
    "get_config",
    "VPC_CIDR",
    "SUBNET_CIDRS",
    "DEFAULT_TAGS",
    "RemovalPolicy",
]
