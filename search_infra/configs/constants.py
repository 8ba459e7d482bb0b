"""
Infrastructure constants for the rust-search stack.

Contains CIDR blocks, the shared mount identity, custom runtime settings
and the environment contract consumed by the Lambda artifacts.
"""

from enum import Enum
from typing import Final

# VPC Configuration
VPC_CIDR: Final[str] = "10.0.0.0/16"

# Isolated subnet CIDR blocks, one per availability zone
SUBNET_CIDRS: Final[list[str]] = [
    "10.0.0.0/24",
    "10.0.1.0/24",
    "10.0.2.0/24",
]

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "rust-search",
    "ManagedBy": "pulumi",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "nfs": 2049,
}

# POSIX identity owning the shared index directory
POSIX_IDENTITY: Final[dict[str, int]] = {
    "uid": 1001,
    "gid": 1001,
}
ACCESS_POINT_PERMISSIONS: Final[str] = "750"

# Lambda custom runtime (self-contained bootstrap binary)
LAMBDA_RUNTIME: Final[str] = "provided.al2"
LAMBDA_HANDLER: Final[str] = "bootstrap"
BOOTSTRAP_FILENAME: Final[str] = "bootstrap"

# Function identifiers, also the artifact directory names
FUNCTION_NAMES: Final[dict[str, str]] = {
    "searcher": "searcher",
    "indexer": "indexer",
}

# Environment variables read by the Lambda artifacts
ENV_VARS: Final[dict[str, str]] = {
    "backtrace": "RUST_BACKTRACE",
    "mount_path": "PATH_EFS",
    "posts_bucket": "POSTS_BUCKET_NAME",
}

# Read-only bucket access (objects and listing)
S3_READ_ACTIONS: Final[list[str]] = [
    "s3:GetObject*",
    "s3:GetBucket*",
    "s3:List*",
]

# Managed policies attached to every function role
LAMBDA_MANAGED_POLICIES: Final[dict[str, str]] = {
    "basic-execution": "arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole",
    "vpc-access": "arn:aws:iam::aws:policy/service-role/AWSLambdaVPCAccessExecutionRole",
    "efs-client": "arn:aws:iam::aws:policy/AmazonElasticFileSystemClientReadWriteAccess",
}


class RemovalPolicy(Enum):
    """Teardown behavior of a stateful resource when the stack is destroyed."""

    DESTROY = "destroy"
    RETAIN = "retain"
