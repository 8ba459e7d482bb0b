"""
Security components for IAM.

Components:
- LambdaRoleComponent: Execution role with optional bucket read grant
"""

from search_infra.components.security.iam_roles import (
    LambdaRoleComponent,
    LambdaRoleOutputs,
    bucket_read_policy,
)

__all__ = [
    "LambdaRoleComponent",
    "LambdaRoleOutputs",
    "bucket_read_policy",
]
