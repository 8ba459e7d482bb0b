"""
Tag factory for AWS resources.

Every resource carries Project/ManagedBy/Environment/Name. Functions also
record their runtime and mount path; stateful resources record what happens
to their data on `pulumi destroy`.
"""

from search_infra.configs.constants import DEFAULT_TAGS, LAMBDA_RUNTIME, RemovalPolicy


def create_tags(
    environment: str,
    resource_name: str,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Name of the resource
        **extra_tags: Additional tags to include

    Returns:
        Dictionary of tags
    """
    return {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
        **extra_tags,
    }


def function_tags(environment: str, resource_name: str, mount_path: str) -> dict[str, str]:
    """Tags for a custom runtime function with the shared filesystem mounted."""
    return create_tags(
        environment,
        resource_name,
        Runtime=LAMBDA_RUNTIME,
        MountPath=mount_path,
    )


def stateful_tags(
    environment: str,
    resource_name: str,
    removal_policy: RemovalPolicy,
) -> dict[str, str]:
    """Tags for a resource holding data, recording its teardown behavior."""
    return create_tags(environment, resource_name, RemovalPolicy=removal_policy.value)
