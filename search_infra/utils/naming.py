"""
Resource naming conventions for the rust-search stack.

Follows pattern: {project}-{environment}-{resource}

Function names are physical (they appear in log group paths and in the
exported outputs). The posts bucket uses a prefix and lets the provider
append a unique suffix.
"""

from dataclasses import dataclass

from search_infra.configs.constants import FUNCTION_NAMES

# AWS limits on physical names
MAX_FUNCTION_NAME_LENGTH = 64
MAX_BUCKET_PREFIX_LENGTH = 37


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def prefix(self) -> str:
        """Stack-wide prefix, also the name of the top-level component."""
        return f"{self.project}-{self.environment}"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'vpc', 'efs')

        Returns:
            Formatted resource name
        """
        return f"{self.prefix}-{resource}"

    def function_name(self, function: str) -> str:
        """
        Physical name of one of the stack's functions.

        Raises:
            ValueError: If the function is unknown or the name exceeds the Lambda limit
        """
        if function not in FUNCTION_NAMES.values():
            raise ValueError(f"Unknown function: {function}")
        name = self.name(function)
        if len(name) > MAX_FUNCTION_NAME_LENGTH:
            raise ValueError(f"Function name too long ({len(name)} chars): {name}")
        return name

    def bucket_prefix(self, suffix: str) -> str:
        """
        Generate an S3 bucket name prefix.

        Args:
            suffix: Bucket suffix (e.g., 'posts')

        Returns:
            Lowercase prefix ending with a dash

        Raises:
            ValueError: If the prefix leaves no room for the generated suffix
        """
        prefix = f"{self.prefix}-{suffix}-".lower()
        if len(prefix) > MAX_BUCKET_PREFIX_LENGTH:
            raise ValueError(f"Bucket prefix too long ({len(prefix)} chars): {prefix}")
        return prefix
