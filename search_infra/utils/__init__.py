"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, artifact lookup and output utilities.
"""

from search_infra.utils.naming import ResourceNamer
from search_infra.utils.tags import create_tags, function_tags, stateful_tags
from search_infra.utils.artifacts import MissingArtifactError, resolve_artifact
from search_infra.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "function_tags",
    "stateful_tags",
    "MissingArtifactError",
    "resolve_artifact",
    "write_outputs_to_env",
]
