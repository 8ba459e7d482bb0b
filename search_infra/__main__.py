"""
Pulumi program entry point for the rust-search infrastructure.

Declares, in dependency order:
1. Configuration and prebuilt Lambda artifacts
2. VPC → S3 Gateway Endpoint, Security Groups
3. Posts Bucket, Shared FileSystem + Access Point
4. IAM Roles (indexer read grant on the bucket)
5. Searcher and Indexer Lambdas
"""

import pulumi

from search_infra.configs.constants import FUNCTION_NAMES
from search_infra.configs.environment import get_config
from search_infra.stack import SearchStack
from search_infra.utils.artifacts import resolve_artifact
from search_infra.utils.naming import ResourceNamer
from search_infra.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy the rust-search infrastructure."""
    config = get_config()
    namer = ResourceNamer(project="rust-search", environment=config.environment)

    # Fail before declaring anything if a function has not been built
    searcher_artifact = resolve_artifact(config.lambdas_root, FUNCTION_NAMES["searcher"])
    indexer_artifact = resolve_artifact(config.lambdas_root, FUNCTION_NAMES["indexer"])
    pulumi.log.info(f"Using artifacts {searcher_artifact} and {indexer_artifact}")

    stack = SearchStack(
        namer.prefix,
        config=config,
        namer=namer,
        searcher_artifact=searcher_artifact,
        indexer_artifact=indexer_artifact,
    )
    outputs = stack.get_outputs().to_exports()

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    for key, value in outputs.items():
        pulumi.export(key, value)


main()
