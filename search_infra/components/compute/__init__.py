"""
Compute components for Lambda.

Components:
- CustomRuntimeFunctionComponent: Rust Lambda (searcher, indexer) with EFS mount
"""

from search_infra.components.compute.lambda_function import (
    CustomRuntimeFunctionComponent,
    LambdaOutputs,
)

__all__ = [
    "CustomRuntimeFunctionComponent",
    "LambdaOutputs",
]
