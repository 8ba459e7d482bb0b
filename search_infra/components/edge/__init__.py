"""
Edge components for public access.

Components:
- FunctionUrlComponent: HTTPS function URL for the searcher
"""

from search_infra.components.edge.function_url import FunctionUrlComponent, FunctionUrlOutputs

__all__ = [
    "FunctionUrlComponent",
    "FunctionUrlOutputs",
]
