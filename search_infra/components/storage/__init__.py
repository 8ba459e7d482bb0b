"""
Storage components for S3 and EFS.

Components:
- PostsBucketComponent: Source posts bucket
- SharedFileSystemComponent: EFS filesystem and access point for the index
"""

from search_infra.components.storage.posts_bucket import PostsBucketComponent, PostsBucketOutputs
from search_infra.components.storage.efs import SharedFileSystemComponent, EfsOutputs

__all__ = [
    "PostsBucketComponent",
    "PostsBucketOutputs",
    "SharedFileSystemComponent",
    "EfsOutputs",
]
