"""
S3 Bucket Component for persisted posts.

The indexer reads post documents (JSON objects under `posts/`) from this
bucket and materializes the search index on the shared filesystem.

Access: indexer only, via its execution role and the S3 gateway endpoint.
Public access is blocked.

Removal policy: DESTROY. `force_destroy=True` empties and deletes the bucket
on stack teardown even when it still holds posts. This is an accepted risk of
the stack and is deliberately not configurable.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.configs.constants import RemovalPolicy
from search_infra.utils.naming import ResourceNamer
from search_infra.utils.tags import stateful_tags


@dataclass
class PostsBucketOutputs:
    """Output values from posts bucket component."""
    bucket_name: pulumi.Output[str]
    bucket_arn: pulumi.Output[str]


class PostsBucketComponent(pulumi.ComponentResource):
    """
    Private S3 bucket holding the source posts.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        namer: ResourceNamer,
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:PostsBucket", name, None, opts)
        self.removal_policy = removal_policy

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bucket = aws.s3.Bucket(
            f"{name}-posts",
            bucket_prefix=namer.bucket_prefix("posts"),
            force_destroy=removal_policy is RemovalPolicy.DESTROY,
            tags=stateful_tags(environment, f"{name}-posts", removal_policy),
            opts=pulumi.ResourceOptions(
                parent=self,
                retain_on_delete=removal_policy is RemovalPolicy.RETAIN,
            ),
        )

        aws.s3.BucketPublicAccessBlock(
            f"{name}-posts-public-block",
            bucket=self.bucket.id,
            block_public_acls=True,
            block_public_policy=True,
            ignore_public_acls=True,
            restrict_public_buckets=True,
            opts=child_opts,
        )

        self.register_outputs({
            "bucket_name": self.bucket.bucket,
            "bucket_arn": self.bucket.arn,
        })

    def get_outputs(self) -> PostsBucketOutputs:
        """Get posts bucket output values."""
        return PostsBucketOutputs(
            bucket_name=self.bucket.bucket,
            bucket_arn=self.bucket.arn,
        )
