"""
Search stack composition.

Wires the components in dependency order:
1. VPC → S3 Gateway Endpoint, Security Groups
2. Posts Bucket
3. Shared FileSystem (mount targets + access point)
4. IAM Roles (indexer role carries the bucket read grant)
5. Searcher and Indexer functions (after the mount targets)
6. Optional: indexer schedule, searcher function URL
"""

from dataclasses import dataclass
from pathlib import Path

import pulumi

from search_infra.configs.base import StackConfig
from search_infra.configs.constants import ENV_VARS, FUNCTION_NAMES, RemovalPolicy
from search_infra.utils.naming import ResourceNamer

from search_infra.components.networking.vpc import VpcComponent
from search_infra.components.networking.vpc_endpoints import VpcEndpointsComponent
from search_infra.components.networking.security_groups import SecurityGroupsComponent
from search_infra.components.storage.posts_bucket import PostsBucketComponent
from search_infra.components.storage.efs import SharedFileSystemComponent
from search_infra.components.security.iam_roles import LambdaRoleComponent
from search_infra.components.compute.lambda_function import CustomRuntimeFunctionComponent
from search_infra.components.messaging.indexer_schedule import IndexerScheduleComponent
from search_infra.components.edge.function_url import FunctionUrlComponent


@dataclass
class SearchStackOutputs:
    """Output values exported by the search stack."""
    vpc_id: pulumi.Output[str]
    posts_bucket_name: pulumi.Output[str]
    file_system_id: pulumi.Output[str]
    access_point_id: pulumi.Output[str]
    searcher_function_name: pulumi.Output[str]
    indexer_function_name: pulumi.Output[str]
    search_url: pulumi.Output[str] | None = None

    def to_exports(self) -> dict[str, pulumi.Output[str]]:
        """Map outputs to stack export names."""
        exports = {
            "vpc_id": self.vpc_id,
            "posts_bucket": self.posts_bucket_name,
            "file_system_id": self.file_system_id,
            "access_point_id": self.access_point_id,
            "searcher_function_name": self.searcher_function_name,
            "indexer_function_name": self.indexer_function_name,
        }
        if self.search_url is not None:
            exports["search_url"] = self.search_url
        return exports


class SearchStack(pulumi.ComponentResource):
    """
    Network, posts bucket, shared filesystem and the two search functions.
    """

    def __init__(
        self,
        name: str,
        config: StackConfig,
        namer: ResourceNamer,
        searcher_artifact: str | Path,
        indexer_artifact: str | Path,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:stack:SearchStack", name, None, opts)
        environment = config.environment
        child_opts = pulumi.ResourceOptions(parent=self)

        # --- Layer 1: Network ---
        self.vpc = VpcComponent(
            name=name,
            environment=environment,
            max_azs=config.max_azs,
            opts=child_opts,
        )
        vpc_outputs = self.vpc.get_outputs()

        self.endpoints = VpcEndpointsComponent(
            name=name,
            environment=environment,
            vpc_id=vpc_outputs.vpc_id,
            route_table_ids=[vpc_outputs.route_table_id],
            opts=child_opts,
        )

        self.security_groups = SecurityGroupsComponent(
            name=name,
            environment=environment,
            vpc_id=vpc_outputs.vpc_id,
            opts=child_opts,
        )
        sg_outputs = self.security_groups.get_outputs()

        # --- Layer 2: Storage ---
        self.posts_bucket = PostsBucketComponent(
            name=name,
            environment=environment,
            namer=namer,
            removal_policy=RemovalPolicy.DESTROY,
            opts=child_opts,
        )
        bucket_outputs = self.posts_bucket.get_outputs()

        self.file_system = SharedFileSystemComponent(
            name=name,
            environment=environment,
            subnet_ids=vpc_outputs.subnet_ids,
            security_group_id=sg_outputs.efs_sg_id,
            access_point_path=config.access_point_path,
            removal_policy=RemovalPolicy.DESTROY,
            opts=child_opts,
        )
        efs_outputs = self.file_system.get_outputs()

        # --- Layer 3: IAM ---
        searcher_name = namer.function_name(FUNCTION_NAMES["searcher"])
        indexer_name = namer.function_name(FUNCTION_NAMES["indexer"])

        self.searcher_role = LambdaRoleComponent(
            name=searcher_name,
            environment=environment,
            opts=child_opts,
        )
        self.indexer_role = LambdaRoleComponent(
            name=indexer_name,
            environment=environment,
            read_bucket_arn=bucket_outputs.bucket_arn,
            opts=child_opts,
        )

        # --- Layer 4: Compute ---
        shared_variables = {
            ENV_VARS["backtrace"]: config.diagnostics_flag,
            ENV_VARS["mount_path"]: config.mount_path,
        }

        self.searcher = CustomRuntimeFunctionComponent(
            name=searcher_name,
            environment=environment,
            config=config,
            role_arn=self.searcher_role.role.arn,
            artifact_path=searcher_artifact,
            subnet_ids=vpc_outputs.subnet_ids,
            security_group_id=sg_outputs.lambda_sg_id,
            access_point_arn=efs_outputs.access_point_arn,
            variables=dict(shared_variables),
            depends_on=self.file_system.mount_targets,
            opts=child_opts,
        )

        self.indexer = CustomRuntimeFunctionComponent(
            name=indexer_name,
            environment=environment,
            config=config,
            role_arn=self.indexer_role.role.arn,
            artifact_path=indexer_artifact,
            subnet_ids=vpc_outputs.subnet_ids,
            security_group_id=sg_outputs.lambda_sg_id,
            access_point_arn=efs_outputs.access_point_arn,
            variables={
                **shared_variables,
                ENV_VARS["posts_bucket"]: bucket_outputs.bucket_name,
            },
            depends_on=self.file_system.mount_targets,
            opts=child_opts,
        )
        searcher_outputs = self.searcher.get_outputs()
        indexer_outputs = self.indexer.get_outputs()

        # --- Layer 5: Optional triggers ---
        self.indexer_schedule: IndexerScheduleComponent | None = None
        if config.indexer_schedule:
            self.indexer_schedule = IndexerScheduleComponent(
                name=indexer_name,
                environment=environment,
                schedule_expression=config.indexer_schedule,
                function_arn=indexer_outputs.function_arn,
                function_name=indexer_outputs.function_name,
                opts=child_opts,
            )

        self.search_url: FunctionUrlComponent | None = None
        if config.enable_search_url:
            pulumi.log.warn("Searcher is exposed through a public function URL")
            self.search_url = FunctionUrlComponent(
                name=searcher_name,
                function_name=searcher_outputs.function_name,
                opts=child_opts,
            )

        self._outputs = SearchStackOutputs(
            vpc_id=vpc_outputs.vpc_id,
            posts_bucket_name=bucket_outputs.bucket_name,
            file_system_id=efs_outputs.file_system_id,
            access_point_id=efs_outputs.access_point_id,
            searcher_function_name=searcher_outputs.function_name,
            indexer_function_name=indexer_outputs.function_name,
            search_url=self.search_url.get_outputs().url if self.search_url else None,
        )

        self.register_outputs(self._outputs.to_exports())

    def get_outputs(self) -> SearchStackOutputs:
        """Get search stack output values."""
        return self._outputs
