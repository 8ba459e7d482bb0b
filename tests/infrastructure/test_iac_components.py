"""
Detailed tests for individual infrastructure components.

Validates:
1. Each component class has required attributes
2. Components are properly organized in packages
3. Component-level behavior outside the full stack
4. Output dataclasses have required fields
"""

import json

import pulumi
import pytest


class TestNetworkingComponents:
    """Tests for networking infrastructure components."""

    def test_vpc_component_attributes(self):
        """VpcComponent should have essential attributes."""
        from search_infra.components.networking.vpc import VpcComponent

        assert hasattr(VpcComponent, "get_outputs")
        assert hasattr(VpcComponent, "_create_route_tables")

    def test_vpc_outputs_has_no_nat_gateway_id(self):
        """The isolated network has no NAT gateway to report."""
        from search_infra.components.networking.vpc import VpcOutputs

        fields = {f.name for f in VpcOutputs.__dataclass_fields__.values()}
        assert "nat_gateway_id" not in fields
        assert "availability_zones" in fields

    def test_security_group_outputs(self):
        from search_infra.components.networking.security_groups import SecurityGroupOutputs

        fields = {f.name for f in SecurityGroupOutputs.__dataclass_fields__.values()}
        assert fields == {"lambda_sg_id", "efs_sg_id"}

    def test_efs_ingress_limited_to_nfs_from_functions(self, mocks, read_prop):
        """EFS accepts NFS from the function security group only."""
        from search_infra.components.networking.security_groups import SecurityGroupsComponent

        @pulumi.runtime.test
        def declare():
            SecurityGroupsComponent("sg", environment="test", vpc_id="vpc-1")

        declare()

        ingress = [
            r.inputs for r in mocks.of_type("aws:vpc/securityGroupIngressRule:SecurityGroupIngressRule")
        ]
        assert len(ingress) == 1
        assert read_prop(ingress[0], "from_port") == 2049
        assert read_prop(ingress[0], "to_port") == 2049
        assert read_prop(ingress[0], "referenced_security_group_id") == "sg-lambda-sg_id"

    def test_availability_zones_taken_in_region_order(self, mocks):
        from search_infra.components.networking.vpc import VpcComponent

        assert VpcComponent._select_availability_zones(1) == ["us-east-1a"]
        assert VpcComponent._select_availability_zones(2) == ["us-east-1a", "us-east-1b"]

    def test_region_without_enough_zones(self, mocks):
        """Asking for more zones than the region offers fails instead of shrinking the network."""
        from search_infra.components.networking.vpc import VpcComponent

        with pytest.raises(ValueError, match="needs 4 availability zones, region offers 3"):
            VpcComponent._select_availability_zones(4)


class TestSecurityComponents:
    """Tests for security infrastructure components."""

    def test_lambda_role_component_attributes(self):
        from search_infra.components.security.iam_roles import LambdaRoleComponent

        assert hasattr(LambdaRoleComponent, "get_outputs")
        assert hasattr(LambdaRoleComponent, "has_bucket_read")

    def test_bucket_read_policy_document(self):
        """Read policy covers the bucket and its objects, nothing else."""
        from search_infra.components.security.iam_roles import bucket_read_policy

        document = json.loads(bucket_read_policy("arn:aws:s3:::posts"))
        statement = document["Statement"][0]

        assert document["Version"] == "2012-10-17"
        assert statement["Resource"] == ["arn:aws:s3:::posts", "arn:aws:s3:::posts/*"]
        assert set(statement["Action"]) == {"s3:GetObject*", "s3:GetBucket*", "s3:List*"}

    def test_role_without_grant(self, mocks):
        """A role declared without a bucket carries only managed policies."""
        from search_infra.components.security.iam_roles import LambdaRoleComponent

        holder = {}

        @pulumi.runtime.test
        def declare():
            holder["role"] = LambdaRoleComponent("searcher", environment="test")

        declare()

        assert holder["role"].has_bucket_read is False
        assert mocks.of_type("aws:iam/rolePolicy:RolePolicy") == []
        assert len(mocks.of_type("aws:iam/rolePolicyAttachment:RolePolicyAttachment")) == 3


class TestStorageComponents:
    """Tests for storage infrastructure components."""

    def test_posts_bucket_outputs(self):
        from search_infra.components.storage.posts_bucket import PostsBucketOutputs

        fields = {f.name for f in PostsBucketOutputs.__dataclass_fields__.values()}
        assert fields == {"bucket_name", "bucket_arn"}

    def test_retained_bucket_is_not_emptied(self, mocks, read_prop):
        """RETAIN keeps objects on teardown."""
        from search_infra.components.storage.posts_bucket import PostsBucketComponent
        from search_infra.configs.constants import RemovalPolicy
        from search_infra.utils.naming import ResourceNamer

        holder = {}

        @pulumi.runtime.test
        def declare():
            holder["bucket"] = PostsBucketComponent(
                "archive",
                environment="test",
                namer=ResourceNamer("rust-search", "test"),
                removal_policy=RemovalPolicy.RETAIN,
            )

        declare()

        bucket = mocks.of_type("aws:s3/bucket:Bucket")[0].inputs
        assert read_prop(bucket, "force_destroy") is False
        assert mocks.retain_on_delete["archive-posts"] is True
        assert read_prop(bucket, "bucket_prefix") == "rust-search-test-posts-"
        assert holder["bucket"].removal_policy is RemovalPolicy.RETAIN

    def test_public_access_blocked(self, mocks, read_prop):
        from search_infra.components.storage.posts_bucket import PostsBucketComponent
        from search_infra.utils.naming import ResourceNamer

        @pulumi.runtime.test
        def declare():
            PostsBucketComponent("posts", environment="test", namer=ResourceNamer("rust-search", "test"))

        declare()

        blocks = mocks.of_type("aws:s3/bucketPublicAccessBlock:BucketPublicAccessBlock")
        assert len(blocks) == 1
        assert read_prop(blocks[0].inputs, "block_public_policy") is True

    def test_efs_outputs_has_access_point(self):
        from search_infra.components.storage.efs import EfsOutputs

        fields = {f.name for f in EfsOutputs.__dataclass_fields__.values()}
        assert {"access_point_arn", "mount_target_ids"}.issubset(fields)


class TestMessagingComponents:
    """Tests for messaging infrastructure components."""

    @pytest.mark.parametrize("expression", ["hourly", "every 5 minutes", ""])
    def test_schedule_rejects_unknown_expressions(self, mocks, expression):
        from search_infra.components.messaging.indexer_schedule import IndexerScheduleComponent

        with pytest.raises(ValueError, match="rate"):
            IndexerScheduleComponent(
                "schedule",
                environment="test",
                schedule_expression=expression,
                function_arn="arn:aws:lambda:us-east-1:123456789012:function:indexer",
                function_name="indexer",
            )

    def test_cron_expression_accepted(self, mocks, read_prop):
        from search_infra.components.messaging.indexer_schedule import IndexerScheduleComponent

        @pulumi.runtime.test
        def declare():
            IndexerScheduleComponent(
                "schedule",
                environment="test",
                schedule_expression="cron(0 3 * * ? *)",
                function_arn="arn:aws:lambda:us-east-1:123456789012:function:indexer",
                function_name="indexer",
            )

        declare()

        rules = mocks.of_type("aws:cloudwatch/eventRule:EventRule")
        assert read_prop(rules[0].inputs, "schedule_expression") == "cron(0 3 * * ? *)"


class TestComputeComponents:
    """Tests for compute infrastructure components."""

    def test_lambda_outputs_has_function_name(self):
        from search_infra.components.compute.lambda_function import LambdaOutputs

        fields = {f.name for f in LambdaOutputs.__dataclass_fields__.values()}
        assert {"function_name", "function_arn", "mount_path"}.issubset(fields)

    def test_log_group_matches_function_name(self, declare_stack, mocks, read_prop):
        """Each function logs to a retained group named after it."""
        declare_stack(log_retention_days=7)

        groups = {
            read_prop(r.inputs, "name"): read_prop(r.inputs, "retention_in_days")
            for r in mocks.of_type("aws:cloudwatch/logGroup:LogGroup")
        }
        assert groups == {
            "/aws/lambda/rust-search-test-searcher": 7,
            "/aws/lambda/rust-search-test-indexer": 7,
        }


class TestComponentPackageStructure:
    """Tests for component package organization."""

    def test_all_component_packages_have_init(self, iac_project_root):
        """All component packages should have __init__.py."""
        for package in ["networking", "security", "storage", "messaging", "compute", "edge"]:
            init_file = iac_project_root / "components" / package / "__init__.py"
            assert init_file.exists(), f"Missing __init__.py in {package}"

    def test_config_packages_have_init(self, iac_project_root):
        """Config, utils and scripts packages should have __init__.py."""
        for package in ["configs", "utils", "components", "scripts"]:
            assert (iac_project_root / package / "__init__.py").exists(), package


class TestComponentExports:
    """Tests for component __init__ files."""

    def test_networking_exports_components(self):
        from search_infra.components.networking import (
            SecurityGroupsComponent,
            VpcComponent,
            VpcEndpointsComponent,
        )

        assert VpcComponent is not None
        assert SecurityGroupsComponent is not None
        assert VpcEndpointsComponent is not None

    def test_storage_exports_components(self):
        from search_infra.components.storage import PostsBucketComponent, SharedFileSystemComponent

        assert PostsBucketComponent is not None
        assert SharedFileSystemComponent is not None

    def test_security_exports_components(self):
        from search_infra.components.security import LambdaRoleComponent, bucket_read_policy

        assert LambdaRoleComponent is not None
        assert callable(bucket_read_policy)

    def test_compute_messaging_edge_exports(self):
        from search_infra.components.compute import CustomRuntimeFunctionComponent
        from search_infra.components.edge import FunctionUrlComponent
        from search_infra.components.messaging import IndexerScheduleComponent

        assert CustomRuntimeFunctionComponent is not None
        assert FunctionUrlComponent is not None
        assert IndexerScheduleComponent is not None
