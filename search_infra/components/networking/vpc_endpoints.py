"""
VPC Endpoints Component for private S3 access.

The isolated subnets have no internet route, so the indexer reaches the posts
bucket through an S3 Gateway Endpoint:
- Mechanism: adds a prefix-list route to the given route tables.
- Cost: free, no ENIs, no security group.
- Scope: S3 only. No interface endpoints are created.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.utils.tags import create_tags


@dataclass
class VpcEndpointOutputs:
    """Output values from VPC endpoints component."""
    s3_endpoint_id: pulumi.Output[str]
    s3_service_name: str


class VpcEndpointsComponent(pulumi.ComponentResource):
    """
    S3 gateway endpoint attached to the isolated route tables.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        route_table_ids: list[pulumi.Input[str]],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:VpcEndpoints", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        region = aws.get_region()
        self.s3_service_name = f"com.amazonaws.{region.id}.s3"

        self.s3_endpoint = aws.ec2.VpcEndpoint(
            f"{name}-s3-endpoint",
            vpc_id=vpc_id,
            service_name=self.s3_service_name,
            vpc_endpoint_type="Gateway",
            route_table_ids=route_table_ids,
            tags=create_tags(environment, f"{name}-s3-endpoint"),
            opts=child_opts,
        )

        self.register_outputs({
            "s3_endpoint_id": self.s3_endpoint.id,
        })

    def get_outputs(self) -> VpcEndpointOutputs:
        """Get VPC endpoint output values."""
        return VpcEndpointOutputs(
            s3_endpoint_id=self.s3_endpoint.id,
            s3_service_name=self.s3_service_name,
        )
