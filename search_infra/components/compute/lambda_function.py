"""
Custom runtime Lambda component for the Rust searcher and indexer.

Creates:
- CloudWatch log group for function logs
- Lambda function (provided.al2, zip of the prebuilt bootstrap binary) in the
  isolated subnets, with the EFS access point mounted at a fixed path

The function is created after the EFS mount targets: Lambda rejects a
filesystem config while no mount target is available in its subnets.
"""

from dataclasses import dataclass
from pathlib import Path

import pulumi
import pulumi_aws as aws

from search_infra.configs.base import StackConfig
from search_infra.configs.constants import LAMBDA_HANDLER, LAMBDA_RUNTIME
from search_infra.utils.tags import create_tags, function_tags


@dataclass
class LambdaOutputs:
    """Output values from Lambda component."""
    function_arn: pulumi.Output[str]
    function_name: pulumi.Output[str]
    mount_path: str


class CustomRuntimeFunctionComponent(pulumi.ComponentResource):
    """
    Lambda function running a self-contained binary on the custom runtime.

    The artifact directory is zipped as-is; it must contain `bootstrap`.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        role_arn: pulumi.Input[str],
        artifact_path: str | Path,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        access_point_arn: pulumi.Input[str],
        variables: dict[str, pulumi.Input[str]],
        depends_on: list[pulumi.Resource] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:CustomRuntimeFunction", name, None, opts)
        self.mount_path = config.mount_path
        self.variables = variables

        child_opts = pulumi.ResourceOptions(parent=self)

        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=f"/aws/lambda/{name}",
            retention_in_days=config.log_retention_days,
            tags=create_tags(environment, f"{name}-logs"),
            opts=child_opts,
        )

        self.function = aws.lambda_.Function(
            f"{name}-function",
            name=name,
            role=role_arn,
            code=pulumi.FileArchive(str(artifact_path)),
            runtime=LAMBDA_RUNTIME,
            # Ignored by the custom runtime, the bootstrap binary is the entry point
            handler=LAMBDA_HANDLER,
            package_type="Zip",
            memory_size=config.lambda_memory,
            timeout=config.lambda_timeout,
            vpc_config=aws.lambda_.FunctionVpcConfigArgs(
                subnet_ids=subnet_ids,
                security_group_ids=[security_group_id],
            ),
            file_system_config=aws.lambda_.FunctionFileSystemConfigArgs(
                arn=access_point_arn,
                local_mount_path=config.mount_path,
            ),
            environment=aws.lambda_.FunctionEnvironmentArgs(
                variables=variables,
            ),
            tags=function_tags(environment, f"{name}-function", config.mount_path),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.log_group, *(depends_on or [])],
            ),
        )

        self.register_outputs({
            "function_arn": self.function.arn,
            "function_name": self.function.name,
        })

    def get_outputs(self) -> LambdaOutputs:
        """Get Lambda output values."""
        return LambdaOutputs(
            function_arn=self.function.arn,
            function_name=self.function.name,
            mount_path=self.mount_path,
        )
