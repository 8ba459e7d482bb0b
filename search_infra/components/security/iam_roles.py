"""
IAM role component for the Lambda functions.

Creates, per function:
- Execution role assumable by the Lambda service
- Managed policies: basic execution (logs), VPC access (ENIs), EFS client read/write
- Optional read grant on a bucket (the indexer's access to the posts bucket)
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.configs.constants import LAMBDA_MANAGED_POLICIES, S3_READ_ACTIONS
from search_infra.utils.tags import create_tags


LAMBDA_ASSUME_ROLE_POLICY = json.dumps({
    "Version": "2012-10-17",
    "Statement": [{
        "Effect": "Allow",
        "Principal": {"Service": "lambda.amazonaws.com"},
        "Action": "sts:AssumeRole",
    }],
})


def bucket_read_policy(bucket_arn: str) -> str:
    """
    Build a read-only policy document for a bucket and its objects.

    Args:
        bucket_arn: ARN of the bucket

    Returns:
        JSON policy document
    """
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Action": S3_READ_ACTIONS,
            "Resource": [bucket_arn, f"{bucket_arn}/*"],
        }],
    })


@dataclass
class LambdaRoleOutputs:
    """Output values from Lambda role component."""
    role_arn: pulumi.Output[str]
    role_name: pulumi.Output[str]


class LambdaRoleComponent(pulumi.ComponentResource):
    """
    Execution role for a single Lambda function.

    Grants nothing beyond the default execution permissions unless
    `read_bucket_arn` is given.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        read_bucket_arn: pulumi.Input[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:LambdaRole", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.role = aws.iam.Role(
            f"{name}-role",
            assume_role_policy=LAMBDA_ASSUME_ROLE_POLICY,
            tags=create_tags(environment, f"{name}-role"),
            opts=child_opts,
        )

        for suffix, policy_arn in LAMBDA_MANAGED_POLICIES.items():
            aws.iam.RolePolicyAttachment(
                f"{name}-{suffix}",
                role=self.role.name,
                policy_arn=policy_arn,
                opts=child_opts,
            )

        self.read_policy: aws.iam.RolePolicy | None = None
        if read_bucket_arn is not None:
            self.read_policy = aws.iam.RolePolicy(
                f"{name}-bucket-read",
                role=self.role.id,
                policy=pulumi.Output.from_input(read_bucket_arn).apply(bucket_read_policy),
                opts=child_opts,
            )

        self.register_outputs({
            "role_arn": self.role.arn,
            "role_name": self.role.name,
        })

    @property
    def has_bucket_read(self) -> bool:
        """Whether this role carries a bucket read grant."""
        return self.read_policy is not None

    def get_outputs(self) -> LambdaRoleOutputs:
        """Get Lambda role output values."""
        return LambdaRoleOutputs(
            role_arn=self.role.arn,
            role_name=self.role.name,
        )
