"""
Security Groups Component for the function-to-filesystem path.

Access Patterns:
- Functions: outbound only. Egress is open so the functions can reach the S3
  gateway prefix list and the EFS mount targets; with no gateway in the VPC
  nothing leaves the AWS network.
- Filesystem: accepts NFS (TCP 2049) ONLY from the function security group.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.configs.constants import PORTS
from search_infra.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    lambda_sg_id: pulumi.Output[str]
    efs_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the Lambda functions and the EFS mount targets.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        self.lambda_sg = aws.ec2.SecurityGroup(
            f"{name}-lambda-sg",
            description="Security group for searcher and indexer Lambdas",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-lambda-sg"),
            opts=child_opts,
        )

        self.efs_sg = aws.ec2.SecurityGroup(
            f"{name}-efs-sg",
            description="Security group for EFS mount targets",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-efs-sg"),
            opts=child_opts,
        )

        self._create_rules(name, child_opts)

        self.register_outputs({
            "lambda_sg_id": self.lambda_sg.id,
            "efs_sg_id": self.efs_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        # Lambda: Allow all outbound (S3 prefix list, mount targets)
        aws.vpc.SecurityGroupEgressRule(
            f"{name}-lambda-egress-all",
            security_group_id=self.lambda_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=opts,
        )

        # EFS: Allow NFS from lambda
        aws.vpc.SecurityGroupIngressRule(
            f"{name}-efs-ingress-lambda",
            security_group_id=self.efs_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["nfs"],
            to_port=PORTS["nfs"],
            referenced_security_group_id=self.lambda_sg.id,
            description="NFS from lambda",
            opts=opts,
        )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            lambda_sg_id=self.lambda_sg.id,
            efs_sg_id=self.efs_sg.id,
        )
