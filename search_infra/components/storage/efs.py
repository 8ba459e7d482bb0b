"""
Shared Filesystem Component (EFS + access point).

Why EFS?
- Lambda invocations are stateless. The indexer writes the search index to
  disk and the searcher opens it on every cold start; EFS is the mutable
  on-disk state both functions share across invocations.

Layout:
1. FileSystem: unencrypted at rest, destroyed with the stack.
2. Mount Targets: one per isolated subnet, guarded by the EFS security group.
3. Access Point: the ONLY mount surface offered to the functions.
   - Root directory (e.g. /lambda) is created owned by uid/gid 1001, mode 750.
   - Every NFS operation through it runs as uid/gid 1001, so files written by
     the indexer are readable by the searcher.

No locking is provided here; coordinating concurrent writers on the mounted
files is up to the function code.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.configs.constants import (
    ACCESS_POINT_PERMISSIONS,
    POSIX_IDENTITY,
    RemovalPolicy,
)
from search_infra.utils.tags import create_tags, stateful_tags


@dataclass
class EfsOutputs:
    """Output values from shared filesystem component."""
    file_system_id: pulumi.Output[str]
    file_system_arn: pulumi.Output[str]
    access_point_id: pulumi.Output[str]
    access_point_arn: pulumi.Output[str]
    mount_target_ids: list[pulumi.Output[str]]


class SharedFileSystemComponent(pulumi.ComponentResource):
    """
    EFS filesystem with per-subnet mount targets and one identity-pinned access point.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        access_point_path: str = "/lambda",
        removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:SharedFileSystem", name, None, opts)
        self.removal_policy = removal_policy
        self.encrypted = False
        self.access_point_path = access_point_path

        child_opts = pulumi.ResourceOptions(parent=self)

        self.file_system = aws.efs.FileSystem(
            f"{name}-efs",
            encrypted=self.encrypted,
            performance_mode="generalPurpose",
            throughput_mode="bursting",
            tags=stateful_tags(environment, f"{name}-efs", removal_policy),
            opts=pulumi.ResourceOptions(
                parent=self,
                retain_on_delete=removal_policy is RemovalPolicy.RETAIN,
            ),
        )

        # EFS allows one mount target per AZ; subnets are already one per AZ
        self.mount_targets: list[aws.efs.MountTarget] = [
            aws.efs.MountTarget(
                f"{name}-efs-mount-{index + 1}",
                file_system_id=self.file_system.id,
                subnet_id=subnet_id,
                security_groups=[security_group_id],
                opts=child_opts,
            )
            for index, subnet_id in enumerate(subnet_ids)
        ]

        self.access_point = aws.efs.AccessPoint(
            f"{name}-access-point",
            file_system_id=self.file_system.id,
            posix_user=aws.efs.AccessPointPosixUserArgs(
                uid=POSIX_IDENTITY["uid"],
                gid=POSIX_IDENTITY["gid"],
            ),
            root_directory=aws.efs.AccessPointRootDirectoryArgs(
                path=access_point_path,
                creation_info=aws.efs.AccessPointRootDirectoryCreationInfoArgs(
                    owner_uid=POSIX_IDENTITY["uid"],
                    owner_gid=POSIX_IDENTITY["gid"],
                    permissions=ACCESS_POINT_PERMISSIONS,
                ),
            ),
            tags=create_tags(environment, f"{name}-access-point"),
            opts=child_opts,
        )

        self.register_outputs({
            "file_system_id": self.file_system.id,
            "file_system_arn": self.file_system.arn,
            "access_point_id": self.access_point.id,
            "access_point_arn": self.access_point.arn,
        })

    def get_outputs(self) -> EfsOutputs:
        """Get shared filesystem output values."""
        return EfsOutputs(
            file_system_id=self.file_system.id,
            file_system_arn=self.file_system.arn,
            access_point_id=self.access_point.id,
            access_point_arn=self.access_point.arn,
            mount_target_ids=[target.id for target in self.mount_targets],
        )
