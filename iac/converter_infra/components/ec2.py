"""EC2 instance running the video converter."""
from __future__ import annotations

from typing import Optional

import pulumi
from pulumi import ResourceOptions
from pulumi_aws import ec2

from ..constants import (
    CANONICAL_OWNER_ID,
    UBUNTU_AMI_NAME_PATTERN,
    UBUNTU_AMI_VIRTUALIZATION,
    tag_name,
)

__all__ = ["ComputeInstance", "lookup_ubuntu_ami", "resolve_ami_id"]


def lookup_ubuntu_ami() -> str:
    """Id of the newest Canonical Ubuntu 22.04 amd64 image.

    Not pinned: a later `pulumi up` may pick a newer image and replace the
    instance.
    """
    ami = ec2.get_ami(
        most_recent=True,
        owners=[CANONICAL_OWNER_ID],
        filters=[
            ec2.GetAmiFilterArgs(name="name", values=[UBUNTU_AMI_NAME_PATTERN]),
            ec2.GetAmiFilterArgs(name="virtualization-type", values=[UBUNTU_AMI_VIRTUALIZATION]),
        ],
    )
    return ami.id


def resolve_ami_id(pinned: Optional[str] = None) -> str:
    if pinned:
        pulumi.log.info(f"Using pinned AMI {pinned}")
        return pinned
    ami_id = lookup_ubuntu_ami()
    pulumi.log.info(f"Resolved most recent Ubuntu AMI {ami_id}")
    return ami_id


class ComputeInstance(pulumi.ComponentResource):
    """Single Ubuntu instance that bootstraps the app from ``user_data``."""

    instance: ec2.Instance
    instance_id: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        *,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        ami_id: pulumi.Input[str],
        user_data: pulumi.Input[str],
        instance_type: str,
        key_name: Optional[str] = None,
        opts: ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:Instance", name, None, opts)

        child_opts = ResourceOptions(parent=self)

        self.instance = ec2.Instance(
            f"{name}-instance",
            instance_type=instance_type,
            ami=ami_id,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            key_name=key_name,
            user_data=user_data,
            tags={"Name": tag_name("instance")},
            opts=child_opts,
        )

        self.instance_id = self.instance.id

        self.register_outputs({"instance_id": self.instance_id})
