"""Security groups for the load balancer and the application instance."""
from __future__ import annotations

import pulumi
from pulumi import ResourceOptions
from pulumi_aws import ec2

from ..constants import ANY_IPV4, APP_PORT, PUBLIC_PORT, SSH_PORT, tag_name

__all__ = ["SecurityGroups"]


def _allow_all_egress() -> list:
    return [ec2.SecurityGroupEgressArgs(protocol="-1", from_port=0, to_port=0, cidr_blocks=[ANY_IPV4])]


class SecurityGroups(pulumi.ComponentResource):
    """Two groups: a public one for the ALB and one for the instance.

    The instance only accepts application traffic from members of the ALB
    group, plus SSH from ``ssh_cidr``.
    """

    alb_sg: ec2.SecurityGroup
    instance_sg: ec2.SecurityGroup
    alb_sg_id: pulumi.Output[str]
    instance_sg_id: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        *,
        vpc_id: pulumi.Input[str],
        ssh_cidr: str = ANY_IPV4,
        opts: ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:network:SecurityGroups", name, None, opts)

        child_opts = ResourceOptions(parent=self)

        self.alb_sg = ec2.SecurityGroup(
            f"{name}-alb-sg",
            vpc_id=vpc_id,
            description="Allow HTTP inbound traffic for ALB",
            ingress=[
                ec2.SecurityGroupIngressArgs(
                    protocol="tcp", from_port=PUBLIC_PORT, to_port=PUBLIC_PORT, cidr_blocks=[ANY_IPV4]
                ),
            ],
            egress=_allow_all_egress(),
            tags={"Name": tag_name("alb-sg")},
            opts=child_opts,
        )

        self.instance_sg = ec2.SecurityGroup(
            f"{name}-instance-sg",
            vpc_id=vpc_id,
            description="Allow HTTP from ALB and SSH",
            ingress=[
                # App port, only from the ALB
                ec2.SecurityGroupIngressArgs(
                    protocol="tcp", from_port=APP_PORT, to_port=APP_PORT, security_groups=[self.alb_sg.id]
                ),
                # SSH
                ec2.SecurityGroupIngressArgs(
                    protocol="tcp", from_port=SSH_PORT, to_port=SSH_PORT, cidr_blocks=[ssh_cidr]
                ),
            ],
            # apt-get, git clone and npm need outbound access
            egress=_allow_all_egress(),
            tags={"Name": tag_name("instance-sg")},
            opts=child_opts,
        )

        self.alb_sg_id = self.alb_sg.id
        self.instance_sg_id = self.instance_sg.id

        self.register_outputs({"alb_sg_id": self.alb_sg_id, "instance_sg_id": self.instance_sg_id})
