"""Application load balancer in front of the converter instance."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pulumi
from pulumi import ResourceOptions
from pulumi_aws import lb

from ..constants import APP_PORT, PUBLIC_PORT, tag_name

__all__ = ["AppLoadBalancer", "HealthCheckPolicy"]


@dataclass(frozen=True)
class HealthCheckPolicy:
    """Target group health check.

    A target turns healthy after ``healthy_threshold`` consecutive passes
    and unhealthy after ``unhealthy_threshold`` consecutive failures.
    """

    path: str = "/"
    matcher: str = "200-399"
    interval: int = 30
    timeout: int = 5
    healthy_threshold: int = 2
    unhealthy_threshold: int = 2

    def __post_init__(self) -> None:
        if self.healthy_threshold < 1 or self.unhealthy_threshold < 1:
            raise ValueError("health check thresholds must be >= 1")
        if self.timeout <= 0 or self.interval <= self.timeout:
            raise ValueError(
                f"health check interval ({self.interval}s) must exceed timeout ({self.timeout}s) > 0"
            )

    def to_args(self) -> lb.TargetGroupHealthCheckArgs:
        return lb.TargetGroupHealthCheckArgs(
            path=self.path,
            protocol="HTTP",
            matcher=self.matcher,
            interval=self.interval,
            timeout=self.timeout,
            healthy_threshold=self.healthy_threshold,
            unhealthy_threshold=self.unhealthy_threshold,
        )


class AppLoadBalancer(pulumi.ComponentResource):
    """Internet-facing ALB forwarding every port 80 request to one instance."""

    load_balancer: lb.LoadBalancer
    target_group: lb.TargetGroup
    attachment: lb.TargetGroupAttachment
    listener: lb.Listener
    dns_name: pulumi.Output[str]
    url: pulumi.Output[str]
    target_group_arn: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        *,
        vpc_id: pulumi.Input[str],
        subnet_ids: List[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        instance_id: pulumi.Input[str],
        health_check: HealthCheckPolicy | None = None,
        opts: ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:network:AppLoadBalancer", name, None, opts)

        child_opts = ResourceOptions(parent=self)
        health_check = health_check or HealthCheckPolicy()

        self.load_balancer = lb.LoadBalancer(
            f"{name}-lb",
            internal=False,
            load_balancer_type="application",
            security_groups=[security_group_id],
            subnets=subnet_ids,
            tags={"Name": tag_name("alb")},
            opts=child_opts,
        )

        self.target_group = lb.TargetGroup(
            f"{name}-tg",
            port=APP_PORT,
            protocol="HTTP",
            target_type="instance",
            vpc_id=vpc_id,
            health_check=health_check.to_args(),
            tags={"Name": tag_name("tg")},
            opts=child_opts,
        )

        self.attachment = lb.TargetGroupAttachment(
            f"{name}-tg-attachment",
            target_group_arn=self.target_group.arn,
            target_id=instance_id,
            port=APP_PORT,
            opts=child_opts,
        )

        self.listener = lb.Listener(
            f"{name}-listener",
            load_balancer_arn=self.load_balancer.arn,
            port=PUBLIC_PORT,
            protocol="HTTP",
            default_actions=[
                lb.ListenerDefaultActionArgs(type="forward", target_group_arn=self.target_group.arn),
            ],
            opts=child_opts,
        )

        self.dns_name = self.load_balancer.dns_name
        self.url = self.dns_name.apply(lambda dns: f"http://{dns}")
        self.target_group_arn = self.target_group.arn

        self.register_outputs({
            "dns_name": self.dns_name,
            "url": self.url,
            "target_group_arn": self.target_group_arn,
        })
