"""Assembles the deployment: network, security groups, instance and ALB."""
from __future__ import annotations

from dataclasses import dataclass

import pulumi

from .bootstrap import render_user_data
from .components import (
    AppLoadBalancer,
    ComputeInstance,
    DefaultNetwork,
    SecurityGroups,
    lookup_default_network,
    resolve_ami_id,
)
from .config import DeploymentConfig

__all__ = ["VideoConverterStack", "create_stack", "export_outputs"]


@dataclass
class VideoConverterStack:
    network: DefaultNetwork
    security: SecurityGroups
    instance: ComputeInstance
    load_balancer: AppLoadBalancer


def create_stack(cfg: DeploymentConfig) -> VideoConverterStack:
    network = lookup_default_network()
    # Raises on a default VPC without subnets, before anything is declared
    instance_subnet_id = network.first_subnet_id

    security = SecurityGroups("app", vpc_id=network.vpc_id, ssh_cidr=cfg.ssh_cidr)

    instance = ComputeInstance(
        "app",
        subnet_id=instance_subnet_id,
        security_group_id=security.instance_sg_id,
        ami_id=resolve_ami_id(cfg.ami_id),
        user_data=render_user_data(cfg.app_repo_url),
        instance_type=cfg.instance_type,
        key_name=cfg.key_pair_name,
    )

    load_balancer = AppLoadBalancer(
        "app",
        vpc_id=network.vpc_id,
        subnet_ids=network.subnet_ids,
        security_group_id=security.alb_sg_id,
        instance_id=instance.instance_id,
    )

    return VideoConverterStack(
        network=network,
        security=security,
        instance=instance,
        load_balancer=load_balancer,
    )


def export_outputs(stack: VideoConverterStack) -> None:
    # Public DNS name of the ALB, where the app is served on port 80
    pulumi.export("albUrl", stack.load_balancer.dns_name)
    pulumi.export("albEndpoint", stack.load_balancer.url)
    pulumi.export("instanceId", stack.instance.instance_id)
