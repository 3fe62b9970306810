"""Pulumi components for the video converter deployment.

    from converter_infra.components import ComputeInstance, SecurityGroups
"""
from .network import DefaultNetwork, lookup_default_network  # noqa: F401
from .security import SecurityGroups  # noqa: F401
from .ec2 import ComputeInstance, lookup_ubuntu_ami, resolve_ami_id  # noqa: F401
from .lb import AppLoadBalancer, HealthCheckPolicy  # noqa: F401
