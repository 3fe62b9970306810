"""Lookup of the account's default VPC and its subnets."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pulumi
from pulumi_aws import ec2

__all__ = ["DefaultNetwork", "lookup_default_network"]


@dataclass(frozen=True)
class DefaultNetwork:
    """Default VPC id plus its subnet ids, in provider order."""

    vpc_id: str
    subnet_ids: List[str] = field(default_factory=list)

    @property
    def first_subnet_id(self) -> str:
        if not self.subnet_ids:
            raise ValueError(f"default VPC {self.vpc_id} has no subnets")
        return self.subnet_ids[0]


def lookup_default_network() -> DefaultNetwork:
    """Query the default VPC and every subnet attached to it.

    Provider errors (no default VPC in the region, etc.) propagate as-is.
    """
    vpc = ec2.get_vpc(default=True)
    subnets = ec2.get_subnets(
        filters=[ec2.GetSubnetsFilterArgs(name="vpc-id", values=[vpc.id])],
    )

    network = DefaultNetwork(vpc_id=vpc.id, subnet_ids=list(subnets.ids or []))
    pulumi.log.info(f"Using default VPC {network.vpc_id} with {len(network.subnet_ids)} subnets")
    return network
