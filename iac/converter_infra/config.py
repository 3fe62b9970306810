"""Stack configuration for the video converter deployment.

Values come from the Pulumi stack config, e.g.::

    pulumi config set appRepoUrl https://github.com/acme/video-converter.git
    pulumi config set instanceType t3.small
    pulumi config set keyPairName my-key
"""
from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Optional

import pulumi

from .constants import ANY_IPV4, DEFAULT_INSTANCE_TYPE, PLACEHOLDER_KEY_PAIR

__all__ = ["DeploymentConfig", "load_config"]


@dataclass(frozen=True)
class DeploymentConfig:
    """Typed view of the stack configuration."""

    app_repo_url: str
    instance_type: str = DEFAULT_INSTANCE_TYPE
    key_pair_name: str = PLACEHOLDER_KEY_PAIR
    ssh_cidr: str = ANY_IPV4
    ami_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.app_repo_url.strip():
            raise ValueError("appRepoUrl must not be empty")
        if not self.instance_type.strip():
            raise ValueError("instanceType must not be empty")
        try:
            ipaddress.IPv4Network(self.ssh_cidr)
        except ValueError as e:
            raise ValueError(f"sshCidr is not a valid IPv4 CIDR block: {self.ssh_cidr!r}") from e

    @property
    def uses_placeholder_key(self) -> bool:
        return self.key_pair_name == PLACEHOLDER_KEY_PAIR

    @property
    def ssh_open_to_world(self) -> bool:
        return self.ssh_cidr == ANY_IPV4


def load_config(config: pulumi.Config | None = None) -> DeploymentConfig:
    """Read the deployment settings, failing fast when ``appRepoUrl`` is unset.

    ``Config.require`` raises ``pulumi.ConfigMissingError`` so the program
    stops before any resource is declared.
    """
    config = config or pulumi.Config()

    cfg = DeploymentConfig(
        app_repo_url=config.require("appRepoUrl"),
        instance_type=config.get("instanceType") or DEFAULT_INSTANCE_TYPE,
        key_pair_name=config.get("keyPairName") or PLACEHOLDER_KEY_PAIR,
        ssh_cidr=config.get("sshCidr") or ANY_IPV4,
        ami_id=config.get("amiId") or None,
    )

    if cfg.uses_placeholder_key:
        pulumi.log.warn(
            f"keyPairName is the placeholder '{PLACEHOLDER_KEY_PAIR}'; "
            "set it with `pulumi config set keyPairName <name>`"
        )
    if cfg.ssh_open_to_world:
        # Restrict with `pulumi config set sshCidr <your-ip>/32`
        pulumi.log.warn(f"SSH (port 22) is open to {ANY_IPV4}")

    return cfg
