"""User data script that installs and starts the converter on first boot."""
from __future__ import annotations

import shlex
from typing import Iterable

from .constants import (
    APP_DIR,
    APP_ENTRYPOINT,
    APP_HOME,
    APP_USER,
    PM2_PROCESS_NAME,
    SYSTEM_PACKAGES,
)

__all__ = ["render_user_data"]

_TEMPLATE = """#!/bin/bash
# Update package list and install dependencies
sudo apt-get update -y
sudo apt-get install -y {packages}

# Clone the application repository
git clone {repo_url} {app_dir}
cd {app_dir}

# Install application dependencies
npm install

# Create uploads directory and set permissions
mkdir -p uploads
sudo chown {user}:{user} uploads

# Install pm2 to manage the Node.js process
sudo npm install pm2 -g
pm2 start {entrypoint} --name {process_name}

# Ensure pm2 restarts on reboot
pm2 startup systemd -u {user} --hp {home}
sudo env PATH=$PATH:/usr/bin /usr/lib/node_modules/pm2/bin/pm2 startup systemd -u {user} --hp {home}
pm2 save
"""


def render_user_data(
    app_repo_url: str,
    *,
    packages: Iterable[str] = SYSTEM_PACKAGES,
    entrypoint: str = APP_ENTRYPOINT,
    process_name: str = PM2_PROCESS_NAME,
) -> str:
    """Render the bootstrap script for ``app_repo_url``.

    The script runs once, at first boot. It is not idempotent and its exit
    status is never reported back to Pulumi: a failed step leaves the
    instance created but unhealthy, which only the target group health
    check will notice.
    """
    if not app_repo_url or not app_repo_url.strip():
        raise ValueError("app_repo_url must not be empty")

    return _TEMPLATE.format(
        packages=" ".join(packages),
        repo_url=shlex.quote(app_repo_url.strip()),
        app_dir=APP_DIR,
        user=APP_USER,
        home=APP_HOME,
        entrypoint=shlex.quote(entrypoint),
        process_name=shlex.quote(process_name),
    )
