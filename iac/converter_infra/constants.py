"""Fixed values shared by the video converter deployment."""

NAME_PREFIX = "video-converter"

# Ports
PUBLIC_PORT = 80
APP_PORT = 3001
SSH_PORT = 22

ANY_IPV4 = "0.0.0.0/0"

# Ubuntu 22.04 LTS (Jammy) amd64, published by Canonical
UBUNTU_AMI_NAME_PATTERN = "ubuntu/images/hvm-ssd/ubuntu-jammy-22.04-amd64-server-*"
UBUNTU_AMI_VIRTUALIZATION = "hvm"
CANONICAL_OWNER_ID = "099720109477"

DEFAULT_INSTANCE_TYPE = "t2.micro"
PLACEHOLDER_KEY_PAIR = "your-key-pair-name"

# Bootstrap layout on the instance
APP_USER = "ubuntu"
APP_HOME = "/home/ubuntu"
APP_DIR = "/home/ubuntu/app"
APP_ENTRYPOINT = "server.js"
PM2_PROCESS_NAME = "video-converter"
SYSTEM_PACKAGES = ("git", "nodejs", "npm", "ffmpeg")


def tag_name(suffix: str) -> str:
    """Value of the ``Name`` tag for a resource, e.g. ``video-converter-alb``."""
    return f"{NAME_PREFIX}-{suffix}"
