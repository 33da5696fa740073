"""
Process-wide settings for preflight checks.

Values can be overridden through environment variables or a .env file.
"""

import os
import sys

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Kubernetes API server port
DEFAULT_REQUIRED_PORT = 6443

MIN_CLUSTER_SIZE = 1
MAX_CLUSTER_SIZE = 10
MAX_CLUSTER_NAME_LENGTH = 63  # DNS label limit
MAX_CPU_COUNT = 32  # per node


def _get_port(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        port = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer port number, got {raw!r}") from e

    if not 0 < port < 65536:
        raise ValueError(f"{name} must be between 1 and 65535, got {port}")
    return port


REQUIRED_PORT = _get_port("PREFLIGHT_REQUIRED_PORT", DEFAULT_REQUIRED_PORT)
LOG_LEVEL = os.getenv("PREFLIGHT_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)


configure_logging()
