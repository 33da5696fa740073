"""
Host Probe - Reads CPU, memory, disk and port state from the local machine.

This module gathers the live readings the preflight validator compares
against a cluster's resource requirements.
"""

import os
import socket
from typing import Iterable, Optional, Protocol

import psutil
from loguru import logger

BYTES_PER_GB = 1024 ** 3


class ProbeError(Exception):
    """Raised when an OS-level query for host resources fails."""


class PlatformProbe(Protocol):
    """Capabilities the validator needs from a host."""

    def cpu_count(self) -> int:
        ...

    def total_memory_gb(self) -> float:
        ...

    def available_disk_gb(self) -> float:
        ...

    def is_port_bound(self, port: int) -> bool:
        ...


class HostProbe:
    """Probes the machine this process runs on."""

    def __init__(self, path: Optional[str] = None):
        """
        Initialize probe.

        Args:
            path: Directory whose filesystem is checked for free space.
                  Defaults to the current working directory at probe time.
        """
        self._path = path

    def cpu_count(self) -> int:
        """
        Get the number of logical CPU cores.

        Returns:
            Logical core count

        Raises:
            ProbeError: If the OS does not report a core count
        """
        count = psutil.cpu_count(logical=True)
        if not count:
            raise ProbeError("failed to get CPU count: OS did not report a value")

        logger.debug(f"Detected {count} logical CPU cores")
        return count

    def total_memory_gb(self) -> float:
        """
        Get total physical memory.

        Returns:
            Total memory in GB

        Raises:
            ProbeError: If the memory query fails
        """
        try:
            memory = psutil.virtual_memory()
        except (OSError, RuntimeError) as e:
            raise ProbeError(f"failed to get system info: {e}") from e

        total_gb = memory.total / BYTES_PER_GB
        logger.debug(f"Detected {total_gb:.1f} GB total memory")
        return total_gb

    def available_disk_gb(self) -> float:
        """
        Get free space on the filesystem holding the probed directory.

        Only space available to unprivileged users is counted.

        Returns:
            Free disk space in GB

        Raises:
            ProbeError: If the directory cannot be resolved or statted
        """
        try:
            path = self._path or os.getcwd()
        except OSError as e:
            raise ProbeError(f"failed to get working directory: {e}") from e

        try:
            usage = psutil.disk_usage(path)
        except OSError as e:
            raise ProbeError(f"failed to get filesystem stats: {e}") from e

        free_gb = usage.free / BYTES_PER_GB
        logger.debug(f"Detected {free_gb:.1f} GB free disk at {path}")
        return free_gb

    def is_port_bound(self, port: int) -> bool:
        """
        Check whether a TCP port is already taken on any interface.

        A listener is opened on the port and closed straight away. The
        listener is dual-stack where the host supports it, and reuses
        addresses so connections left in TIME_WAIT do not count. Any
        failure to bind counts as the port being in use.

        Args:
            port: TCP port number

        Returns:
            True if the port is in use, False if it is free
        """
        try:
            if socket.has_dualstack_ipv6():
                sock = socket.create_server(
                    ("", port), family=socket.AF_INET6, dualstack_ipv6=True
                )
            else:
                sock = socket.create_server(("", port))
        except OSError as e:
            logger.debug(f"Port {port} is in use: {e}")
            return True

        self._release(sock, port)
        return False

    def _release(self, sock: socket.socket, port: int) -> None:
        """Close a probe socket, logging instead of raising on failure."""
        try:
            sock.close()
        except OSError as e:
            logger.warning(f"Failed to release test listener on port {port}: {e}")


class StaticProbe:
    """Probe with fixed readings, for tests and dry runs."""

    def __init__(
        self,
        cpu: int,
        memory_gb: float,
        disk_gb: float,
        bound_ports: Iterable[int] = (),
    ):
        self.cpu = cpu
        self.memory_gb = memory_gb
        self.disk_gb = disk_gb
        self.bound_ports = set(bound_ports)

    def cpu_count(self) -> int:
        return self.cpu

    def total_memory_gb(self) -> float:
        return self.memory_gb

    def available_disk_gb(self) -> float:
        return self.disk_gb

    def is_port_bound(self, port: int) -> bool:
        return port in self.bound_ports
