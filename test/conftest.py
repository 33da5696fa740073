"""
Pytest configuration and fixtures
"""
import os
import socket
import sys

import pytest

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.host_probe import ProbeError, StaticProbe


class FailingProbe(StaticProbe):
    """Static probe whose selected readings raise ProbeError."""

    def __init__(self, fail_on, **readings):
        super().__init__(**readings)
        self.fail_on = set(fail_on)
        self.calls = []

    def cpu_count(self) -> int:
        self.calls.append("cpu")
        if "cpu" in self.fail_on:
            raise ProbeError("cpu query failed")
        return super().cpu_count()

    def total_memory_gb(self) -> float:
        self.calls.append("memory")
        if "memory" in self.fail_on:
            raise ProbeError("failed to get system info: boom")
        return super().total_memory_gb()

    def available_disk_gb(self) -> float:
        self.calls.append("disk")
        if "disk" in self.fail_on:
            raise ProbeError("failed to get filesystem stats: boom")
        return super().available_disk_gb()


@pytest.fixture
def make_probe():
    """Build a StaticProbe with the given readings"""
    def _make(cpu=4, memory_gb=8.0, disk_gb=20.0, bound_ports=()):
        return StaticProbe(cpu=cpu, memory_gb=memory_gb, disk_gb=disk_gb, bound_ports=bound_ports)
    return _make


@pytest.fixture
def failing_probe():
    """Build a FailingProbe that raises on the named readings"""
    def _make(*fail_on):
        return FailingProbe(fail_on, cpu=4, memory_gb=8.0, disk_gb=20.0)
    return _make


@pytest.fixture
def free_port():
    """A TCP port that was free a moment ago"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture
def listener():
    """Open a TCP listener on a port on all interfaces; closed after the test"""
    sockets = []

    def _listen(port):
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.bind(("", port))
        sock.listen(1)
        sockets.append(sock)
        return sock

    yield _listen

    for sock in sockets:
        sock.close()
