"""
Host Probe - Reads CPU, memory, disk and port availability from the local host
"""

from src.host_probe.probe import HostProbe, PlatformProbe, ProbeError, StaticProbe

__all__ = ["HostProbe", "PlatformProbe", "ProbeError", "StaticProbe"]
