"""
Resource Validator - Determines if the local host can run a cluster.

This module compares aggregated cluster requirements against live host
readings and checks that the Kubernetes API server port is free, producing
pass/fail messages with remediation hints.
"""
from typing import Optional, Tuple

from loguru import logger

from src.host_probe.probe import HostProbe, PlatformProbe, ProbeError
from src.preflight import config
from src.preflight.models.requirements import (
    PortStatus,
    PreflightReport,
    ResourceRequirement,
    ResourceStatus,
)


class ResourceValidator:
    """Checks host resources and port availability against requirements."""

    def __init__(
        self,
        probe: Optional[PlatformProbe] = None,
        required_port: Optional[int] = None,
    ):
        """
        Initialize validator.

        Args:
            probe: Source of host readings (defaults to HostProbe)
            required_port: Port that must be free (defaults to config.REQUIRED_PORT)
        """
        self.probe = probe if probe is not None else HostProbe()
        self.required_port = required_port if required_port is not None else config.REQUIRED_PORT

    def validate_resources(self, requirements: ResourceRequirement) -> ResourceStatus:
        """
        Main entry point: Compare host resources against requirements.

        Args:
            requirements: Aggregated cluster requirement

        Returns:
            ResourceStatus with readings, messages and recommendations

        Raises:
            ProbeError: If any host reading fails; no partial status is returned
        """
        status = ResourceStatus(
            available_cpu=self._probe(self.probe.cpu_count, "CPU"),
            available_memory=self._probe(self.probe.total_memory_gb, "memory"),
            available_disk=self._probe(self.probe.available_disk_gb, "disk"),
        )

        cpu_ok, detail = self._check_cpu(status.available_cpu, requirements.min_cpu)
        if cpu_ok:
            status.add_success("cpu", detail)
        else:
            status.add_failure(
                "cpu",
                detail,
                f"Ensure at least {requirements.min_cpu} CPU cores are available",
            )

        mem_ok, detail = self._check_memory(status.available_memory, requirements.min_memory)
        if mem_ok:
            status.add_success("memory", detail)
        else:
            shortfall = requirements.min_memory - status.available_memory
            status.add_failure(
                "memory",
                detail,
                f"Free up at least {shortfall:.1f} GB of memory to meet minimum requirements",
                "Close unnecessary applications to free memory",
            )

        disk_ok, detail = self._check_disk(status.available_disk, requirements.min_disk)
        if disk_ok:
            status.add_success("disk", detail)
        else:
            shortfall = requirements.min_disk - status.available_disk
            status.add_failure(
                "disk",
                detail,
                f"Free up at least {shortfall:.1f} GB of disk space to meet minimum requirements",
                "Consider cleaning up disk space for optimal performance",
            )

        if status.is_valid:
            logger.info("Host resources meet cluster requirements")
        else:
            logger.info(f"Host resources insufficient: {len(status.failures)} check(s) failed")

        return status

    def _probe(self, reading, name: str):
        try:
            return reading()
        except ProbeError as e:
            raise ProbeError(f"failed to get {name} info: {e}") from e

    def _check_cpu(self, available: int, required: int) -> Tuple[bool, str]:
        """
        Check if CPU requirements can be met.

        Returns:
            (is_sufficient, detail)
        """
        return available >= required, f"{available} cores available ({required} required)"

    def _check_memory(self, available: float, required: float) -> Tuple[bool, str]:
        """
        Check if memory requirements can be met.

        Returns:
            (is_sufficient, detail)
        """
        return available >= required, f"{available:.1f} GB available ({required:.1f} GB required)"

    def _check_disk(self, available: float, required: float) -> Tuple[bool, str]:
        """
        Check if disk requirements can be met.

        Returns:
            (is_sufficient, detail)
        """
        return available >= required, f"{available:.1f} GB available ({required:.1f} GB required)"

    def _check_port(self) -> PortStatus:
        is_open = not self.probe.is_port_bound(self.required_port)
        return PortStatus(port=self.required_port, is_open=is_open, is_valid=is_open)

    def validate_ports(self) -> PortStatus:
        """
        Check that the required port is free.

        Returns:
            PortStatus with a pass/fail message and, if taken, a recommendation
        """
        port = self.required_port
        status = self._check_port()

        if status.is_open:
            status.add_success("port", f"Port {port} is available")
        else:
            status.add_failure(
                "port",
                f"Port {port} is already in use",
                f"Free up port {port} or configure a different port",
            )
            logger.info(f"Required port {port} is already in use")

        return status

    def run_preflight(self, requirements: ResourceRequirement) -> PreflightReport:
        """
        Run resource and port checks together.

        Args:
            requirements: Aggregated cluster requirement

        Returns:
            PreflightReport combining both results
        """
        return PreflightReport(
            resources=self.validate_resources(requirements),
            ports=self.validate_ports(),
        )


def validate_resources(
    requirements: ResourceRequirement, probe: Optional[PlatformProbe] = None
) -> ResourceStatus:
    """Compare host resources against requirements using a default validator."""
    return ResourceValidator(probe=probe).validate_resources(requirements)


def validate_ports(probe: Optional[PlatformProbe] = None) -> PortStatus:
    """Check the configured required port using a default validator."""
    return ResourceValidator(probe=probe).validate_ports()
