"""
Preflight - Checks whether the local host can provision a master/worker cluster
"""

from src.preflight.exceptions import FormatError, PreflightError, ProbeError
from src.preflight.models.requirements import (
    PortStatus,
    PreflightReport,
    ResourceRequirement,
    ResourceStatus,
    Severity,
    ValidationMessage,
)
from src.preflight.requirements import calculate_resource_requirements
from src.preflight.validator import ResourceValidator, validate_ports, validate_resources

__all__ = [
    "FormatError",
    "PortStatus",
    "PreflightError",
    "PreflightReport",
    "ProbeError",
    "ResourceRequirement",
    "ResourceStatus",
    "ResourceValidator",
    "Severity",
    "ValidationMessage",
    "calculate_resource_requirements",
    "validate_ports",
    "validate_resources",
]
