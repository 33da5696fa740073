"""
Data models for resource requirements and validation results using Pydantic.
"""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ResourceRequirement(BaseModel):
    """Minimum host resources needed to run a cluster."""

    model_config = ConfigDict(frozen=True)

    min_cpu: int = Field(..., ge=0, description="Minimum CPU cores required")
    min_memory: float = Field(..., ge=0, description="Minimum memory in GB")
    min_disk: float = Field(..., ge=0, description="Minimum disk space in GB")


class Severity(str, Enum):
    """Outcome of a single check."""

    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


SEVERITY_GLYPHS = {
    Severity.SUCCESS: "✅",
    Severity.WARNING: "⚠️",
    Severity.FAILURE: "❌",
}

# Resource dimensions are shown with a label prefix; the port is not
DIMENSION_LABELS = {
    "cpu": "CPU",
    "memory": "Memory",
    "disk": "Disk",
}


class ValidationMessage(BaseModel):
    """One check result: what was checked, how it went, and the figures."""

    severity: Severity
    dimension: str = Field(..., description="Checked dimension: cpu, memory, disk or port")
    detail: str

    def render(self) -> str:
        """
        Render as a glyph-prefixed line.

        Examples:
            "✅ CPU: 4 cores available (2 required)"
            "❌ Port 6443 is already in use"
        """
        label = DIMENSION_LABELS.get(self.dimension)
        text = f"{label}: {self.detail}" if label else self.detail
        return f"{SEVERITY_GLYPHS[self.severity]} {text}"

    def __str__(self) -> str:
        return self.render()


class ValidationResult(BaseModel):
    """Shared pass/fail bookkeeping for resource and port checks."""

    is_valid: bool = True
    checks: List[ValidationMessage] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        """Rendered messages, in check order."""
        return [check.render() for check in self.checks]

    @property
    def failures(self) -> List[ValidationMessage]:
        return [c for c in self.checks if c.severity == Severity.FAILURE]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [c for c in self.checks if c.severity == Severity.WARNING]

    def add_success(self, dimension: str, detail: str) -> None:
        self.checks.append(
            ValidationMessage(severity=Severity.SUCCESS, dimension=dimension, detail=detail)
        )

    def add_failure(self, dimension: str, detail: str, *recommendations: str) -> None:
        """Record a failed check and mark the result invalid."""
        self.checks.append(
            ValidationMessage(severity=Severity.FAILURE, dimension=dimension, detail=detail)
        )
        self.recommendations.extend(recommendations)
        self.is_valid = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format, including rendered messages."""
        data = self.model_dump(mode="json")
        data["messages"] = self.messages
        return data


class ResourceStatus(ValidationResult):
    """Host readings and the outcome of comparing them to a requirement."""

    available_cpu: int = 0
    available_memory: float = 0.0
    available_disk: float = 0.0


class PortStatus(ValidationResult):
    """Availability of the required port."""

    port: int
    is_open: bool = False


class PreflightReport(BaseModel):
    """Combined resource and port results for an accept/reject decision."""

    resources: ResourceStatus
    ports: PortStatus

    @property
    def is_valid(self) -> bool:
        return self.resources.is_valid and self.ports.is_valid

    @property
    def messages(self) -> List[str]:
        return self.resources.messages + self.ports.messages

    @property
    def recommendations(self) -> List[str]:
        return self.resources.recommendations + self.ports.recommendations

    @property
    def error_count(self) -> int:
        return len(self.resources.failures) + len(self.ports.failures)

    @property
    def warning_count(self) -> int:
        return len(self.resources.warnings) + len(self.ports.warnings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "resources": self.resources.to_dict(),
            "ports": self.ports.to_dict(),
        }

    def to_summary(self) -> str:
        """
        Generate a human-readable summary.

        Returns:
            Multi-line text with the verdict, every check and any recommendations
        """
        lines = []

        if self.is_valid:
            lines.append("✅ Host meets the cluster requirements")
        else:
            lines.append(
                f"❌ Host does NOT meet the cluster requirements ({self.error_count} problem(s))"
            )

        lines.append("\nChecks:")
        for message in self.messages:
            lines.append(f"  {message}")

        if self.recommendations:
            lines.append("\nRecommendations:")
            for recommendation in self.recommendations:
                lines.append(f"  • {recommendation}")

        return "\n".join(lines)
