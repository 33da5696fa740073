"""
Errors raised while building or validating cluster requirements.
"""
from typing import Optional

from src.host_probe.probe import ProbeError


class PreflightError(Exception):
    """Base error for preflight checks."""


class FormatError(PreflightError, ValueError):
    """A size string or node count does not have the expected format."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


__all__ = ["PreflightError", "FormatError", "ProbeError"]
