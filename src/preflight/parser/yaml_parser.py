"""
YAML Parser - Reads cluster definitions from YAML files.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from loguru import logger

from src.preflight.exceptions import PreflightError
from src.preflight.models.cluster import ClusterConfig


class ClusterConfigParser:
    """Parses cluster definition files into ClusterConfig objects."""

    # Definitions may sit at the top level or under this key
    ROOT_KEY = "cluster"

    def parse(self, content: str, source: str = "<string>") -> ClusterConfig:
        """
        Parse a YAML document into a cluster config.

        Args:
            content: YAML text
            source: Where the text came from, for error messages

        Returns:
            Validated ClusterConfig

        Raises:
            PreflightError: If the YAML is malformed or not a mapping
            pydantic.ValidationError: If a field is out of range or malformed
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise PreflightError(f"Could not parse YAML in {source}: {e}") from e

        data = self._unwrap(data, source)
        logger.debug(f"Loaded cluster definition from {source}: {sorted(data)}")
        return ClusterConfig.model_validate(data)

    def load(self, path: Union[str, Path]) -> ClusterConfig:
        """
        Read and parse a cluster definition file.

        Args:
            path: Path to a YAML file

        Returns:
            Validated ClusterConfig
        """
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise PreflightError(f"Could not read cluster file {path}: {e}") from e

        return self.parse(content, source=str(path))

    def _unwrap(self, data: Any, source: str) -> Dict[str, Any]:
        if isinstance(data, dict) and isinstance(data.get(self.ROOT_KEY), dict):
            data = data[self.ROOT_KEY]

        if not isinstance(data, dict):
            raise PreflightError(f"Cluster definition in {source} must be a mapping")
        return data


def load_cluster_config(path: Union[str, Path]) -> ClusterConfig:
    """Read a cluster definition file."""
    return ClusterConfigParser().load(path)
