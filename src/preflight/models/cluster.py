"""
Cluster shape as requested by the user, with the same limits the cluster
creation command enforces.
"""
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.preflight import config
from src.preflight.models.requirements import ResourceRequirement
from src.preflight.requirements import calculate_resource_requirements
from src.preflight.utils.sizes import parse_disk_to_gb, parse_memory_to_gb

CLUSTER_NAME_PATTERN = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?")


class ClusterConfig(BaseModel):
    """Master/worker node set to be provisioned on this host."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Cluster name (DNS label)")
    size: int = Field(config.MIN_CLUSTER_SIZE, description="Total nodes including the master")
    master_cpus: int = Field(2, alias="masterCpus")
    master_memory: str = Field("2G", alias="masterMemory")
    master_disk: str = Field("20G", alias="masterDisk")
    worker_cpus: int = Field(2, alias="workerCpus")
    worker_memory: str = Field("2G", alias="workerMemory")
    worker_disk: str = Field("20G", alias="workerDisk")

    @field_validator("name")
    @classmethod
    def _validate_name(cls, name: str) -> str:
        if not name:
            raise ValueError("cluster name cannot be empty")
        if not CLUSTER_NAME_PATTERN.fullmatch(name):
            raise ValueError(
                "cluster name must start and end with alphanumeric characters "
                "and contain only lowercase letters, numbers, and hyphens"
            )
        if len(name) > config.MAX_CLUSTER_NAME_LENGTH:
            raise ValueError(
                f"cluster name must be {config.MAX_CLUSTER_NAME_LENGTH} characters or less"
            )
        return name

    @field_validator("size")
    @classmethod
    def _validate_size(cls, size: int) -> int:
        if size < config.MIN_CLUSTER_SIZE:
            raise ValueError(f"cluster size must be at least {config.MIN_CLUSTER_SIZE}")
        if size > config.MAX_CLUSTER_SIZE:
            raise ValueError(f"cluster size cannot exceed {config.MAX_CLUSTER_SIZE} nodes")
        return size

    @field_validator("master_cpus", "worker_cpus")
    @classmethod
    def _validate_cpus(cls, cpus: int, info: ValidationInfo) -> int:
        node_type = info.field_name.split("_")[0]
        if cpus < 1:
            raise ValueError(f"{node_type} CPU count must be at least 1")
        if cpus > config.MAX_CPU_COUNT:
            raise ValueError(f"{node_type} CPU count cannot exceed {config.MAX_CPU_COUNT}")
        return cpus

    @field_validator("master_memory", "worker_memory")
    @classmethod
    def _validate_memory(cls, memory: str, info: ValidationInfo) -> str:
        parse_memory_to_gb(memory, field=info.field_name.replace("_", " "))
        return memory

    @field_validator("master_disk", "worker_disk")
    @classmethod
    def _validate_disk(cls, disk: str, info: ValidationInfo) -> str:
        parse_disk_to_gb(disk, field=info.field_name.replace("_", " "))
        return disk

    @property
    def worker_count(self) -> int:
        return self.size - 1

    def to_requirements(self) -> ResourceRequirement:
        """Total host resources this cluster needs."""
        return calculate_resource_requirements(
            self.master_cpus,
            self.master_memory,
            self.master_disk,
            self.worker_cpus,
            self.worker_memory,
            self.worker_disk,
            self.worker_count,
        )
