"""
Requirement aggregation - totals the resources a master/worker cluster needs.
"""
from src.preflight.exceptions import FormatError
from src.preflight.models.requirements import ResourceRequirement
from src.preflight.utils.sizes import parse_disk_to_gb, parse_memory_to_gb


def _parse(parser, value: str, field: str) -> float:
    try:
        return parser(value, field=field)
    except FormatError as e:
        raise FormatError(f"invalid {field} format: {e}", field=field) from e


def _check_count(value: int, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise FormatError(f"{field} must be a non-negative integer, got {value!r}", field=field)
    return value


def calculate_resource_requirements(
    master_cpus: int,
    master_memory: str,
    master_disk: str,
    worker_cpus: int,
    worker_memory: str,
    worker_disk: str,
    worker_count: int,
) -> ResourceRequirement:
    """
    Total the host resources needed for one master and N workers.

    Sizes are parsed in a fixed order (master memory, worker memory,
    master disk, worker disk) and the first bad value is reported.

    Args:
        master_cpus: CPU cores for the master node
        master_memory: Master memory (e.g., "4G", "2048M")
        master_disk: Master disk (e.g., "40G", "1T")
        worker_cpus: CPU cores per worker node
        worker_memory: Memory per worker
        worker_disk: Disk per worker
        worker_count: Number of worker nodes

    Returns:
        ResourceRequirement equal to master + worker_count * worker

    Raises:
        FormatError: If a size string or count is malformed

    Example:
        >>> calculate_resource_requirements(4, "4G", "40G", 2, "2G", "20G", 2)
        ResourceRequirement(min_cpu=8, min_memory=8.0, min_disk=80.0)
    """
    master_memory_gb = _parse(parse_memory_to_gb, master_memory, "master memory")
    worker_memory_gb = _parse(parse_memory_to_gb, worker_memory, "worker memory")
    master_disk_gb = _parse(parse_disk_to_gb, master_disk, "master disk")
    worker_disk_gb = _parse(parse_disk_to_gb, worker_disk, "worker disk")

    master_cpus = _check_count(master_cpus, "master CPU count")
    worker_cpus = _check_count(worker_cpus, "worker CPU count")
    worker_count = _check_count(worker_count, "worker count")

    return ResourceRequirement(
        min_cpu=master_cpus + worker_cpus * worker_count,
        min_memory=master_memory_gb + worker_memory_gb * worker_count,
        min_disk=master_disk_gb + worker_disk_gb * worker_count,
    )
