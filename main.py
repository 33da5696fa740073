"""
Cluster Host Preflight Checker - MCP Server

This MCP server checks whether the local host has enough CPU, memory and disk
to provision a master/worker cluster, and whether the Kubernetes API server
port is free.
"""

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from src.preflight import (
    PreflightError,
    ProbeError,
    ResourceRequirement,
    ResourceValidator,
    calculate_resource_requirements,
)
from src.preflight.parser.yaml_parser import load_cluster_config

# Initialize the MCP server
mcp = FastMCP("cluster-host-preflight")


@mcp.tool()
def calculate_requirements(
    master_cpus: int,
    master_memory: str,
    master_disk: str,
    worker_cpus: int,
    worker_memory: str,
    worker_disk: str,
    worker_count: int,
) -> dict:
    """
    Calculate the total host resources a cluster needs. NO host involvement.

    Sizes are an integer followed by a unit: memory uses G or M ("4G",
    "2048M"), disk uses G, M or T ("40G", "1T").

    Args:
        master_cpus: CPU cores for the master node
        master_memory: Master memory size
        master_disk: Master disk size
        worker_cpus: CPU cores per worker
        worker_memory: Memory per worker
        worker_disk: Disk per worker
        worker_count: Number of workers (0 for a single-node cluster)

    Returns:
        Dictionary containing:
        - success: Boolean indicating if the operation was successful
        - requirements: min_cpu (cores), min_memory (GB), min_disk (GB)
        - error: Error message if a size is malformed

    Example:
        >>> calculate_requirements(4, "4G", "40G", 2, "2G", "20G", 2)
        {"success": True, "requirements": {"min_cpu": 8, "min_memory": 8.0, "min_disk": 80.0}}
    """
    try:
        requirements = calculate_resource_requirements(
            master_cpus, master_memory, master_disk,
            worker_cpus, worker_memory, worker_disk,
            worker_count,
        )
    except PreflightError as e:
        return {"success": False, "error": str(e)}

    return {"success": True, "requirements": requirements.model_dump()}


@mcp.tool()
def validate_host_resources(min_cpu: int, min_memory_gb: float, min_disk_gb: float) -> dict:
    """
    Compare this host's CPU, memory and free disk against explicit minimums.

    Args:
        min_cpu: Required CPU cores
        min_memory_gb: Required memory in GB
        min_disk_gb: Required free disk in GB (on the working directory's filesystem)

    Returns:
        Dictionary containing:
        - success: Boolean indicating if the host could be probed
        - status: Readings, is_valid, messages and recommendations
        - error: Error message if a host reading failed
    """
    try:
        requirements = ResourceRequirement(
            min_cpu=min_cpu, min_memory=min_memory_gb, min_disk=min_disk_gb
        )
        status = ResourceValidator().validate_resources(requirements)
    except ValidationError as e:
        return {"success": False, "error": f"Invalid requirement: {e}"}
    except ProbeError as e:
        return {"success": False, "error": str(e)}

    return {"success": True, "status": status.to_dict()}


@mcp.tool()
def check_port() -> dict:
    """
    Check whether the Kubernetes API server port (6443 by default) is free.

    Returns:
        Dictionary containing:
        - success: Always True
        - status: port, is_open, messages and recommendations
    """
    status = ResourceValidator().validate_ports()
    return {"success": True, "status": status.to_dict()}


@mcp.tool()
def preflight_check(
    master_cpus: int = 2,
    master_memory: str = "2G",
    master_disk: str = "20G",
    worker_cpus: int = 2,
    worker_memory: str = "2G",
    worker_disk: str = "20G",
    worker_count: int = 0,
) -> dict:
    """
    Check if a cluster CAN BE PROVISIONED on this host.

    Calculates the cluster's total requirement, compares it against live host
    readings, and checks the API server port.

    Returns:
        Dictionary containing:
        - success: Boolean indicating if the check could run
        - report: is_valid, error_count, resources and ports results
        - summary: Human-readable verdict with recommendations
        - error: Error message if a size is malformed or a host reading failed
    """
    try:
        requirements = calculate_resource_requirements(
            master_cpus, master_memory, master_disk,
            worker_cpus, worker_memory, worker_disk,
            worker_count,
        )
        report = ResourceValidator().run_preflight(requirements)
    except (PreflightError, ProbeError) as e:
        return {"success": False, "error": str(e)}

    return {
        "success": True,
        "requirements": requirements.model_dump(),
        "report": report.to_dict(),
        "summary": report.to_summary(),
    }


@mcp.tool()
def preflight_check_from_file(path: str) -> dict:
    """
    Run the preflight check for a cluster defined in a YAML file.

    The file holds keys such as name, size, masterCpus, masterMemory,
    masterDisk, workerCpus, workerMemory and workerDisk, either at the top
    level or under a "cluster" key. Workers = size - 1.

    Args:
        path: Path to the cluster definition file

    Returns:
        Same shape as preflight_check, plus the parsed cluster definition
    """
    try:
        cluster = load_cluster_config(path)
        requirements = cluster.to_requirements()
        report = ResourceValidator().run_preflight(requirements)
    except ValidationError as e:
        return {"success": False, "error": f"Invalid cluster definition: {e}"}
    except (PreflightError, ProbeError) as e:
        return {"success": False, "error": str(e)}

    return {
        "success": True,
        "cluster": cluster.model_dump(),
        "requirements": requirements.model_dump(),
        "report": report.to_dict(),
        "summary": report.to_summary(),
    }


def main():
    """Run the MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
