"""
Size parsing for node memory and disk settings.

Sizes are written as an integer followed by a unit letter, e.g. "2G",
"1024M" or "1T", and converted to gigabytes (GB) for comparison.
"""
import re

from src.preflight.exceptions import FormatError

MEMORY_PATTERN = re.compile(r"[0-9]+[GM]", re.IGNORECASE)
DISK_PATTERN = re.compile(r"[0-9]+[GMT]", re.IGNORECASE)

MEMORY_FORMAT_HINT = "'2G' or '1024M'"
DISK_FORMAT_HINT = "'20G', '1024M', or '1T'"


def _to_gb(value: str) -> float:
    number = float(value[:-1])
    unit = value[-1].upper()

    if unit == "M":
        return number / 1024
    elif unit == "T":
        return number * 1024
    return number


def parse_memory_to_gb(memory: str, field: str = "memory") -> float:
    """
    Convert a memory size string to GB.

    Args:
        memory: Memory string (e.g., "2G", "2048M")
        field: Name of the setting, used in the error message

    Returns:
        Memory value in GB (float)

    Raises:
        FormatError: If the string is not an integer followed by G or M

    Examples:
        >>> parse_memory_to_gb("2G")
        2.0
        >>> parse_memory_to_gb("2048M")
        2.0
    """
    if not isinstance(memory, str) or not MEMORY_PATTERN.fullmatch(memory):
        raise FormatError(
            f"{field} must be in format like {MEMORY_FORMAT_HINT}", field=field
        )
    return _to_gb(memory)


def parse_disk_to_gb(disk: str, field: str = "disk") -> float:
    """
    Convert a disk size string to GB.

    Args:
        disk: Disk string (e.g., "20G", "1024M", "1T")
        field: Name of the setting, used in the error message

    Returns:
        Disk value in GB (float)

    Raises:
        FormatError: If the string is not an integer followed by G, M or T

    Examples:
        >>> parse_disk_to_gb("20G")
        20.0
        >>> parse_disk_to_gb("1T")
        1024.0
    """
    if not isinstance(disk, str) or not DISK_PATTERN.fullmatch(disk):
        raise FormatError(
            f"{field} must be in format like {DISK_FORMAT_HINT}", field=field
        )
    return _to_gb(disk)
