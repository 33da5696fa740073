"""
End-to-end tests: cluster shape to requirement to combined preflight report.
"""
import pytest

from src.preflight import ResourceValidator, calculate_resource_requirements

REQUIRED_PORT = 6443


@pytest.mark.parametrize(
    "shape, readings, port_in_use, expect_valid, expect_errors",
    [
        # Single node cluster with sufficient resources
        ((2, "4G", "20G", 2, "4G", "20G", 0), (4, 8.0, 40.0), False, True, 0),
        # Multi-node cluster with insufficient CPU
        ((2, "4G", "20G", 2, "4G", "20G", 2), (4, 16.0, 80.0), False, False, 1),
        # Multi-node cluster with insufficient memory
        ((2, "4G", "20G", 2, "4G", "20G", 2), (8, 8.0, 80.0), False, False, 1),
        # Large multi-node cluster with insufficient disk and port in use
        ((4, "8G", "40G", 4, "8G", "40G", 3), (16, 32.0, 100.0), True, False, 2),
        # Large multi-node cluster with port in use
        ((4, "8G", "40G", 4, "8G", "40G", 3), (16, 32.0, 120.0), True, False, 2),
    ],
)
def test_preflight(make_probe, shape, readings, port_in_use, expect_valid, expect_errors):
    cpu, memory, disk = readings
    probe = make_probe(cpu, memory, disk, bound_ports=[REQUIRED_PORT] if port_in_use else [])
    validator = ResourceValidator(probe=probe, required_port=REQUIRED_PORT)

    requirements = calculate_resource_requirements(*shape)
    report = validator.run_preflight(requirements)

    assert report.is_valid is expect_valid
    assert report.error_count == expect_errors
    assert report.warning_count == 0
    assert sum(1 for msg in report.messages if msg.startswith("❌")) == expect_errors


def test_report_combines_resources_and_port(make_probe):
    probe = make_probe(2, 8.0, 20.0, bound_ports=[REQUIRED_PORT])
    validator = ResourceValidator(probe=probe, required_port=REQUIRED_PORT)

    report = validator.run_preflight(calculate_resource_requirements(4, "4G", "10G", 2, "2G", "10G", 0))

    assert report.messages[-1] == "❌ Port 6443 is already in use"
    assert report.recommendations == [
        "Ensure at least 4 CPU cores are available",
        "Free up port 6443 or configure a different port",
    ]

    summary = report.to_summary()
    assert summary.startswith("❌ Host does NOT meet the cluster requirements (2 problem(s))")
    assert "  ❌ CPU: 2 cores available (4 required)" in summary
    assert "  • Free up port 6443 or configure a different port" in summary


def test_passing_report_summary(make_probe):
    validator = ResourceValidator(probe=make_probe(8, 32.0, 500.0), required_port=REQUIRED_PORT)
    report = validator.run_preflight(calculate_resource_requirements(2, "2G", "20G", 2, "2G", "20G", 1))

    assert report.is_valid is True
    assert report.to_summary().startswith("✅ Host meets the cluster requirements")
    assert "Recommendations" not in report.to_summary()

    data = report.to_dict()
    assert data["is_valid"] is True
    assert data["ports"]["port"] == REQUIRED_PORT
    assert data["ports"]["messages"] == ["✅ Port 6443 is available"]
