"""
Tests for the required-port check.
"""
from src.preflight import ResourceValidator, Severity, validate_ports
from src.preflight import config


def test_default_required_port():
    assert config.DEFAULT_REQUIRED_PORT == 6443
    assert ResourceValidator(probe=None).required_port == config.REQUIRED_PORT


def test_port_available(make_probe):
    validator = ResourceValidator(probe=make_probe(), required_port=6443)
    status = validator.validate_ports()

    assert status.is_open is True
    assert status.is_valid is True
    assert status.messages == ["✅ Port 6443 is available"]
    assert status.recommendations == []


def test_port_in_use(make_probe):
    validator = ResourceValidator(probe=make_probe(bound_ports=[6443]), required_port=6443)
    status = validator.validate_ports()

    assert status.is_open is False
    assert status.is_valid is False
    assert status.messages == ["❌ Port 6443 is already in use"]
    assert status.recommendations == ["Free up port 6443 or configure a different port"]
    assert status.failures[0].severity == Severity.FAILURE
    assert status.failures[0].dimension == "port"


def test_port_check_has_no_messages(make_probe):
    validator = ResourceValidator(probe=make_probe(bound_ports=[6443]), required_port=6443)
    status = validator._check_port()

    assert status.port == 6443
    assert status.is_open is False
    assert status.messages == []


def test_module_level_validate_ports(make_probe):
    status = validate_ports(probe=make_probe(bound_ports=[config.REQUIRED_PORT]))
    assert status.is_valid is False


def test_real_listener_flips_availability(free_port, listener):
    """Binding the port makes it unavailable; releasing it restores availability."""
    validator = ResourceValidator(required_port=free_port)

    status = validator.validate_ports()
    assert status.is_open is True
    assert status.messages == [f"✅ Port {free_port} is available"]

    sock = listener(free_port)
    status = validator.validate_ports()
    assert status.is_open is False
    assert f"❌ Port {free_port} is already in use" in status.messages
    assert f"Free up port {free_port} or configure a different port" in status.recommendations

    sock.close()
    status = validator.validate_ports()
    assert status.is_open is True
