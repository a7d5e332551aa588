"""
Network Utility Tests

Endpoint parsing and reachability checks (socket mocked).
"""

import socket
from unittest.mock import MagicMock, patch

import pytest

from core.network import (
    check_endpoint_connectivity,
    get_network_status,
    parse_endpoint,
)


@pytest.mark.unit
def test_parse_endpoint_explicit_port():
    assert parse_endpoint("http://registry.local:8080/api") == ("registry.local", 8080)


@pytest.mark.unit
def test_parse_endpoint_default_ports():
    assert parse_endpoint("http://registry.local") == ("registry.local", 80)
    assert parse_endpoint("https://registry.local") == ("registry.local", 443)


@pytest.mark.unit
def test_parse_endpoint_invalid():
    assert parse_endpoint("registry.local") is None
    assert parse_endpoint("ftp://registry.local") is None
    assert parse_endpoint("http://registry.local:notaport") is None


@pytest.mark.unit
def test_connectivity_success():
    with patch("core.network.socket.create_connection", return_value=MagicMock()) as conn:
        assert check_endpoint_connectivity("http://registry.local:8080") is True

    conn.assert_called_once()
    assert conn.call_args[0][0] == ("registry.local", 8080)


@pytest.mark.unit
def test_connectivity_failure():
    with patch(
        "core.network.socket.create_connection",
        side_effect=socket.timeout("timed out"),
    ):
        assert check_endpoint_connectivity("http://registry.local:8080") is False


@pytest.mark.unit
def test_connectivity_invalid_url_makes_no_connection():
    with patch("core.network.socket.create_connection") as conn:
        assert check_endpoint_connectivity("nonsense") is False

    conn.assert_not_called()


@pytest.mark.unit
def test_network_status_string():
    with patch("core.network.socket.create_connection", side_effect=OSError("down")):
        is_connected, status = get_network_status("http://registry.local:8080")

    assert is_connected is False
    assert status == "Registry unreachable (registry.local:8080)"
