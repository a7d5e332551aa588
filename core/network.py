"""
Network Connectivity Checker

Simple utility to check if the Video Registry endpoint is reachable.
Uses a socket connection to the registry host for speed and reliability.
"""

import logging
import socket
from typing import Optional, Tuple
from urllib.parse import urlparse

from config.settings import NETWORK_CHECK_TIMEOUT

DEFAULT_PORTS = {"http": 80, "https": 443}


def parse_endpoint(server_url: str) -> Optional[Tuple[str, int]]:
    """
    Extract (host, port) from a server URL.

    Returns:
        Tuple of (host, port), or None if the URL has no usable host

    Example:
        parse_endpoint("http://registry.local:8080/api")
        # Returns: ("registry.local", 8080)
    """
    parsed = urlparse(server_url)
    if not parsed.hostname:
        return None

    try:
        port = parsed.port or DEFAULT_PORTS.get(parsed.scheme)
    except ValueError:
        return None

    if port is None:
        return None
    return parsed.hostname, port


def check_endpoint_connectivity(
    server_url: str,
    timeout: float = NETWORK_CHECK_TIMEOUT,
) -> bool:
    """
    Check if the given endpoint accepts TCP connections.

    Args:
        server_url: Full URL of the service (scheme, host, optional port)
        timeout: Connection timeout in seconds

    Returns:
        True if a connection could be opened, False otherwise
    """
    logger = logging.getLogger(__name__)

    endpoint = parse_endpoint(server_url)
    if endpoint is None:
        logger.debug(f"Cannot check connectivity, invalid URL: {server_url}")
        return False

    try:
        with socket.create_connection(endpoint, timeout=timeout):
            return True
    except (socket.timeout, OSError):
        # Host down, timeout, or DNS lookup failed
        return False


def get_network_status(server_url: str) -> Tuple[bool, str]:
    """
    Get human-readable reachability status for an endpoint.

    Returns:
        Tuple of (is_connected, status_string)

    Example:
        is_connected, status = get_network_status("http://localhost:8080")
        print(status)  # Output: Registry reachable (localhost:8080)
    """
    is_connected = check_endpoint_connectivity(server_url)
    endpoint = parse_endpoint(server_url)
    where = f"{endpoint[0]}:{endpoint[1]}" if endpoint else server_url
    status = (
        f"Registry reachable ({where})"
        if is_connected
        else f"Registry unreachable ({where})"
    )
    return is_connected, status
