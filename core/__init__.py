"""
Core utilities and modules.

Public API:
    - check_endpoint_connectivity: Check if a service endpoint is reachable
    - get_network_status: Get human-readable reachability status
    - setup_logging: Console + rotating file logging

Usage:
    from core.network import check_endpoint_connectivity

    if check_endpoint_connectivity("http://localhost:8080"):
        print("Registry reachable")
"""

from core.logging_setup import setup_logging
from core.network import check_endpoint_connectivity, get_network_status

__all__ = [
    "check_endpoint_connectivity",
    "get_network_status",
    "setup_logging",
]
