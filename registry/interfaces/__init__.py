"""
Interfaces Package

Abstract interfaces for Video Registry clients.
"""

from registry.interfaces.registry_interface import (
    RegistryClientInterface,
    RegistryError,
)

__all__ = [
    "RegistryClientInterface",
    "RegistryError",
]
