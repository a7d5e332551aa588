"""
Registry Module

Client for the remote Video Registry: register metadata, upload bytes,
list videos.

Public API:
    - RegistryClientInterface: Client contract (transport-agnostic)
    - RegistryError: Raised for every failed registry call
    - RegisteredVideo / VideoStatus / VideoState: Returned data
    - create_registry_client: Factory function

Usage:
    from registry import create_registry_client

    client = create_registry_client()
    for video in client.list_videos():
        print(video.title)
"""

from registry.constants import RegistryErrorCode, VideoState
from registry.factory import RegistryFactory, create_registry_client
from registry.interfaces.registry_interface import (
    RegistryClientInterface,
    RegistryError,
)
from registry.models.registered_video import RegisteredVideo, VideoStatus

__all__ = [
    "RegisteredVideo",
    "RegistryClientInterface",
    "RegistryError",
    "RegistryErrorCode",
    "RegistryFactory",
    "VideoState",
    "VideoStatus",
    "create_registry_client",
]
