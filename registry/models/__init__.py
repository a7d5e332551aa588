"""
Models Package

What the Video Registry returns.
"""

from registry.models.registered_video import RegisteredVideo, VideoStatus

__all__ = [
    "RegisteredVideo",
    "VideoStatus",
]
