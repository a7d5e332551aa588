"""
Models Package

Data structures shared by the media resolver and the registry client.
"""

from media.models.video_metadata import VideoMetadata

__all__ = [
    "VideoMetadata",
]
