"""
Utilities Package

Reference parsing and ffprobe helpers.
"""

from media.utils.media_utils import (
    get_video_duration_ms,
    guess_content_type,
    ref_to_path,
)

__all__ = [
    "get_video_duration_ms",
    "guess_content_type",
    "ref_to_path",
]
