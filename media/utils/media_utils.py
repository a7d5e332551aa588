"""
Media Utilities

Helpers for turning references into paths and probing video files.
"""

import json
import logging
import subprocess
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from config.settings import FFPROBE_TIMEOUT_SECONDS
from media.constants import FILE_URI_SCHEME, VIDEO_CONTENT_TYPES

logger = logging.getLogger(__name__)


def ref_to_path(ref: str, base_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Convert a local video reference to a filesystem path.

    Accepts plain paths and file:// URIs. Relative paths are resolved
    against base_dir when given.

    Args:
        ref: Path or file:// URI
        base_dir: Directory for relative references

    Returns:
        Path, or None if the reference uses a non-file scheme or is empty

    Example:
        ref_to_path("file:///videos/my%20clip.mp4")
        # Returns: Path("/videos/my clip.mp4")
    """
    if not ref or not ref.strip():
        return None

    parsed = urlparse(ref)
    if parsed.scheme == FILE_URI_SCHEME:
        path = Path(unquote(parsed.path))
    elif parsed.scheme and len(parsed.scheme) > 1:
        # Other URI schemes (content://, http://) are not local files.
        # Single letters are Windows drive letters.
        return None
    else:
        path = Path(ref)

    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path

    return path


def guess_content_type(path: Path) -> Optional[str]:
    """
    Get the content type for a video file from its extension.

    Returns:
        MIME type string, or None if the extension is not a supported video
    """
    return VIDEO_CONTENT_TYPES.get(path.suffix.lower())


def get_video_duration_ms(file_path: Path) -> Optional[int]:
    """
    Get video duration in milliseconds using ffprobe.

    Args:
        file_path: Path to video file

    Returns:
        Duration in milliseconds, or None if unable to determine
    """
    try:
        result = subprocess.run(
            [
                "ffprobe",
                "-v", "error",
                "-show_entries", "format=duration",
                "-of", "json",
                str(file_path),
            ],
            capture_output=True,
            timeout=FFPROBE_TIMEOUT_SECONDS,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("ffprobe not installed, skipping duration probe")
        return None
    except subprocess.TimeoutExpired:
        logger.warning(f"ffprobe timed out for {file_path.name}")
        return None

    if result.returncode != 0:
        logger.warning(f"Failed to get duration for {file_path.name}")
        return None

    try:
        data = json.loads(result.stdout)
        duration_str = data.get("format", {}).get("duration")
        if duration_str:
            return int(float(duration_str) * 1000)
    except (json.JSONDecodeError, ValueError) as e:
        logger.warning(f"Error parsing video duration: {e}")

    return None
