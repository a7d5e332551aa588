"""
Media Resolver Tests

Tests for local video lookup:
- Path and file:// URI parsing
- Filesystem resolver metadata and errors
- ffprobe duration probing (subprocess mocked)
- Mock resolver and factory

To run these tests:
    pytest tests/media/ -v
"""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from media.constants import MediaErrorCode
from media.factory import MediaResolverFactory, create_resolver
from media.implementations.filesystem_resolver import FilesystemMediaResolver
from media.implementations.mock_resolver import MockMediaResolver
from media.interfaces.media_resolver_interface import MediaResolverError
from media.utils.media_utils import (
    get_video_duration_ms,
    guess_content_type,
    ref_to_path,
)


@pytest.fixture
def video_file(tmp_path):
    """Small .mp4 file on disk"""
    path = tmp_path / "practice.mp4"
    path.write_bytes(b"x" * 5000)
    return path


# =============================================================================
# REFERENCE PARSING
# =============================================================================


@pytest.mark.unit
def test_ref_to_path_plain_path():
    assert ref_to_path("/videos/a.mp4") == Path("/videos/a.mp4")


@pytest.mark.unit
def test_ref_to_path_file_uri_unquotes():
    assert ref_to_path("file:///videos/my%20clip.mp4") == Path("/videos/my clip.mp4")


@pytest.mark.unit
def test_ref_to_path_relative_uses_base_dir():
    assert ref_to_path("a.mp4", Path("/media")) == Path("/media/a.mp4")


@pytest.mark.unit
def test_ref_to_path_rejects_other_schemes():
    assert ref_to_path("content://media/external/video/12") is None
    assert ref_to_path("http://example.com/a.mp4") is None
    assert ref_to_path("   ") is None


@pytest.mark.unit
def test_guess_content_type():
    assert guess_content_type(Path("a.MP4")) == "video/mp4"
    assert guess_content_type(Path("a.3gp")) == "video/3gpp"
    assert guess_content_type(Path("a.txt")) is None


# =============================================================================
# FILESYSTEM RESOLVER
# =============================================================================


@pytest.mark.unit
def test_resolve_existing_file(video_file):
    resolver = FilesystemMediaResolver(probe_duration=False)

    metadata = resolver.resolve(str(video_file))

    assert metadata.local_path == video_file
    assert metadata.size_bytes == 5000
    assert metadata.content_type == "video/mp4"
    assert metadata.title == "practice"
    assert metadata.duration_ms is None


@pytest.mark.unit
def test_resolve_file_uri(video_file):
    resolver = FilesystemMediaResolver(probe_duration=False)

    metadata = resolver.resolve(video_file.as_uri())

    assert metadata.local_path == video_file


@pytest.mark.unit
def test_resolve_relative_to_media_root(video_file):
    resolver = FilesystemMediaResolver(media_root=video_file.parent, probe_duration=False)

    assert resolver.resolve("practice.mp4").size_bytes == 5000
    assert resolver.exists("practice.mp4") is True


@pytest.mark.unit
def test_resolve_missing_file(tmp_path):
    resolver = FilesystemMediaResolver(probe_duration=False)

    with pytest.raises(MediaResolverError) as exc_info:
        resolver.resolve(str(tmp_path / "missing.mp4"))

    assert exc_info.value.code == MediaErrorCode.NOT_FOUND
    assert resolver.exists(str(tmp_path / "missing.mp4")) is False


@pytest.mark.unit
def test_resolve_directory_is_not_found(tmp_path):
    resolver = FilesystemMediaResolver(probe_duration=False)

    with pytest.raises(MediaResolverError) as exc_info:
        resolver.resolve(str(tmp_path))

    assert exc_info.value.code == MediaErrorCode.NOT_FOUND


@pytest.mark.unit
def test_resolve_unsupported_format(tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("not a video")
    resolver = FilesystemMediaResolver(probe_duration=False)

    with pytest.raises(MediaResolverError) as exc_info:
        resolver.resolve(str(notes))

    assert exc_info.value.code == MediaErrorCode.UNSUPPORTED_FORMAT


@pytest.mark.unit
def test_resolve_non_file_reference():
    resolver = FilesystemMediaResolver(probe_duration=False)

    with pytest.raises(MediaResolverError) as exc_info:
        resolver.resolve("content://media/external/video/12")

    assert exc_info.value.code == MediaErrorCode.INVALID_REFERENCE


@pytest.mark.unit
def test_resolve_probes_duration(video_file):
    resolver = FilesystemMediaResolver(probe_duration=True)

    with patch(
        "media.implementations.filesystem_resolver.get_video_duration_ms",
        return_value=61500,
    ) as probe:
        metadata = resolver.resolve(str(video_file))

    probe.assert_called_once_with(video_file)
    assert metadata.duration_ms == 61500


# =============================================================================
# FFPROBE
# =============================================================================


@pytest.mark.unit
def test_duration_from_ffprobe(video_file):
    completed = MagicMock(
        returncode=0,
        stdout=json.dumps({"format": {"duration": "12.345"}}),
    )

    with patch("media.utils.media_utils.subprocess.run", return_value=completed):
        assert get_video_duration_ms(video_file) == 12345


@pytest.mark.unit
def test_duration_ffprobe_failure(video_file):
    completed = MagicMock(returncode=1, stdout="")

    with patch("media.utils.media_utils.subprocess.run", return_value=completed):
        assert get_video_duration_ms(video_file) is None


@pytest.mark.unit
def test_duration_ffprobe_missing(video_file):
    with patch(
        "media.utils.media_utils.subprocess.run",
        side_effect=FileNotFoundError("ffprobe"),
    ):
        assert get_video_duration_ms(video_file) is None


@pytest.mark.unit
def test_duration_ffprobe_timeout(video_file):
    with patch(
        "media.utils.media_utils.subprocess.run",
        side_effect=subprocess.TimeoutExpired("ffprobe", 10),
    ):
        assert get_video_duration_ms(video_file) is None


# =============================================================================
# MOCK RESOLVER AND FACTORY
# =============================================================================


@pytest.mark.unit
def test_mock_resolver_round_trip():
    resolver = MockMediaResolver()
    stored = resolver.add_fake_video("clip", size_bytes=42)

    assert resolver.resolve("clip") == stored
    assert stored.local_path == Path("/mock/media/clip")
    assert resolver.resolve_history == ["clip"]


@pytest.mark.unit
def test_mock_resolver_missing():
    resolver = MockMediaResolver()

    with pytest.raises(MediaResolverError):
        resolver.resolve("nothing")

    resolver.clear()
    assert resolver.resolve_history == []


@pytest.mark.unit
def test_factory_modes(tmp_path):
    assert isinstance(MediaResolverFactory.create_resolver(mode="mock"), MockMediaResolver)

    resolver = create_resolver(media_root=tmp_path)
    assert isinstance(resolver, FilesystemMediaResolver)
    assert resolver.media_root == tmp_path
