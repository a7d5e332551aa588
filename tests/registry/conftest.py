"""
Registry Test Configuration and Fixtures

Shared fixtures for registry client tests. The HTTP client is driven
through a MagicMock session that returns real requests.Response objects
(see http_fakes.py).
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from http_fakes import SERVER_URL
from media.models.video_metadata import VideoMetadata
from registry.implementations.http_registry import HttpRegistryClient


@pytest.fixture
def mock_session():
    """MagicMock standing in for requests.Session"""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def http_client(mock_session):
    """HttpRegistryClient using the mock session"""
    return HttpRegistryClient(SERVER_URL, timeout=5, session=mock_session)


@pytest.fixture
def sample_metadata(tmp_path):
    """Metadata for a small real file on disk"""
    video = tmp_path / "clip.mp4"
    video.write_bytes(b"\x00" * 2048)
    return VideoMetadata(
        local_path=Path(video),
        size_bytes=2048,
        content_type="video/mp4",
        title="clip",
        duration_ms=1500,
    )


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """
    Configure pytest with custom markers for registry tests.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
