"""
Upload Test Configuration and Fixtures

Shared fixtures for upload module tests.
Mirrors the pattern from tests/registry/conftest.py.
"""

import pytest

from media.implementations.mock_resolver import MockMediaResolver
from registry.implementations.mock_registry import MockRegistryClient
from upload.controllers.upload_controller import UploadController
from upload.implementations.mock_reporter import MockReporter

# Threshold used by the examples in these tests
TEST_MAX_SIZE = 10_000_000

# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def mock_resolver():
    """
    Provide a MockMediaResolver with one small and one large video.

    Usage:
        def test_something(mock_resolver):
            mock_resolver.resolve("small.mp4")
    """
    resolver = MockMediaResolver()
    resolver.add_fake_video("small.mp4", size_bytes=2 * 1024 * 1024)
    resolver.add_fake_video("large.mp4", size_bytes=TEST_MAX_SIZE + 1)
    return resolver


@pytest.fixture
def mock_registry():
    """Provide a MockRegistryClient that answers READY"""
    return MockRegistryClient()


@pytest.fixture
def mock_reporter():
    """Provide a MockReporter that records every result"""
    return MockReporter()


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================


@pytest.fixture
def controller(mock_resolver, mock_registry, mock_reporter):
    """
    Provide UploadController wired to mocks, 10,000,000 byte limit.

    Usage:
        def test_upload(controller, mock_registry):
            controller.upload_video("small.mp4")
            assert mock_registry.upload_calls
    """
    ctrl = UploadController(
        resolver=mock_resolver,
        registry=mock_registry,
        reporter=mock_reporter,
        max_upload_size_bytes=TEST_MAX_SIZE,
    )
    yield ctrl
    ctrl.cleanup()
