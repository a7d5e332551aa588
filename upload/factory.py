"""
Upload Factory

Wires an UploadController from configuration.
Follows same pattern as registry/factory.py for consistency.
"""

import logging
from typing import Literal, Optional

from media.factory import MediaResolverFactory
from registry.factory import RegistryFactory
from upload.config import UploadConfig
from upload.controllers.upload_controller import UploadController
from upload.interfaces.reporter_interface import ResultReporterInterface

# Type alias
UploadMode = Literal["auto", "real", "mock"]

_logger = logging.getLogger(__name__)


def create_upload_controller(
    mode: UploadMode = "auto",
    config: Optional[UploadConfig] = None,
    reporter: Optional[ResultReporterInterface] = None,
) -> UploadController:
    """
    Create a fully wired upload controller.

    Args:
        mode: "auto" (registry from env, mock fallback),
            "real" (filesystem + HTTP, fail if not configured),
            "mock" (in-memory resolver and registry)
        config: UploadConfig (None = load defaults / config/upload.yaml)
        reporter: Result reporter (None = LogReporter)

    Returns:
        UploadController

    Raises:
        RuntimeError: If mode="real" but the registry client cannot be created

    Example:
        controller = create_upload_controller()
        result = controller.upload_video("/videos/clip.mp4")
    """
    config = config or UploadConfig()

    resolver_mode = "mock" if mode == "mock" else "auto"
    registry_mode = {"auto": "auto", "real": "http", "mock": "mock"}[mode]

    resolver = MediaResolverFactory.create_resolver(mode=resolver_mode)
    registry = RegistryFactory.create_client(
        mode=registry_mode,
        server_url=config.server_url or None,
        timeout=config.http_timeout,
        data_method=config.data_method,
    )

    _logger.info(f"Creating Upload Controller (mode: {mode})")
    return UploadController(
        resolver=resolver,
        registry=registry,
        reporter=reporter,
        max_upload_size_bytes=config.max_upload_size_bytes,
    )
