"""
Upload Controller

High-level coordinator for video uploads.

Runs the three-step upload against the Video Registry:
    1. resolve the local reference to metadata
    2. register the metadata with the registry
    3. check the size limit, then send the bytes

upload_video() blocks until the registry answers. Call it from a
worker thread (see upload.upload_manager.UploadManager), never from a
thread that has to stay responsive.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from media.interfaces.media_resolver_interface import (
    MediaResolverError,
    MediaResolverInterface,
)
from media.models.video_metadata import VideoMetadata
from registry.interfaces.registry_interface import (
    RegistryClientInterface,
    RegistryError,
)
from upload.constants import (
    DEFAULT_MAX_UPLOAD_SIZE_BYTES,
    REASON_NOT_FOUND,
    REASON_REGISTRATION_FAILED,
    REASON_UPLOAD_ERROR,
    UploadStatus,
)
from upload.implementations.log_reporter import LogReporter
from upload.interfaces.reporter_interface import ResultReporterInterface
from upload.models.upload_result import UploadResult


class UploadController:
    """
    High-level video upload controller.

    This class:
    - Resolves local videos and registers them with the registry
    - Rejects oversized files before any byte transfer
    - Collapses every failure into exactly one UploadResult
    - Lists the videos the registry already holds

    Usage:
        controller = UploadController(resolver=resolver, registry=registry)

        result = controller.upload_video("file:///videos/clip.mp4")
        if result.success:
            print(f"Uploaded: {result.video_id}")
    """

    def __init__(
        self,
        resolver: MediaResolverInterface,
        registry: RegistryClientInterface,
        reporter: Optional[ResultReporterInterface] = None,
        max_upload_size_bytes: int = DEFAULT_MAX_UPLOAD_SIZE_BYTES,
    ):
        """
        Initialize upload controller.

        Args:
            resolver: Local media resolver
            registry: Video Registry client
            reporter: Where outcomes are surfaced (default: LogReporter)
            max_upload_size_bytes: Files at or above this size are rejected

        Raises:
            ValueError: If max_upload_size_bytes is not positive

        Example:
            controller = UploadController(
                resolver=MockMediaResolver(),
                registry=MockRegistryClient(),
                max_upload_size_bytes=10_000_000,
            )
        """
        self.logger = logging.getLogger(__name__)

        if max_upload_size_bytes <= 0:
            raise ValueError(
                f"max_upload_size_bytes must be positive, got {max_upload_size_bytes}"
            )

        self.resolver = resolver
        self.registry = registry
        self.reporter = reporter or LogReporter()
        self.max_upload_size_bytes = max_upload_size_bytes

        if not self.registry.is_available():
            self.logger.warning(
                "Registry client initialized but not available. "
                "Check configuration and network connection.",
            )

        self.logger.info(
            f"Upload Controller initialized "
            f"(max size: {max_upload_size_bytes} bytes)",
        )

    # =========================================================================
    # UPLOAD
    # =========================================================================

    def upload_video(self, ref: str) -> UploadResult:
        """
        Upload the local video identified by ref.

        Never raises: every failure is returned as an UploadResult.

        Args:
            ref: Local video reference (path or file:// URI)

        Returns:
            UploadResult with status SUCCESS, TOO_LARGE, NOT_FOUND,
            REGISTRATION_FAILED or UPLOAD_FAILED

        Example:
            result = controller.upload_video("/videos/clip.mp4")
            print(result.message)  # "Upload succeeded"
        """
        start_time = time.time()
        self.logger.info(f"Uploading video: {ref}")

        result = self._run_upload(ref, start_time)

        if result.success:
            self.logger.info(
                f"✅ Upload successful: {result.video_id} "
                f"({result.upload_duration:.1f}s, "
                f"{result.file_size / (1024 * 1024):.1f} MB)",
            )
        else:
            self.logger.error(
                f"❌ {result.message}: {ref} (status: {result.status.value})",
            )

        self._report(ref, result)
        return result

    def _run_upload(self, ref: str, start_time: float) -> UploadResult:
        # Step 1: local lookup, the only branch before network I/O
        metadata = self._resolve(ref)
        if metadata is None:
            return UploadResult.failed(
                UploadStatus.NOT_FOUND,
                REASON_NOT_FOUND,
                upload_duration=time.time() - start_time,
            )
        file_size = metadata.size_bytes

        # Step 2: register metadata, get server-assigned id + content type
        try:
            video = self.registry.register(metadata)
        except RegistryError as e:
            self.logger.error(f"Registration failed for {ref}: {e}")
            video = None
        except Exception as e:
            self.logger.error(
                f"Unexpected registration error for {ref}: {e}",
                exc_info=True,
            )
            video = None

        if video is None:
            return UploadResult.failed(
                UploadStatus.REGISTRATION_FAILED,
                REASON_REGISTRATION_FAILED,
                file_size=file_size,
                upload_duration=time.time() - start_time,
            )

        # Step 3: size limit, checked before sending any bytes
        if file_size >= self.max_upload_size_bytes:
            self.logger.warning(
                f"File too large: {file_size} bytes "
                f"(limit: {self.max_upload_size_bytes} bytes)",
            )
            return UploadResult.too_large(
                file_size,
                video_id=video.id,
                upload_duration=time.time() - start_time,
            )

        # Step 4: send the bytes, only READY counts as success
        try:
            status = self.registry.upload_data(
                video.id,
                video.content_type,
                metadata.local_path,
            )
        except RegistryError as e:
            self.logger.error(f"Data upload failed for video {video.id}: {e}")
            status = None
        except Exception as e:
            self.logger.error(
                f"Unexpected data upload error for video {video.id}: {e}",
                exc_info=True,
            )
            status = None

        duration = time.time() - start_time

        if status is None or not status.is_ready:
            if status is not None:
                self.logger.warning(
                    f"Video {video.id} not ready after upload "
                    f"(state: {status.state.value})",
                )
            return UploadResult.failed(
                UploadStatus.UPLOAD_FAILED,
                REASON_UPLOAD_ERROR,
                video_id=video.id,
                file_size=file_size,
                upload_duration=duration,
            )

        return UploadResult.succeeded(video.id, file_size, duration)

    def _resolve(self, ref: str) -> Optional[VideoMetadata]:
        try:
            metadata = self.resolver.resolve(ref)
        except MediaResolverError as e:
            self.logger.warning(f"Local video not found ({e.code.value}): {e}")
            return None
        except Exception as e:
            self.logger.error(f"Unexpected error resolving {ref}: {e}", exc_info=True)
            return None

        if metadata is None or metadata.local_path is None:
            self.logger.warning(f"Resolver returned no local file for {ref}")
            return None

        self.logger.debug(f"Resolved {ref}: {metadata}")
        return metadata

    def _report(self, ref: str, result: UploadResult) -> None:
        """Hand the result to the reporter; reporter errors never escape"""
        try:
            self.reporter.report(ref, result)
        except Exception as e:
            self.logger.error(f"Result reporter failed: {e}", exc_info=True)

    # =========================================================================
    # LISTING
    # =========================================================================

    def list_videos(self) -> List[VideoMetadata]:
        """
        Get the list of videos from the registry.

        Pass-through with no filtering, paging or caching.

        Returns:
            Videos known to the registry (empty if it holds none)

        Raises:
            RegistryError: If the registry could not be queried
        """
        videos = self.registry.list_videos()
        self.logger.info(f"Registry holds {len(videos)} video(s)")
        return videos

    # =========================================================================
    # STATUS
    # =========================================================================

    def test_connection(self) -> bool:
        """
        Test connection to the Video Registry.

        Returns:
            True if connection successful
        """
        self.logger.info("Testing registry connection...")

        try:
            result = self.registry.test_connection()
        except Exception as e:
            self.logger.error(f"Connection test error: {e}")
            return False

        if result:
            self.logger.info("✅ Connection test passed")
        else:
            self.logger.warning("❌ Connection test failed")
        return result

    def is_ready(self) -> bool:
        """True if the registry client is ready to upload"""
        return self.registry.is_available()

    def get_status(self) -> Dict[str, Any]:
        """
        Get current controller status.

        Returns:
            Dictionary with status information
        """
        return {
            "ready": self.is_ready(),
            "max_upload_size_bytes": self.max_upload_size_bytes,
            "resolver_type": type(self.resolver).__name__,
            "registry_type": type(self.registry).__name__,
            "reporter_type": type(self.reporter).__name__,
        }

    def cleanup(self) -> None:
        """Release registry transport resources"""
        self.registry.close()
        self.logger.info("Upload Controller cleanup")
