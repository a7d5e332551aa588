"""
HTTP Registry Client Implementation

Concrete implementation of RegistryClientInterface for a JSON REST
Video Registry:

    POST {server}/video            register metadata -> video JSON
    POST {server}/video/{id}/data  multipart "data" part -> {"state": ...}
    GET  {server}/video            list -> array of video JSON
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

import requests

from config.settings import HTTP_TIMEOUT, REGISTRY_DATA_METHOD
from core.network import check_endpoint_connectivity, parse_endpoint
from media.models.video_metadata import VideoMetadata
from registry.constants import (
    DATA_PARAMETER,
    SUPPORTED_DATA_METHODS,
    VIDEO_DATA_PATH,
    VIDEO_SVC_PATH,
    RegistryErrorCode,
)
from registry.interfaces.registry_interface import (
    RegistryClientInterface,
    RegistryError,
)
from registry.models.registered_video import (
    RegisteredVideo,
    VideoStatus,
    metadata_from_dict,
    metadata_to_dict,
)


class HttpRegistryClient(RegistryClientInterface):
    """
    Video Registry client over HTTP/JSON using requests.

    Features:
    - One shared requests.Session (connection reuse)
    - Per-request timeout
    - Sends the file as one multipart "data" part (requests builds the
      body in memory)
    - Maps every transport/HTTP/body problem to RegistryError
    """

    def __init__(
        self,
        server_url: str,
        timeout: float = HTTP_TIMEOUT,
        data_method: str = REGISTRY_DATA_METHOD,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize HTTP registry client.

        Args:
            server_url: Base URL of the registry, e.g. "http://localhost:8080"
            timeout: Timeout for each HTTP request (seconds)
            data_method: HTTP method for the data upload ("POST" or "PUT")
            session: Pre-configured requests.Session (optional)

        Raises:
            ValueError: If server_url or data_method is invalid

        Example:
            client = HttpRegistryClient("http://localhost:8080")
            videos = client.list_videos()
        """
        self.logger = logging.getLogger(__name__)

        if parse_endpoint(server_url) is None:
            raise ValueError(f"Invalid registry server URL: {server_url!r}")

        method = data_method.upper()
        if method not in SUPPORTED_DATA_METHODS:
            raise ValueError(
                f"Unsupported data upload method: {data_method}. "
                f"Supported: {SUPPORTED_DATA_METHODS}",
            )

        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self.data_method = method
        self.session = session or requests.Session()

        self.logger.info(f"HTTP Registry client initialized ({self.server_url})")

    # =========================================================================
    # REGISTRY OPERATIONS
    # =========================================================================

    def register(self, metadata: VideoMetadata) -> RegisteredVideo:
        self.logger.debug(f"Registering metadata: {metadata}")

        data = self._request(
            "POST",
            VIDEO_SVC_PATH,
            json=metadata_to_dict(metadata),
        )
        if data is None:
            raise RegistryError(
                "Registry returned no video for registration",
                code=RegistryErrorCode.EMPTY_RESPONSE,
            )

        try:
            video = RegisteredVideo.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise RegistryError(
                f"Malformed registration response: {data!r}",
                code=RegistryErrorCode.INVALID_RESPONSE,
            ) from e

        self.logger.info(f"Registered video {video.id} ({video.content_type})")
        return video

    def upload_data(
        self,
        video_id: str,
        content_type: str,
        file_path: Path,
    ) -> VideoStatus:
        path = Path(file_path)
        url_path = VIDEO_DATA_PATH.format(id=video_id)

        self.logger.info(
            f"Uploading data for video {video_id}: {path.name} "
            f"({self.data_method} {url_path})",
        )

        try:
            with open(path, "rb") as video_file:
                data = self._request(
                    self.data_method,
                    url_path,
                    files={DATA_PARAMETER: (path.name, video_file, content_type)},
                )
        except OSError as e:
            raise RegistryError(
                f"Cannot read video file {path}: {e}",
                code=RegistryErrorCode.FILE_ERROR,
            ) from e

        if data is None:
            raise RegistryError(
                f"Registry returned no status for video {video_id}",
                code=RegistryErrorCode.EMPTY_RESPONSE,
            )

        try:
            status = VideoStatus.from_dict(data)
        except AttributeError as e:
            raise RegistryError(
                f"Malformed status response: {data!r}",
                code=RegistryErrorCode.INVALID_RESPONSE,
            ) from e

        self.logger.debug(f"Video {video_id} state: {status.state.value}")
        return status

    def list_videos(self) -> List[VideoMetadata]:
        data = self._request("GET", VIDEO_SVC_PATH)

        # null body means the registry holds no videos
        if data is None:
            self.logger.debug("Registry returned no video list, treating as empty")
            return []

        if not isinstance(data, list):
            raise RegistryError(
                f"Expected a list of videos, got {type(data).__name__}",
                code=RegistryErrorCode.INVALID_RESPONSE,
            )

        try:
            videos = [metadata_from_dict(item) for item in data]
        except AttributeError as e:
            raise RegistryError(
                "Malformed entry in video list",
                code=RegistryErrorCode.INVALID_RESPONSE,
            ) from e

        self.logger.debug(f"Registry listed {len(videos)} video(s)")
        return videos

    # =========================================================================
    # STATUS
    # =========================================================================

    def is_available(self) -> bool:
        return self.session is not None

    def test_connection(self) -> bool:
        """Check that the registry host accepts connections"""
        reachable = check_endpoint_connectivity(self.server_url)
        if reachable:
            self.logger.info(f"✅ Registry reachable: {self.server_url}")
        else:
            self.logger.error(f"❌ Registry unreachable: {self.server_url}")
        return reachable

    def close(self) -> None:
        self.session.close()
        self.logger.debug("HTTP session closed")

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Perform one HTTP request and decode its JSON body.

        Args:
            method: HTTP method
            path: Path relative to server_url
            **kwargs: Passed to requests.Session.request

        Returns:
            Decoded JSON body, or None if the body is empty or JSON null

        Raises:
            RegistryError: On transport error, HTTP error status or bad JSON
        """
        url = f"{self.server_url}{path}"

        try:
            response = self.session.request(
                method,
                url,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.Timeout as e:
            raise RegistryError(
                f"{method} {url} timed out after {self.timeout}s",
                code=RegistryErrorCode.TIMEOUT,
            ) from e
        except requests.RequestException as e:
            raise RegistryError(
                f"{method} {url} failed: {e}",
                code=RegistryErrorCode.NETWORK_ERROR,
            ) from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise RegistryError(
                f"{method} {url} returned HTTP {response.status_code}",
                code=RegistryErrorCode.HTTP_ERROR,
                http_status=response.status_code,
            ) from e

        if not response.content or not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise RegistryError(
                f"{method} {url} returned invalid JSON",
                code=RegistryErrorCode.INVALID_RESPONSE,
                http_status=response.status_code,
            ) from e
