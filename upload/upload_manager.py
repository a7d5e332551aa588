"""
Upload Manager

Runs blocking uploads on a small worker pool so the calling thread
(UI loop, button handler, ...) returns immediately.

The controller stays synchronous; this class only schedules it.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional

from upload.constants import DEFAULT_UPLOAD_WORKERS
from upload.controllers.upload_controller import UploadController
from upload.models.upload_result import UploadResult

CompletionCallback = Callable[[str, UploadResult], None]


class UploadManager:
    """
    Background upload scheduler.

    Usage:
        manager = UploadManager(controller, max_workers=2)

        future = manager.queue_upload(
            "/videos/clip.mp4",
            on_complete=lambda ref, result: print(result.message),
        )
        ...
        manager.shutdown()
    """

    def __init__(
        self,
        controller: UploadController,
        max_workers: int = DEFAULT_UPLOAD_WORKERS,
    ):
        """
        Initialize upload manager.

        Args:
            controller: Controller that performs each upload
            max_workers: Number of uploads allowed to run at once

        Raises:
            ValueError: If max_workers < 1
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self.logger = logging.getLogger(__name__)
        self.controller = controller
        self.max_workers = max_workers

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="upload",
        )
        self._lock = threading.Lock()
        self._pending = 0
        self._active = 0
        self._completed = 0
        self._shutdown = False

        self.logger.info(f"Upload Manager started ({max_workers} worker(s))")

    def queue_upload(
        self,
        ref: str,
        on_complete: Optional[CompletionCallback] = None,
    ) -> "Future[UploadResult]":
        """
        Schedule an upload and return immediately.

        Args:
            ref: Local video reference
            on_complete: Called from the worker thread with (ref, result)

        Returns:
            Future resolving to the UploadResult

        Raises:
            RuntimeError: If the manager has been shut down
        """
        # Workers take the lock before decrementing _pending
        with self._lock:
            if self._shutdown:
                raise RuntimeError("Upload Manager is shut down")
            future = self._executor.submit(self._run, ref, on_complete)
            self._pending += 1

        self.logger.debug(f"Queued upload: {ref}")
        return future

    def _run(
        self,
        ref: str,
        on_complete: Optional[CompletionCallback],
    ) -> UploadResult:
        with self._lock:
            self._pending -= 1
            self._active += 1

        try:
            result = self.controller.upload_video(ref)
        finally:
            with self._lock:
                self._active -= 1
                self._completed += 1

        if on_complete is not None:
            try:
                on_complete(ref, result)
            except Exception as e:
                self.logger.error(f"Upload completion callback failed: {e}", exc_info=True)

        return result

    def get_queue_status(self) -> Dict[str, Any]:
        """
        Get queue length and active uploads.

        Returns:
            Dictionary with pending, active and completed counts
        """
        with self._lock:
            return {
                "pending": self._pending,
                "active": self._active,
                "completed": self._completed,
                "max_workers": self.max_workers,
                "shutdown": self._shutdown,
            }

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop accepting uploads.

        Args:
            wait: If True, block until queued uploads have finished
        """
        with self._lock:
            self._shutdown = True
        self._executor.shutdown(wait=wait)
        self.logger.info("Upload Manager shut down")
