#!/usr/bin/env python3
"""
Upload Video - Command Line Client

Upload local videos to the Video Registry, or list what it holds.

Usage:
    python scripts/upload_video.py upload /path/to/clip.mp4
    python scripts/upload_video.py upload file:///videos/a.mp4 b.mp4 --background
    python scripts/upload_video.py list
    python scripts/upload_video.py check

Server and size limit come from .env / config/upload.yaml and can be
overridden with --server and --max-size.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.logging_setup import setup_logging
from registry import RegistryError
from upload import UploadConfig, UploadManager, create_upload_controller
from upload.implementations.callback_reporter import CallbackReporter

logger = logging.getLogger(__name__)


def print_status(message: str) -> None:
    """Console result reporter"""
    print(message)


def cmd_upload(controller, refs: list, background: bool, workers: int) -> int:
    """Upload every reference; exit code 0 only if all succeeded."""
    if not background:
        results = [controller.upload_video(ref) for ref in refs]
    else:
        manager = UploadManager(controller, max_workers=workers)
        futures = [manager.queue_upload(ref) for ref in refs]
        logger.info(f"📤 Queued {len(futures)} upload(s)")
        results = [future.result() for future in futures]
        manager.shutdown()

    failed = sum(1 for result in results if not result.success)
    logger.info(f"✅ Successful: {len(results) - failed}  ❌ Failed: {failed}")
    return 0 if failed == 0 else 1


def cmd_list(controller) -> int:
    try:
        videos = controller.list_videos()
    except RegistryError as e:
        logger.error(f"❌ Could not list videos: {e}")
        return 1

    if not videos:
        print("No videos in registry")
        return 0

    for video in videos:
        duration = (
            f"{video.duration_ms / 1000:.1f}s" if video.duration_ms else "?"
        )
        print(f"{video.title}\t{video.content_type}\t{duration}")
    return 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Upload local videos to the Video Registry",
        epilog="""
Examples:
  %(prog)s upload clip.mp4                 # Upload one video
  %(prog)s upload a.mp4 b.mp4 --background # Upload on worker threads
  %(prog)s list                            # List registry videos
  %(prog)s check                           # Test registry connection
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", choices=["upload", "list", "check"])
    parser.add_argument("refs", nargs="*", help="Video paths or file:// URIs")
    parser.add_argument("--server", help="Registry base URL")
    parser.add_argument(
        "--max-size",
        type=int,
        help="Maximum upload size in bytes",
    )
    parser.add_argument(
        "--background",
        action="store_true",
        help="Run uploads on background worker threads",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use in-memory resolver and registry (no network)",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else "INFO", log_to_file=False)

    if args.command == "upload" and not args.refs:
        parser.error("upload needs at least one video reference")

    try:
        config = UploadConfig()
        if args.server:
            config.set("server_url", args.server)
        if args.max_size is not None:
            config.set("max_upload_size_bytes", args.max_size)

        controller = create_upload_controller(
            mode="mock" if args.mock else "real",
            config=config,
            reporter=CallbackReporter(print_status),
        )
    except (ValueError, RuntimeError) as e:
        logger.error(f"❌ Failed to initialize uploader: {e}")
        return 1

    try:
        if args.command == "upload":
            return cmd_upload(
                controller,
                args.refs,
                args.background,
                config.upload_workers,
            )
        if args.command == "list":
            return cmd_list(controller)
        return 0 if controller.test_connection() else 1
    finally:
        controller.cleanup()


if __name__ == "__main__":
    sys.exit(main())
