"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (API keys, credentials) should be in .env, NOT here
- Import these settings in modules: from config.settings import REGISTRY_SERVER_URL
- Every value can be overridden from the environment (or .env file)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# VIDEO REGISTRY CONFIGURATION
# =============================================================================

# Base URL of the Video Registry service (no trailing slash needed)
REGISTRY_SERVER_URL = os.getenv("REGISTRY_SERVER_URL", "http://localhost:8080")

# HTTP method used to send video bytes: POST (multipart) or PUT
REGISTRY_DATA_METHOD = os.getenv("REGISTRY_DATA_METHOD", "POST").upper()

# HTTP request timeout (seconds) - applies to every registry call
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

# Reachability check (used by test_connection)
NETWORK_CHECK_TIMEOUT = 3  # seconds

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Largest file the client will try to send (bytes).
# Files at or above this size are rejected before any byte transfer.
MAX_UPLOAD_SIZE_BYTES = int(
    os.getenv("MAX_UPLOAD_SIZE_BYTES", str(50 * 1024 * 1024)),
)  # 50 MB

# Background uploads (UploadManager)
UPLOAD_WORKERS = int(os.getenv("UPLOAD_WORKERS", "2"))

# Optional YAML overrides for the upload module
UPLOAD_CONFIG_FILE = Path(os.getenv("UPLOAD_CONFIG_FILE", "config/upload.yaml"))

# =============================================================================
# LOCAL MEDIA CONFIGURATION
# =============================================================================

# Relative references are resolved against this directory
MEDIA_ROOT = Path(os.getenv("MEDIA_ROOT", "."))

# Probe duration with ffprobe when resolving local videos
ENABLE_FFPROBE = os.getenv("ENABLE_FFPROBE", "true").lower() == "true"
FFPROBE_TIMEOUT_SECONDS = 10

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "/var/log/video-upload"))
LOG_FILE = "upload.log"
LOG_BACKUP_DAYS = 7
