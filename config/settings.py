"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Access tokens are NEVER read from here. They arrive with each request.
- Deployment-specific values can be overridden in .env
- Import these settings in modules: from config.settings import VIDEO_INSERT_URL
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# YOUTUBE API ENDPOINTS
# =============================================================================

YOUTUBE_API_BASE = os.getenv("YOUTUBE_API_BASE", "https://www.googleapis.com")

# videos.insert (multipart upload)
VIDEO_INSERT_URL = f"{YOUTUBE_API_BASE}/upload/youtube/v3/videos"
VIDEO_INSERT_PARTS = "snippet,status"

# thumbnails.set
THUMBNAIL_SET_URL = f"{YOUTUBE_API_BASE}/upload/youtube/v3/thumbnails/set"

# Host serving the auto-generated preset thumbnails
PRESET_THUMBNAIL_HOST = "https://i.ytimg.com"

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

DEFAULT_PRIVACY_STATUS = "private"  # public, private, or unlisted
DEFAULT_CATEGORY_ID = "22"  # 22 = People & Blogs

# Multipart boundary prefix (random suffix added per request)
MULTIPART_BOUNDARY_PREFIX = "----PublisherBoundary"

# HTTP timeout (seconds). Unset = transport default (no timeout).
_http_timeout = os.getenv("PUBLISHER_HTTP_TIMEOUT", "")
HTTP_TIMEOUT = float(_http_timeout) if _http_timeout else None

# =============================================================================
# OBJECT STORE CONFIGURATION
# =============================================================================

OBJECT_STORE_BASE_PATH = Path(
    os.getenv("OBJECT_STORE_BASE_PATH", "/var/lib/publisher/bucket"),
)
OBJECT_STORE_CONFIG_PATH = Path(
    os.getenv("OBJECT_STORE_CONFIG_PATH", "config/object_store.yaml"),
)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("PUBLISHER_LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("PUBLISHER_LOG_DIR", "/var/log/publisher")
LOG_SERVICE_FILE = "publisher.log"
LOG_BACKUP_DAYS = 7
