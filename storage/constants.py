"""
Storage Module Constants

Defaults for the object store. Deployment values (base path, config file
location) live in config/settings.py.
"""

from config.settings import OBJECT_STORE_BASE_PATH, OBJECT_STORE_CONFIG_PATH

# Default bucket directory for the local object store
DEFAULT_STORE_BASE = OBJECT_STORE_BASE_PATH

# Default YAML config location
DEFAULT_CONFIG_PATH = OBJECT_STORE_CONFIG_PATH

# Guess content type from the key's extension when none was recorded
GUESS_CONTENT_TYPE = True

# Suffix of the sidecar file that records an explicit content type
CONTENT_TYPE_SUFFIX = ".content-type"

# Copy buffer for streamed writes
WRITE_CHUNK_SIZE = 1024 * 1024  # 1 MB
