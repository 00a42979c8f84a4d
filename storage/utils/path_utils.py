"""
Path Utilities

Helper functions for mapping object keys onto the local filesystem.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Optional

logger = logging.getLogger(__name__)


def normalize_key(key: str) -> Optional[str]:
    """
    Normalize an object key.

    Leading slashes are dropped. Keys that try to escape the bucket
    ("..") or are empty are rejected.

    Args:
        key: Object key as supplied by the caller

    Returns:
        Normalized POSIX-style key, or None if the key is not acceptable

    Example:
        normalize_key("/videos/clip.mp4")  # "videos/clip.mp4"
        normalize_key("../etc/passwd")     # None
    """
    if not isinstance(key, str):
        return None

    parts = [part for part in PurePosixPath(key.strip()).parts if part != "/"]
    if not parts or any(part in ("..", ".") for part in parts):
        logger.debug(f"Rejected object key: {key!r}")
        return None

    return "/".join(parts)


def resolve_key(base_path: Path, key: str) -> Optional[Path]:
    """
    Resolve an object key to a path under the bucket root.

    Args:
        base_path: Bucket root directory
        key: Object key

    Returns:
        Absolute path inside base_path, or None if the key is not acceptable
    """
    normalized = normalize_key(key)
    if normalized is None:
        return None

    path = base_path.joinpath(*normalized.split("/"))

    # Symlinks could still point outside the bucket
    try:
        path.resolve().relative_to(base_path.resolve())
    except ValueError:
        logger.warning(f"Object key resolves outside bucket: {key!r}")
        return None

    return path


def ensure_directory(path: Path, create: bool = True) -> bool:
    """
    Ensure directory exists.

    Args:
        path: Directory path
        create: If True, create if doesn't exist

    Returns:
        True if directory exists or was created
    """
    try:
        if path.exists():
            if not path.is_dir():
                logger.error(f"Path exists but is not a directory: {path}")
                return False
            return True

        if create:
            path.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Created directory: {path}")
            return True

        return False

    except OSError as e:
        logger.error(f"Failed to create directory {path}: {e}")
        return False
