"""
Object Store Interface

Abstract interface for bucket-style object storage following Dependency
Inversion Principle. The publishing pipeline depends on this interface,
not on a concrete backend.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, List, Optional, Union

from storage.models.stored_object import StoredObject


class ObjectStoreInterface(ABC):
    """
    Abstract base class for object stores.

    Absence of an object is a normal outcome: get() returns None rather
    than raising. StorageError is reserved for backend failures.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[StoredObject]:
        """
        Open an object for reading.

        Args:
            key: Object key, e.g. "videos/2025/clip.mp4"

        Returns:
            StoredObject with stream, size and content type, or None if absent

        Raises:
            StorageError: If the backend fails (not for a missing object)
        """

    @abstractmethod
    def put(
        self,
        key: str,
        data: Union[bytes, BinaryIO],
        content_type: Optional[str] = None,
    ) -> int:
        """
        Store an object, replacing any existing one.

        Args:
            key: Object key
            data: Payload bytes or readable stream
            content_type: MIME type to record (optional)

        Returns:
            Number of bytes written

        Raises:
            StorageError: If the write fails
        """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """
        Check if an object exists.

        Returns:
            True if get(key) would return an object
        """

    @abstractmethod
    def list_keys(self, prefix: str = "") -> List[str]:
        """
        List object keys.

        Args:
            prefix: Only keys starting with this prefix

        Returns:
            Sorted list of keys
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the store is available and functional.

        Returns:
            True if the store is ready, False otherwise
        """


class StorageError(Exception):
    """
    Custom exception for object-store backend errors.

    Makes it easy to catch storage-specific errors:
        except StorageError as e:
            logger.error(f"Storage failed: {e}")
    """
