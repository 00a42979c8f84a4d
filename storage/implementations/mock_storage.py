"""
Mock Object Store Implementation

In-memory object store for testing without a filesystem.
"""

import io
import logging
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

from storage.interfaces.storage_interface import ObjectStoreInterface, StorageError
from storage.models.stored_object import StoredObject


class MockObjectStore(ObjectStoreInterface):
    """
    Mock object store for testing.

    Objects live in a dict. Every get() is recorded so tests can verify
    which keys the pipeline touched.
    """

    def __init__(self, fail_on_get: bool = False):
        """
        Initialize mock object store.

        Args:
            fail_on_get: If True, get() raises StorageError (backend failure)
        """
        self.logger = logging.getLogger(__name__)
        self.fail_on_get = fail_on_get

        # key -> (payload, content_type)
        self._objects: Dict[str, Tuple[bytes, Optional[str]]] = {}

        # Track operations for test verification
        self.get_history: List[str] = []

        self.logger.debug("[MOCK] Object store initialized")

    def get(self, key: str) -> Optional[StoredObject]:
        self.get_history.append(key)

        if self.fail_on_get:
            raise StorageError(f"Simulated object store failure for {key}")

        if key not in self._objects:
            return None

        payload, content_type = self._objects[key]
        return StoredObject(
            key=key,
            stream=io.BytesIO(payload),
            size=len(payload),
            content_type=content_type,
        )

    def put(
        self,
        key: str,
        data: Union[bytes, BinaryIO],
        content_type: Optional[str] = None,
    ) -> int:
        payload = bytes(data) if isinstance(data, (bytes, bytearray)) else data.read()
        self._objects[key] = (payload, content_type)
        self.logger.debug(f"[MOCK] Stored {key} ({len(payload)} bytes)")
        return len(payload)

    def exists(self, key: str) -> bool:
        return key in self._objects

    def list_keys(self, prefix: str = "") -> List[str]:
        return sorted(key for key in self._objects if key.startswith(prefix))

    def is_available(self) -> bool:
        """Mock store is always available"""
        return True

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def was_read(self, key: str) -> bool:
        """Check if get() was called for a key"""
        return key in self.get_history

    def clear_history(self) -> None:
        self.get_history.clear()
