"""
Object Store Factory

Factory pattern for creating object store implementations.
"""

import logging
from typing import Literal, Optional

from storage.config import ObjectStoreConfig
from storage.implementations.local_storage import LocalObjectStore
from storage.implementations.mock_storage import MockObjectStore
from storage.interfaces.storage_interface import ObjectStoreInterface

# Type alias for better type hints
StoreMode = Literal["auto", "local", "mock"]


class ObjectStoreFactory:
    """
    Factory for creating object store implementations.

    Usage:
        # Auto-detect (uses local bucket directory)
        store = ObjectStoreFactory.create_store()

        # Force mock mode (useful for testing)
        store = ObjectStoreFactory.create_store(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_store(
        cls,
        mode: StoreMode = "auto",
        config: Optional[ObjectStoreConfig] = None,
    ) -> ObjectStoreInterface:
        """
        Create an object store instance.

        Args:
            mode: "auto" (use local), "local" (force local), "mock" (in-memory)
            config: ObjectStoreConfig (None = load default)

        Returns:
            ObjectStoreInterface implementation
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Object Store (forced)")
            return MockObjectStore()

        # "auto" and "local" both use the local bucket directory
        cls._logger.info("Creating Local Object Store")
        return LocalObjectStore(config)


def create_object_store(
    force_mock: bool = False,
    config: Optional[ObjectStoreConfig] = None,
) -> ObjectStoreInterface:
    """
    Quick object store creation with simple mock override.

    Example:
        store = create_object_store()
        store = create_object_store(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return ObjectStoreFactory.create_store(mode=mode, config=config)
