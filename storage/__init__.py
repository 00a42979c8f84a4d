"""
Storage Module

Bucket-style object storage the publisher reads videos and thumbnails from.

Architecture:
- interfaces/: Abstract base classes (contracts)
- implementations/: Concrete implementations (local directory and mock)
- models/: Data structures
- utils/: Shared utilities
"""

from storage.config import ObjectStoreConfig
from storage.factory import ObjectStoreFactory, create_object_store
from storage.interfaces.storage_interface import ObjectStoreInterface, StorageError
from storage.models.stored_object import StoredObject

# Public API - what users import
__all__ = [
    "ObjectStoreConfig",
    "ObjectStoreFactory",
    "ObjectStoreInterface",
    "StorageError",
    "StoredObject",
    "create_object_store",
]
