"""
Local Object Store Implementation

Concrete implementation of ObjectStoreInterface backed by a directory.
Each key maps to a file under the bucket root; an optional sidecar file
records an explicit content type.
"""

import logging
import mimetypes
import shutil
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from storage.config import ObjectStoreConfig
from storage.constants import CONTENT_TYPE_SUFFIX, WRITE_CHUNK_SIZE
from storage.interfaces.storage_interface import ObjectStoreInterface, StorageError
from storage.models.stored_object import StoredObject
from storage.utils.path_utils import ensure_directory, resolve_key


class LocalObjectStore(ObjectStoreInterface):
    """
    Filesystem-backed object store.

    Usage:
        store = LocalObjectStore(ObjectStoreConfig())
        obj = store.get("videos/clip.mp4")
        if obj is None:
            print("missing")
    """

    def __init__(self, config: Optional[ObjectStoreConfig] = None):
        """
        Initialize local object store.

        Args:
            config: ObjectStoreConfig (None = load default config)

        Raises:
            StorageError: If the bucket root cannot be used
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ObjectStoreConfig()
        self.base_path = self.config.base_path

        if not ensure_directory(self.base_path, create=self.config.create_base_path):
            raise StorageError(f"Bucket directory not available: {self.base_path}")

        self.logger.info(f"Local object store initialized (base: {self.base_path})")

    def _path_for(self, key: str) -> Optional[Path]:
        path = resolve_key(self.base_path, key)
        if path is None or path.name.endswith(CONTENT_TYPE_SUFFIX):
            return None
        return path

    def _content_type_for(self, path: Path) -> Optional[str]:
        """Recorded content type, else a guess from the extension"""
        sidecar = path.with_name(path.name + CONTENT_TYPE_SUFFIX)
        if sidecar.exists():
            recorded = sidecar.read_text(encoding="utf-8").strip()
            if recorded:
                return recorded

        if self.config.guess_content_type:
            guessed, _ = mimetypes.guess_type(path.name)
            return guessed

        return None

    def get(self, key: str) -> Optional[StoredObject]:
        """
        Open an object for reading.

        Returns:
            StoredObject, or None if the key is absent or not acceptable
        """
        path = self._path_for(key)
        if path is None or not path.is_file():
            self.logger.debug(f"Object not found: {key}")
            return None

        try:
            size = path.stat().st_size
            content_type = self._content_type_for(path)
            stream = open(path, "rb")
        except OSError as e:
            raise StorageError(f"Failed to open object {key}: {e}") from e

        return StoredObject(
            key=key,
            stream=stream,
            size=size,
            content_type=content_type,
        )

    def put(
        self,
        key: str,
        data: Union[bytes, BinaryIO],
        content_type: Optional[str] = None,
    ) -> int:
        """Store an object under the bucket root"""
        path = self._path_for(key)
        if path is None:
            raise StorageError(f"Invalid object key: {key!r}")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            with open(path, "wb") as f:
                if isinstance(data, (bytes, bytearray, memoryview)):
                    f.write(data)
                else:
                    shutil.copyfileobj(data, f, WRITE_CHUNK_SIZE)

            sidecar = path.with_name(path.name + CONTENT_TYPE_SUFFIX)
            if content_type:
                sidecar.write_text(content_type, encoding="utf-8")
            elif sidecar.exists():
                sidecar.unlink()

            size = path.stat().st_size

        except OSError as e:
            raise StorageError(f"Failed to write object {key}: {e}") from e

        self.logger.debug(f"Stored object {key} ({size} bytes)")
        return size

    def exists(self, key: str) -> bool:
        path = self._path_for(key)
        return path is not None and path.is_file()

    def list_keys(self, prefix: str = "") -> List[str]:
        """List keys (sidecar files excluded)"""
        keys = []
        for path in self.base_path.rglob("*"):
            if not path.is_file() or path.name.endswith(CONTENT_TYPE_SUFFIX):
                continue
            key = path.relative_to(self.base_path).as_posix()
            if key.startswith(prefix):
                keys.append(key)
        return sorted(keys)

    def is_available(self) -> bool:
        """Bucket root exists and is a directory"""
        return self.base_path.is_dir()
