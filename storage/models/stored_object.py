"""
Stored Object Model

Data class representing one object read from a bucket (or fetched from a
remote URL): a readable byte stream plus optional size and content type.
"""

from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class StoredObject:
    """
    A readable object.

    The stream is owned by the caller once returned; read it once and
    close it (or use the object as a context manager).
    """

    key: str  # Bucket key or URL the object came from
    stream: BinaryIO
    size: Optional[int] = None  # Bytes, if known
    content_type: Optional[str] = None  # MIME type, if known

    def read(self) -> bytes:
        """Read the full payload and close the stream"""
        try:
            return self.stream.read()
        finally:
            self.close()

    def close(self) -> None:
        """Close the underlying stream"""
        close = getattr(self.stream, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "StoredObject":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
