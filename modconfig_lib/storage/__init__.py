"""Storage abstraction package for modconfig."""

from .base import StorageBackend
from .file_backend import FileStorageBackend
from .memory_backend import MemoryStorageBackend
from .serializer import get_serializer

__all__ = ["StorageBackend", "FileStorageBackend", "MemoryStorageBackend", "get_serializer"]
