from __future__ import annotations

from .codec import JsonCodec
from .documents import JsonDocument
from .errors import (
    DecodeError,
    DocumentAccessError,
    DocumentIOError,
    DocumentNotFoundError,
    EncodeError,
    StorageError,
)
from .file_codec import FileCodec, load, load_async, save, save_async
from .interfaces import DocumentCodec
from .settings import Settings, get_settings

__all__ = [
    "save",
    "load",
    "save_async",
    "load_async",
    "FileCodec",
    "DocumentCodec",
    "JsonCodec",
    "JsonDocument",
    "Settings",
    "get_settings",
    "StorageError",
    "DocumentNotFoundError",
    "DocumentAccessError",
    "EncodeError",
    "DecodeError",
    "DocumentIOError",
]
