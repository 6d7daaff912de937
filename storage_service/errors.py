from __future__ import annotations

import os
from pathlib import Path


class StorageError(Exception):
    """
    Base class for every failure raised by save/load.

    The underlying exception (OSError, pydantic error, ...) is chained as __cause__.
    """

    def __init__(self, path: str | os.PathLike[str], message: str):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class DocumentNotFoundError(StorageError):
    """The file (load) or its containing directory (save) does not exist."""


class DocumentAccessError(StorageError):
    """The filesystem refused to open/create/read/write the path."""


class EncodeError(StorageError):
    """The value could not be turned into JSON text."""


class DecodeError(StorageError):
    """The file is not valid UTF-8 JSON, or does not match the requested type."""


class DocumentIOError(StorageError):
    """Any other read/write/close failure (disk full, device error, ...)."""


def classify_os_error(path: str | os.PathLike[str], exc: OSError) -> StorageError:
    if isinstance(exc, FileNotFoundError):
        return DocumentNotFoundError(path, "no such file or directory")
    if isinstance(exc, (PermissionError, IsADirectoryError)):
        return DocumentAccessError(path, f"access denied ({exc.strerror or exc})")
    return DocumentIOError(path, f"I/O failure ({exc.strerror or exc})")
