from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, TypeVar

import aiofiles

from .codec import JsonCodec
from .errors import DecodeError, EncodeError, StorageError, classify_os_error
from .interfaces import DocumentCodec
from .settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = str | os.PathLike[str]


def _os_failure(op: str, path: PathLike, exc: OSError) -> StorageError:
    logger.debug("%s: failed on %s: %r", op, path, exc)
    return classify_os_error(path, exc)


class FileCodec:
    """
    Saves a value as one JSON document per file, and loads it back.

    - save/load block the calling thread.
    - save_async/load_async run encode/decode in a worker thread
      (asyncio.to_thread) and do the file I/O with aiofiles.

    Files are created or truncated, never replaced atomically; parent
    directories are never created. Every failure is raised as a StorageError
    subclass, identically for both variants.
    """

    def __init__(self, codec: DocumentCodec | None = None, *, encoding: str = "utf-8"):
        self._codec = codec if codec is not None else JsonCodec()
        self._encoding = encoding

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileCodec":
        return cls(JsonCodec.from_settings(settings), encoding=settings.encoding)

    @property
    def codec(self) -> DocumentCodec:
        return self._codec

    @property
    def encoding(self) -> str:
        return self._encoding

    # ------------------------------------------------------------------
    # encode / decode steps (shared by both variants)
    # ------------------------------------------------------------------

    def _encode(self, path: PathLike, data: Any) -> str:
        try:
            return self._codec.encode(data)
        except (TypeError, ValueError) as e:
            logger.debug("SAVE: failed to encode %s for %s: %r", type(data).__name__, path, e)
            raise EncodeError(path, f"cannot encode {type(data).__name__} as JSON") from e

    def _decode(self, path: PathLike, text: str, type_: Any) -> Any:
        try:
            return self._codec.decode(text, type_)
        except ValueError as e:
            logger.debug("LOAD: failed to decode %s: %r", path, e)
            raise DecodeError(path, f"content does not decode as {_type_name(type_)}") from e

    def _text_error(self, op: str, path: PathLike, exc: UnicodeError) -> StorageError:
        logger.debug("%s: %s text error on %s: %r", op, self._encoding, path, exc)
        if isinstance(exc, UnicodeEncodeError):
            return EncodeError(path, f"text is not representable in {self._encoding}")
        return DecodeError(path, f"content is not valid {self._encoding} text")

    # ------------------------------------------------------------------
    # blocking
    # ------------------------------------------------------------------

    def save(self, path: PathLike, data: Any) -> None:
        text = self._encode(path, data)
        try:
            with open(path, "w", encoding=self._encoding) as f:
                f.write(text)
        except OSError as e:
            raise _os_failure("SAVE", path, e) from e
        except UnicodeError as e:
            raise self._text_error("SAVE", path, e) from e
        logger.debug("SAVE: wrote %d chars to %s", len(text), path)

    def load(self, path: PathLike, type_: type[T] = Any) -> T:  # type: ignore[assignment]
        try:
            with open(path, "r", encoding=self._encoding) as f:
                text = f.read()
        except OSError as e:
            raise _os_failure("LOAD", path, e) from e
        except UnicodeError as e:
            raise self._text_error("LOAD", path, e) from e
        data = self._decode(path, text, type_)
        logger.debug("LOAD: read %d chars from %s as %s", len(text), path, _type_name(type_))
        return data

    # ------------------------------------------------------------------
    # non-blocking
    # ------------------------------------------------------------------

    async def save_async(self, path: PathLike, data: Any) -> None:
        text = await asyncio.to_thread(self._encode, path, data)
        try:
            async with aiofiles.open(path, "w", encoding=self._encoding) as f:
                await f.write(text)
        except OSError as e:
            raise _os_failure("SAVE", path, e) from e
        except UnicodeError as e:
            raise self._text_error("SAVE", path, e) from e
        logger.debug("SAVE: wrote %d chars to %s", len(text), path)

    async def load_async(self, path: PathLike, type_: type[T] = Any) -> T:  # type: ignore[assignment]
        try:
            async with aiofiles.open(path, "r", encoding=self._encoding) as f:
                text = await f.read()
        except OSError as e:
            raise _os_failure("LOAD", path, e) from e
        except UnicodeError as e:
            raise self._text_error("LOAD", path, e) from e
        data = await asyncio.to_thread(self._decode, path, text, type_)
        logger.debug("LOAD: read %d chars from %s as %s", len(text), path, _type_name(type_))
        return data


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)


DEFAULT_FILE_CODEC = FileCodec()


def save(path: PathLike, data: Any) -> None:
    """Encode data as compact JSON and write it to path (created or truncated)."""
    DEFAULT_FILE_CODEC.save(path, data)


def load(path: PathLike, type_: type[T] = Any) -> T:  # type: ignore[assignment]
    """Read path and validate its JSON into type_ (plain JSON values by default)."""
    return DEFAULT_FILE_CODEC.load(path, type_)


async def save_async(path: PathLike, data: Any) -> None:
    await DEFAULT_FILE_CODEC.save_async(path, data)


async def load_async(path: PathLike, type_: type[T] = Any) -> T:  # type: ignore[assignment]
    return await DEFAULT_FILE_CODEC.load_async(path, type_)
