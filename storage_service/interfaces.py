from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class DocumentCodec(Protocol):
    """
    Minimal structured-text capability: a value <-> a single JSON text.
    """

    def encode(self, value: Any) -> str:
        """Return the full JSON text for value."""
        ...

    def decode(self, text: str | bytes, type_: type[T]) -> T:
        """Parse text and validate it into type_."""
        ...
