"""
JSON text codec backed by pydantic.

Values go through TypeAdapter(...).dump_python(mode="json") to become plain JSON
data (models, dataclasses, datetimes, ...), then through the json module to
become text. Decoding is TypeAdapter(type_).validate_json in strict mode, which
reports syntax errors, shape mismatches and wrong field types (no "25" -> 25
coercion) as pydantic.ValidationError. Adapters are cached per type.

Non-finite floats are written as null (pydantic's default ser_json_inf_nan
policy); allow_nan=False keeps NaN/Infinity literals off disk regardless.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter

from .interfaces import DocumentCodec
from .settings import Settings

T = TypeVar("T")

COMPACT_SEPARATORS = (",", ":")


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class JsonCodec(DocumentCodec):
    def __init__(
        self,
        *,
        indent: int | None = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
    ):
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii

    @classmethod
    def from_settings(cls, settings: Settings) -> "JsonCodec":
        return cls(
            indent=settings.indent,
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
        )

    def encode(self, value: Any) -> str:
        """
        Raises TypeError / ValueError (pydantic's serialization and schema errors
        subclass these) when the value has no JSON form.
        """
        doc = _adapter(type(value)).dump_python(value, mode="json")
        return json.dumps(
            doc,
            indent=self.indent,
            separators=None if self.indent is not None else COMPACT_SEPARATORS,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            allow_nan=False,
        )

    def decode(self, text: str | bytes, type_: type[T]) -> T:
        return _adapter(type_).validate_json(text, strict=True)
