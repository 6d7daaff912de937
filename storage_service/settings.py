from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_ENV_FILE = "local.env"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_optional_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    # Text layer
    encoding: str = "utf-8"

    # JSON layout (None indent = compact)
    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False


def get_settings(env_file: str | None = DEFAULT_ENV_FILE) -> Settings:
    """
    Build Settings from STORAGE_SERVICE_* environment variables.

    If env_file is given and exists, it is loaded first without overriding
    variables already present in the environment.
    """
    if env_file:
        load_dotenv(env_file)

    encoding = os.getenv("STORAGE_SERVICE_ENCODING", "utf-8").strip() or "utf-8"
    indent = _env_optional_int("STORAGE_SERVICE_JSON_INDENT")
    sort_keys = _env_bool("STORAGE_SERVICE_SORT_KEYS", False)
    ensure_ascii = _env_bool("STORAGE_SERVICE_ENSURE_ASCII", False)

    return Settings(
        encoding=encoding,
        indent=indent,
        sort_keys=sort_keys,
        ensure_ascii=ensure_ascii,
    )
