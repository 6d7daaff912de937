from __future__ import annotations

import os
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import storage_service` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Strip STORAGE_SERVICE_* variables and run from an empty directory so no
    stray local.env is picked up by get_settings().
    """
    for name in list(os.environ):
        if name.startswith("STORAGE_SERVICE_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def doc_path(tmp_path: Path) -> Path:
    return tmp_path / "doc.json"
