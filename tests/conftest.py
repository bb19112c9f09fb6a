from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def store():
    from docstore.memory_store import InMemoryDocumentStore

    return InMemoryDocumentStore()


@pytest.fixture
def now() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """
    Clear DOCSTORE_* variables so settings tests never depend on the caller's shell.
    """
    for name in ("DOCSTORE_LOG_LEVEL", "DOCSTORE_DEBUG_LOG_QUERIES"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
