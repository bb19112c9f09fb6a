from __future__ import annotations

from .app import create_store
from .interfaces import DocumentStore
from .locks import KeyLockRegistry
from .memory_store import InMemoryDocumentStore
from .models import Author, Document, SearchRequest
from .settings import Settings, get_settings

__all__ = [
    "Author",
    "Document",
    "SearchRequest",
    "DocumentStore",
    "InMemoryDocumentStore",
    "KeyLockRegistry",
    "Settings",
    "get_settings",
    "create_store",
]
