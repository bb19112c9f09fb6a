from __future__ import annotations

from typing import Protocol

from .models import Document, SearchRequest


class DocumentStore(Protocol):
    """
    Minimal store interface: upsert, filtered scan and point lookup keyed by document id.
    """

    def save(self, document: Document) -> Document:
        """Insert or replace the document and return the stored value."""
        ...

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every stored document matching all criteria set on the request."""
        ...

    def find_by_id(self, document_id: str) -> Document | None:
        ...
