from __future__ import annotations

import logging
import threading
import uuid

from .filters import matches
from .interfaces import DocumentStore
from .locks import KeyLockRegistry
from .models import Document, SearchRequest, utc_now
from .settings import Settings

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """
    Dict-backed document store.

    - save() upserts by id, generating a uuid4 id when none is given.
    - created is fixed at first insert; later saves replace everything else.
    - Stored documents are frozen, so readers never observe a partial update.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._guard = threading.Lock()
        self._documents: dict[str, Document] = {}
        self._id_locks = KeyLockRegistry()

    def save(self, document: Document) -> Document:
        if document is None:
            raise ValueError("Document cannot be None")

        doc_id = document.id
        if doc_id is None or not doc_id.strip():
            doc_id = str(uuid.uuid4())

        with self._id_locks.lock_for(doc_id):
            existing = self.find_by_id(doc_id)
            if existing is not None:
                created = existing.created
                logger.debug("DOC SAVE: updating id=%s", doc_id)
            else:
                created = document.created if document.created is not None else utc_now()
                logger.debug("DOC SAVE: inserting id=%s", doc_id)

            stored = Document(
                id=doc_id,
                title=document.title,
                content=document.content,
                author=document.author,
                created=created,
            )
            with self._guard:
                self._documents[doc_id] = stored
        return stored

    def search(self, request: SearchRequest | None) -> list[Document]:
        if request is None:
            request = SearchRequest()
        with self._guard:
            snapshot = list(self._documents.values())
        hits = [doc for doc in snapshot if matches(doc, request)]
        if self._settings.debug_log_queries:
            logger.debug(
                "DOC SEARCH: request=%s scanned=%d hits=%d",
                request.model_dump(exclude_none=True),
                len(snapshot),
                len(hits),
            )
        return hits

    def find_by_id(self, document_id: str) -> Document | None:
        with self._guard:
            return self._documents.get(document_id)

    def __len__(self) -> int:
        with self._guard:
            return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        with self._guard:
            return document_id in self._documents
