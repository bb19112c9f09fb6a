from __future__ import annotations

from .models import Document, SearchRequest


def _title_matches(doc: Document, prefixes: list[str]) -> bool:
    if doc.title is None:
        return False
    return any(doc.title.startswith(p) for p in prefixes)


def _content_matches(doc: Document, keywords: list[str]) -> bool:
    # All keywords must be present, unlike the other list criteria.
    if doc.content is None:
        return False
    return all(k in doc.content for k in keywords)


def _author_matches(doc: Document, author_ids: list[str]) -> bool:
    if doc.author is None or doc.author.id is None:
        return False
    return doc.author.id in author_ids


def matches(doc: Document, request: SearchRequest) -> bool:
    """
    True when the document satisfies every criterion set on the request.
    Unset or empty criteria are skipped.
    """
    if request.title_prefixes and not _title_matches(doc, request.title_prefixes):
        return False
    if request.contains_contents and not _content_matches(doc, request.contains_contents):
        return False
    if request.author_ids and not _author_matches(doc, request.author_ids):
        return False
    if request.created_from is not None:
        if doc.created is None or doc.created < request.created_from:
            return False
    if request.created_to is not None:
        if doc.created is None or doc.created > request.created_to:
            return False
    return True
