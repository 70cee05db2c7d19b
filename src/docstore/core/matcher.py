"""Search predicate: does a document satisfy a SearchRequest"""

from __future__ import annotations

from docstore.core.models import Document, SearchRequest


def matches(doc: Document, request: SearchRequest | None) -> bool:
    """True when doc satisfies every criterion set on request (OR within a list).

    None criteria are skipped; an empty list matches nothing. Author and date
    criteria require doc.author / doc.created to be set, else ValueError.
    """
    if request is None:
        return True

    if request.title_prefixes is not None and \
            not any(doc.title.startswith(p) for p in request.title_prefixes):
        return False

    if request.contains_contents is not None and \
            not any(s in doc.content for s in request.contains_contents):
        return False

    if request.author_ids is not None:
        if doc.author is None:
            raise ValueError(f"Document {doc.id!r} has no author; cannot filter by author_ids")
        if doc.author.id not in request.author_ids:
            return False

    if request.created_from is not None or request.created_to is not None:
        if doc.created is None:
            raise ValueError(f"Document {doc.id!r} has no created timestamp; cannot filter by date")
        if request.created_from is not None and doc.created < request.created_from:
            return False
        if request.created_to is not None and doc.created > request.created_to:
            return False

    return True
