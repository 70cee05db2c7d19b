"""Dict-backed DocumentRepo with injectable clock and id factory"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from loguru import logger

from docstore.config import Settings
from docstore.core.errors import IdGenerationError
from docstore.core.matcher import matches
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.clock import as_utc, utcnow
from docstore.core.utils.ids import new_id
from docstore.crud.repo import DocumentRepo


@dataclass
class MemoryRepo(DocumentRepo):
    clock: Callable[[], datetime] = utcnow
    id_factory: Callable[[], str] = new_id
    max_id_attempts: int = 100
    _docs: dict[str, Document] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> MemoryRepo:
        return cls(max_id_attempts=settings.max_id_attempts, **kwargs)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def _generate_id(self) -> str:
        """Draw ids until one is unused. Caller must hold the lock."""
        for _ in range(self.max_id_attempts):
            candidate = self.id_factory()
            if candidate and candidate not in self._docs:
                return candidate
            logger.warning(f"Generated id {candidate!r} is unusable, retrying")
        logger.error(f"No unique id after {self.max_id_attempts} attempts")
        raise IdGenerationError(f"Unable to generate a unique id after {self.max_id_attempts} attempts")

    def save(self, doc: Document) -> Document:
        """Store a normalized copy of doc; the caller's instance is left untouched.

        A missing or empty id is generated. An existing id keeps its stored
        created time; a new one gets clock() regardless of doc.created.
        """
        with self._lock:
            doc_id = doc.id or self._generate_id()
            existing = self._docs.get(doc_id)
            if existing is not None:
                created = existing.created
                logger.debug(f"Updating document {doc_id}")
            else:
                created = as_utc(self.clock())
                logger.debug(f"Creating document {doc_id}")
            stored = doc.model_copy(update={"id": doc_id, "created": created})
            self._docs[doc_id] = stored
        return stored

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        with self._lock:
            snapshot = list(self._docs.values())
        return [d for d in snapshot if matches(d, request)]
