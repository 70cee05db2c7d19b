from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert doc, assigning an id if missing and keeping the first-seen created time."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return stored documents matching request, in no particular order."""
        raise NotImplementedError
