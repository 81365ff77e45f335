from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert document, assigning an id when it has none. Return the saved document."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: str) -> Document | None:
        """Return the document stored under id, or None when absent or id is not numeric."""
        raise NotImplementedError
