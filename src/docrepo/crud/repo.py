from __future__ import annotations
from abc import ABC, abstractmethod
from docrepo.crud.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Insert or replace by id, assigning a fresh id when unset. Return the stored doc."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str | None) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        raise NotImplementedError
