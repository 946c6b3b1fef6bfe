from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass, field
from uuid import uuid4

from docrepo.config import Settings
from docrepo.crud.matching import AUTHOR_MODES, CONTENT_MODES, matches
from docrepo.crud.models import Document, SearchRequest
from docrepo.crud.repo import DocumentRepo
from docrepo.log import get_logger


logger = get_logger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Dict-backed repository keyed by document id.

    Single-threaded by default; thread_safe=True guards every operation
    with one re-entrant lock.
    """
    content_mode: str = "prefix"
    author_mode: str = "document_id"
    thread_safe: bool = False
    _docs: dict[str, Document] = field(default_factory=dict)

    def __post_init__(self):
        if self.content_mode not in CONTENT_MODES:
            raise ValueError(f"Unknown content mode: {self.content_mode!r}")
        if self.author_mode not in AUTHOR_MODES:
            raise ValueError(f"Unknown author mode: {self.author_mode!r}")
        self._lock = threading.RLock() if self.thread_safe else nullcontext()

    @classmethod
    def from_settings(cls, settings: Settings) -> MemoryRepo:
        return cls(
            content_mode=settings.content_match,
            author_mode=settings.author_match,
            thread_safe=settings.thread_safe,
        )

    def _new_id(self) -> str:
        doc_id = str(uuid4())
        while doc_id in self._docs:
            doc_id = str(uuid4())
        return doc_id

    def save(self, doc: Document) -> Document:
        if doc is None:
            raise ValueError("Cannot save None")

        with self._lock:
            if not doc.id:
                doc = doc.model_copy(update={"id": self._new_id()})
                logger.debug("Assigned id %s to new document", doc.id)
            elif doc.id in self._docs:
                logger.debug("Replacing document %s", doc.id)
            else:
                logger.debug("Inserting document with caller-supplied id %s", doc.id)
            self._docs[doc.id] = doc
        return doc

    def find_by_id(self, doc_id: str | None) -> Document | None:
        if not doc_id:
            return None
        with self._lock:
            return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None) -> list[Document]:
        if request is None:
            return []
        with self._lock:
            found = [d for d in self._docs.values() if self.matches(d, request)]
            total = len(self._docs)
        logger.debug("Search matched %d of %d documents", len(found), total)
        return found

    def matches(self, doc: Document, request: SearchRequest) -> bool:
        return matches(doc, request, self.content_mode, self.author_mode)

    def clear(self) -> None:
        """Drop every stored document."""
        with self._lock:
            self._docs.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __bool__(self) -> bool:
        # an empty repository is still a repository
        return True
