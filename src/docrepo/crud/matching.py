"""Search predicate: per-document evaluation of a SearchRequest"""

from datetime import datetime
from typing import Iterable, Optional

from docrepo.crud.models import Document, SearchRequest


CONTENT_MODES = ("prefix", "substring")
AUTHOR_MODES = ("document_id", "author_id")


def _starts_with_any(value: Optional[str], prefixes: Iterable[str]) -> bool:
    """True if value is set and starts with at least one prefix (case-sensitive)."""
    return value is not None and any(value.startswith(p) for p in prefixes)


def _contains_any(value: Optional[str], needles: Iterable[str]) -> bool:
    return value is not None and any(n in value for n in needles)


def _after_lower(created: Optional[datetime], bound: Optional[datetime]) -> bool:
    """Inclusive lower bound; an unknown date or bound never excludes."""
    return bound is None or created is None or created >= bound


def _before_upper(created: Optional[datetime], bound: Optional[datetime]) -> bool:
    """Inclusive upper bound; an unknown date or bound never excludes."""
    return bound is None or created is None or created <= bound


def matches(
    doc: Document,
    request: SearchRequest,
    content_mode: str = "prefix",
    author_mode: str = "document_id",
    ) -> bool:
    """Return True if doc satisfies every active clause of request.

    Clauses with a None or empty request field are skipped. Content values are
    compared as prefixes unless content_mode is 'substring'. Author ids are
    compared as prefixes of the document's own id unless author_mode is
    'author_id', in which case author.id is used.
    Raises ValueError on an unknown mode.
    """
    if content_mode not in CONTENT_MODES:
        raise ValueError(f"Unknown content mode: {content_mode!r}")
    if author_mode not in AUTHOR_MODES:
        raise ValueError(f"Unknown author mode: {author_mode!r}")

    if request.title_prefixes and not _starts_with_any(doc.title, request.title_prefixes):
        return False

    if request.contains_contents:
        check = _contains_any if content_mode == "substring" else _starts_with_any
        if not check(doc.content, request.contains_contents):
            return False

    if request.author_ids:
        if author_mode == "author_id":
            subject = doc.author.id if doc.author else None
        else:
            subject = doc.id
        if not _starts_with_any(subject, request.author_ids):
            return False

    return (
        _after_lower(doc.created, request.created_from)
        and _before_upper(doc.created, request.created_to)
    )
