"""Unit tests for crud/models.py"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from docrepo.crud.models import Author, Document, SearchRequest


def test_document_defaults():
    """Every field is optional; id is unset before the first save."""
    doc = Document()
    assert doc.id is None
    assert doc.title is None and doc.content is None
    assert doc.author is None and doc.created is None


def test_document_is_frozen():
    doc = Document(title="x")
    with pytest.raises(ValidationError):
        doc.title = "y"


def test_document_parses_nested_author_and_timestamp():
    doc = Document.model_validate({
        "title": "t",
        "author": {"id": "u1", "name": "Ada"},
        "created": "2023-01-05T10:00:00",
    })
    assert doc.author == Author(id="u1", name="Ada")
    assert doc.created == datetime(2023, 1, 5, 10, 0, tzinfo=timezone.utc)


def test_search_request_defaults():
    request = SearchRequest()
    assert request.title_prefixes is None
    assert request.contains_contents is None
    assert request.author_ids is None
    assert request.created_from is None and request.created_to is None


# --- timestamp normalization ---

def test_naive_created_is_taken_as_utc():
    doc = Document(created=datetime(2023, 1, 5))
    assert doc.created.tzinfo == timezone.utc
    assert doc.created == datetime(2023, 1, 5, tzinfo=timezone.utc)


def test_offset_created_is_converted_to_utc():
    doc = Document.model_validate({"created": "2023-01-05T02:00:00+02:00"})
    assert doc.created.utcoffset().total_seconds() == 0
    assert doc.created == datetime(2023, 1, 5, 0, 0, tzinfo=timezone.utc)


def test_z_suffixed_created_parses_as_utc():
    doc = Document.model_validate({"created": "2023-01-05T00:00:00Z"})
    assert doc.created == datetime(2023, 1, 5, tzinfo=timezone.utc)


def test_search_bounds_are_utc_aware():
    request = SearchRequest(created_from=datetime(2023, 1, 1), created_to="2023-01-31T23:59:59Z")
    assert request.created_from.tzinfo == timezone.utc
    assert request.created_to.tzinfo == timezone.utc
