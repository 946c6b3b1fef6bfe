"""Seed loading: read documents from a YAML file into a repository"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from docrepo.crud.models import Document
from docrepo.crud.repo import DocumentRepo
from docrepo.log import get_logger


logger = get_logger(__name__)


def load_documents(path: str | Path) -> list[Document]:
    """Parse a YAML list of document mappings, or a mapping with a 'documents' list.

    Raises ValueError on unreadable YAML, an unexpected shape, or an invalid entry.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of documents")

    docs = []
    for i, item in enumerate(data):
        try:
            docs.append(Document.model_validate(item))
        except ValidationError as e:
            raise ValueError(f"{path}: document #{i} is invalid: {e}") from e
    return docs


def load_into(repo: DocumentRepo, path: str | Path) -> list[Document]:
    """Save every document from path into repo in file order. Returns the saved docs."""
    saved = [repo.save(doc) for doc in load_documents(path)]
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved
