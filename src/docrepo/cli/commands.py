"""CLI command implementations"""

import json
from datetime import datetime
from typing import Annotated, List, Optional

import typer

from docrepo.config import Settings, load_config
from docrepo.core.loader import load_into
from docrepo.crud.memory_repo import MemoryRepo
from docrepo.crud.models import SearchRequest
from docrepo.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _parse_bound(option: str, value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 date or timestamp; a trailing Z means UTC."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value)
    except ValueError as e:
        _fail(f"Invalid value for {option}: {value!r}", e)


def _load_repo(path: str, settings: Settings) -> MemoryRepo:
    """Configure logging, build a repository from settings and seed it from path."""
    configure_logging(settings.log_level)
    repo = MemoryRepo.from_settings(settings)
    try:
        load_into(repo, path)
    except (OSError, ValueError) as e:
        _fail(f"Could not load {path}", e)
    return repo


def search_cmd(
    path: Annotated[str, typer.Argument(help="YAML file of documents to search")],
    titles: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title prefix (repeatable)")] = None,
    contents: Annotated[Optional[List[str]], typer.Option("--content", help="Content filter (repeatable)")] = None,
    author_ids: Annotated[Optional[List[str]], typer.Option("--author-id", help="Author id prefix (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Inclusive lower bound, ISO 8601; UTC unless an offset is given")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Inclusive upper bound, ISO 8601; UTC unless an offset is given")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print matches as a JSON array")] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level name")] = None,
    ):
    """Load documents from a file and print those matching every given filter."""
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    repo = _load_repo(path, settings)

    request = SearchRequest(
        title_prefixes=titles or None,
        contains_contents=contents or None,
        author_ids=author_ids or None,
        created_from=_parse_bound("--created-from", created_from),
        created_to=_parse_bound("--created-to", created_to),
    )
    found = repo.search(request)

    if as_json:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in found], indent=2, ensure_ascii=False))
    else:
        for doc in found:
            typer.echo(f"{doc.id}\t{doc.title or ''}")
        typer.echo(f"Matched {len(found)} of {len(repo)} document(s)")
    if not found:
        raise typer.Exit(1)


def show_cmd(
    path: Annotated[str, typer.Argument(help="YAML file of documents")],
    doc_id: Annotated[str, typer.Argument(help="Exact document id")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level name")] = None,
    ):
    """Print a single document as JSON."""
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    repo = _load_repo(path, settings)

    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(doc.model_dump_json(indent=2))
