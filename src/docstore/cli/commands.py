"""CLI command implementations"""

from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.logging import setup_logging
from docstore.crud.loader import load_documents, populate
from docstore.crud.memory_repo import MemoryRepo


FileArg = Annotated[str, typer.Argument(help="YAML or JSON file of documents")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings() -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config()
    except ValueError as e:
        _fail("Invalid configuration", e)
    setup_logging(settings.log_level, settings.log_file)
    return settings


def _load_repo(path: str) -> MemoryRepo:
    """Build a fresh repository holding every document in path."""
    repo = MemoryRepo.from_settings(_settings())
    try:
        populate(repo, load_documents(path))
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    except ValueError as e:
        _fail(f"Cannot load documents from {path}", e)
    return repo


def _echo_doc(doc: Document) -> None:
    typer.echo(doc.model_dump_json())


def search_cmd(
    path: FileArg,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Inclusive lower bound (UTC if naive)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Inclusive upper bound (UTC if naive)")] = None,
    ):
    """Print documents matching every given filter, one JSON object per line."""
    repo = _load_repo(path)
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author or None,
        created_from=created_from,
        created_to=created_to,
    )
    try:
        results = repo.search(request)
    except ValueError as e:
        _fail("Search failed", e)
    for doc in results:
        _echo_doc(doc)


def get_cmd(
    path: FileArg,
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Print the document with the given id; exit 1 if it is absent."""
    doc = _load_repo(path).find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.", err=True)
        raise typer.Exit(1)
    _echo_doc(doc)


def count_cmd(path: FileArg):
    """Print the number of documents loaded from the file."""
    typer.echo(len(_load_repo(path)))
