"""CLI command implementations"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import load_documents
from docstore.core.models import SearchRequest
from docstore.crud.memory_repo import MemoryRepo


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging, with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
        logging.basicConfig(level=settings.log_level.upper())
    except ValueError as e:
        _fail(str(e))
    return settings


def _load_store(path: Path, settings: Settings) -> MemoryRepo:
    """Save every document in path into a fresh store."""
    repo = MemoryRepo.from_settings(settings)
    try:
        for doc in load_documents(path):
            repo.save(doc)
    except ValueError as e:
        _fail(f"Could not load {path}", e)
    logger.info("Loaded %d document(s) from %s", len(repo), path)
    return repo


def search_cmd(
    path: Annotated[Path, typer.Argument(exists=True, readable=True, help="YAML/JSON document file")],
    authors: Annotated[Optional[list[str]], typer.Option("--author", help="Match author id (repeatable)")] = None,
    prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Match title prefix (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Match content substring (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Exclusive lower bound on created")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Exclusive upper bound on created")] = None,
    match_mode: Annotated[Optional[str], typer.Option("--match-mode", help="any (OR filters) or all (AND filters)")] = None,
    id_policy: Annotated[Optional[str], typer.Option("--id-policy", help="advance or preserve")] = None,
    ):
    """Load documents from a file and print those matching the filters."""
    settings = _settings(overrides={"match_mode": match_mode, "id_policy": id_policy})
    repo = _load_store(path, settings)
    request = SearchRequest(
        author_ids=authors,
        title_prefixes=prefixes,
        contains_contents=contains,
        created_from=created_from,
        created_to=created_to,
    )
    found = repo.search(request)
    for doc in found:
        typer.echo(doc.model_dump_json())
    typer.echo(f"Found {len(found)} of {len(repo)} document(s)")


def get_cmd(
    path: Annotated[Path, typer.Argument(exists=True, readable=True, help="YAML/JSON document file")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    id_policy: Annotated[Optional[str], typer.Option("--id-policy", help="advance or preserve")] = None,
    ):
    """Load documents from a file and print the one stored under an id."""
    settings = _settings(overrides={"id_policy": id_policy})
    repo = _load_store(path, settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"Document not found: {doc_id}", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))
