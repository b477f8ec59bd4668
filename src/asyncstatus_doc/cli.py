"""CLI for status-update documents (extract, stats, guard, drafts)."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from asyncstatus_doc.config import resolve_data_directory
from asyncstatus_doc.core.extract.record import extract_status_record, to_api_payload
from asyncstatus_doc.core.importer.json_reader import parse_document_data
from asyncstatus_doc.core.tree.guard import count_headings, guard_mutation
from asyncstatus_doc.core.tree.markdown import serialize_inline
from asyncstatus_doc.core.tree.stats import compute_stats
from asyncstatus_doc.drafts import DraftStore, submit_draft
from asyncstatus_doc.logging_config import configure_logging
from asyncstatus_doc.models.node import Node

app = typer.Typer(help="Status-update documents: extract records, count stats, guard edits.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load_document(path: Path) -> Node:
    """Read an editor JSON file, exiting if it cannot be used."""
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.error("Document not found: {}", path)
        raise typer.Exit(1) from None
    except json.JSONDecodeError as e:
        logger.error("Document {} is not valid JSON: {}", path, e)
        raise typer.Exit(1) from None

    doc = parse_document_data(data)
    if doc is None:
        logger.error("Document {} does not hold an editor node", path)
        raise typer.Exit(1)
    return doc


def _open_store(data_dir: Path | None, prefix: str | None) -> DraftStore:
    try:
        return DraftStore(data_dir or resolve_data_directory(), key_prefix=prefix)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None


@app.command()
def extract(
    document: Path = typer.Argument(..., help="Editor JSON file"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Extract the status record from a document."""
    record = extract_status_record(_load_document(document))

    if output_json:
        typer.echo(json.dumps(asdict(record), indent=2, ensure_ascii=False))
        return

    typer.echo(f"Date: {record.date or '-'}")
    typer.echo(f"Items ({len(record.items)}):")
    for item in record.items:
        status = "in progress" if item.is_in_progress else "done"
        blocker = ", blocker" if item.is_blocker else ""
        typer.echo(f"  {item.order}. [{status}{blocker}] {item.content}")
    if record.notes:
        typer.echo(f"Notes:\n{record.notes}")
    if record.mood or record.mood_emoji:
        typer.echo(f"Mood: {record.mood_emoji or ''} {record.mood or ''}".rstrip())


@app.command()
def stats(document: Path = typer.Argument(..., help="Editor JSON file")) -> None:
    """Count task items and words in a document."""
    doc_stats = compute_stats(_load_document(document))
    typer.echo(
        f"{doc_stats.in_progress_task_items} in progress, {doc_stats.done_task_items} done, "
        f"{doc_stats.blocked_task_items} blocked, {doc_stats.words} words"
    )


@app.command()
def render(document: Path = typer.Argument(..., help="Editor JSON file")) -> None:
    """Render a whole document as markdown."""
    typer.echo(serialize_inline(_load_document(document)), nl=False)


@app.command()
def guard(
    old: Path = typer.Argument(..., help="Document before the change"),
    new: Path = typer.Argument(..., help="Document after the change"),
) -> None:
    """Check whether a change may be committed. Exits 1 when it is rejected."""
    old_doc = _load_document(old)
    new_doc = _load_document(new)
    if guard_mutation(old_doc, new_doc):
        typer.echo("accept")
        return
    typer.echo(
        f"reject: status headings {count_headings(old_doc)} -> {count_headings(new_doc)}"
    )
    raise typer.Exit(1)


@app.command()
def new(
    date: Annotated[
        str | None,
        typer.Option("--date", help="Status update date (YYYY-MM-DD)"),
    ] = None,
    data_dir: Annotated[
        Path | None,
        typer.Option("--data-dir", "-d", help="Draft directory"),
    ] = None,
    prefix: Annotated[
        str | None,
        typer.Option("--prefix", "-p", help="Draft key prefix"),
    ] = None,
) -> None:
    """Create (or keep) the draft for a date and print its path."""
    store = _open_store(data_dir, prefix)
    try:
        doc = store.load(date)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None
    store.save(doc, date)
    typer.echo(str(store.path_for(date)))


@app.command()
def submit(
    date: Annotated[
        str | None,
        typer.Option("--date", help="Status update date (YYYY-MM-DD)"),
    ] = None,
    data_dir: Annotated[
        Path | None,
        typer.Option("--data-dir", "-d", help="Draft directory"),
    ] = None,
    prefix: Annotated[
        str | None,
        typer.Option("--prefix", "-p", help="Draft key prefix"),
    ] = None,
) -> None:
    """Print the create/update payload for a draft as JSON."""
    store = _open_store(data_dir, prefix)
    try:
        record, _stats = submit_draft(store, date=date)
        payload = to_api_payload(record)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    payload["date"] = payload["date"].isoformat()
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
