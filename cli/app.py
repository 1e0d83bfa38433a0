from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import NoReturn, Optional

import typer

from cli.render import render_record
from logging_config import configure_logging
from models.records import UINT32_MAX
from services.generator import RecordGenerator
from settings import DEFAULT_START_ID, get_settings
from storage.exceptions import RecordStoreError
from storage.record_file import RecordFile

logger = logging.getLogger(__name__)

MAX_COUNT = UINT32_MAX - DEFAULT_START_ID + 1

app = typer.Typer(
    help="Generate synthetic sensor records into a fixed-width binary file.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _fail(exc: RecordStoreError) -> NoReturn:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def main(
    count: int = typer.Argument(
        ..., min=1, max=MAX_COUNT, help="Number of records to generate."
    ),
    file: Path = typer.Argument(..., help="Destination file, overwritten if present."),
    show: Optional[int] = typer.Option(
        None,
        "--show",
        metavar="INDEX",
        help="Read record INDEX back from the file and print it.",
    ),
) -> None:
    """Write COUNT synthetic records to FILE, optionally printing one back."""
    settings = get_settings()
    seed = time.time_ns()
    logger.debug("Seeding record generator", extra={"seed": seed})

    generator = RecordGenerator(seed=seed, settings=settings)
    records = generator.generate(count, start_id=settings.start_id)

    store = RecordFile(file)
    try:
        store.persist(records)
    except RecordStoreError as exc:
        _fail(exc)

    if show is None:
        return

    try:
        record = store.read_at(show)
    except RecordStoreError as exc:
        _fail(exc)
    render_record(record)


def run() -> None:
    """Console script entry point."""
    configure_logging()
    app()
