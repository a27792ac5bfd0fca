"""
CLI module - Worker entry point for Photos Bridge

Entry point for the `phb` command using Typer. Each invocation performs one
operation and writes one result document to stdout; diagnostics go to stderr.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .actions import locate_asset, perform_delete
from .config import AppConfig, ConfigError, LoggingConfig, load_config
from .constants import LIBRARY_UNAVAILABLE
from .library import AssetLibrary, LibraryLoadError, load_library
from .manifest import ManifestError, load_manifest
from .protocol import encode_batch_outcome, encode_delete_outcome
from .results import BatchOutcome, DeleteOutcome, SingleImportResult
from .runners import BatchImportRunner, ImportCallbacks

# stdout carries only the result document
err_console = Console(stderr=True)
app = typer.Typer(
    name="phb",
    help="Photos Bridge - import, delete and open photos in the photo library for a cataloging tool.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    if value:
        typer.echo(f"phb version {__version__}")
        raise typer.Exit()


# Type aliases for common options
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config file", exists=True, dir_okay=False),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Report progress and info logs on stderr")]


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version")
    ] = False,
):
    """Photos Bridge - import, delete and open photos in the photo library for a cataloging tool."""
    pass


def setup_logging(level: str, verbose: bool = False) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.INFO if verbose else level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def get_config(config_path: Path | None = None, verbose: bool = False) -> AppConfig:
    """Load configuration and configure logging from it."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        setup_logging(LoggingConfig().level, verbose)
        logger.error(e.message)
        raise
    setup_logging(config.logging.level, verbose)
    return config


def get_library(config: AppConfig) -> AssetLibrary:
    """Load the configured asset library backend."""
    return load_library(config.library.backend)


def emit(document: str) -> None:
    """Write a result document to stdout (documents carry their own newline)."""
    typer.echo(document, nl=False)


def progress_callbacks() -> ImportCallbacks:
    """Build callbacks that report batch progress on stderr."""

    def on_photo_start(path: str, idx: int, total: int):
        err_console.print(f"  [{idx}/{total}] Importing: {Path(path).name}...")

    def on_photo_complete(result: SingleImportResult):
        name = Path(result.path).name
        if result.ok:
            extras = []
            if result.favorite_restored:
                extras.append("★")
            if result.albums_restored:
                extras.append(f"{len(result.albums_restored)} album(s)")
            suffix = f" ({', '.join(extras)})" if extras else ""
            err_console.print(f"  [green]✓[/green] {name}{suffix}")
        else:
            err_console.print(f"  [red]✗[/red] {name}: {result.error_code}")

    def on_batch_complete(outcome: BatchOutcome):
        if outcome.ok:
            err_console.print(
                f"[bold]Imported:[/bold] {outcome.imported_count}  [bold]Failed:[/bold] {outcome.failed_count}"
            )
        else:
            err_console.print(f"[red]Error:[/red] {outcome.error_code}: {outcome.error_message}")

    return ImportCallbacks(
        on_photo_start=on_photo_start,
        on_photo_complete=on_photo_complete,
        on_batch_complete=on_batch_complete,
    )


@app.command("import")
def import_photos(
    manifest: Annotated[Path, typer.Option("--manifest", "-m", help="Path to XML manifest file for batch import")],
    verbose: VerboseOption = False,
    config: ConfigOption = None,
):
    """
    Import photos listed in a manifest file.

    Photos are imported one at a time in manifest order. When a photo names a
    previous identifier, its albums and favorite status are carried over to
    the new asset.

    [bold]Examples:[/bold]

        phb import --manifest /tmp/manifest.xml

        phb import -m /tmp/manifest.xml --verbose
    """
    try:
        cfg = get_config(config, verbose)
    except ConfigError as e:
        emit(encode_batch_outcome(BatchOutcome.error(e.code, e.message)))
        return

    try:
        photos = load_manifest(manifest)
    except ManifestError as e:
        logger.error(e.message)
        emit(encode_batch_outcome(BatchOutcome.error(e.code, e.message)))
        return

    logger.info(f"Manifest contains {len(photos)} photos")

    if not photos:
        emit(encode_batch_outcome(BatchOutcome.success([])))
        return

    try:
        library = get_library(cfg)
    except LibraryLoadError as e:
        logger.error(str(e))
        emit(encode_batch_outcome(BatchOutcome.error(LIBRARY_UNAVAILABLE, str(e))))
        return

    runner = BatchImportRunner(
        library,
        verify_attempts=cfg.importing.verify_attempts,
        verify_delay=cfg.importing.verify_delay,
        url_scheme=cfg.links.scheme,
    )
    outcome = runner.run(photos, progress_callbacks() if verbose else None)
    emit(encode_batch_outcome(outcome))


@app.command()
def delete(
    identifiers: Annotated[list[str] | None, typer.Argument(help="Local identifiers of photos to delete")] = None,
    verbose: VerboseOption = False,
    config: ConfigOption = None,
):
    """
    Delete photos by identifier, as one request.

    [bold]Examples:[/bold]

        phb delete B84E8479-474C-4727-8B95-B2CE1FFE2E0D/L0/001

        phb delete ID1 ID2 ID3
    """
    try:
        cfg = get_config(config, verbose)
    except ConfigError as e:
        emit(encode_delete_outcome(DeleteOutcome.error(e.code, e.message)))
        return

    identifiers = list(identifiers or [])

    if not identifiers:
        emit(encode_delete_outcome(DeleteOutcome.success(0)))
        return

    try:
        library = get_library(cfg)
    except LibraryLoadError as e:
        logger.error(str(e))
        emit(encode_delete_outcome(DeleteOutcome.error(LIBRARY_UNAVAILABLE, str(e))))
        return

    emit(encode_delete_outcome(perform_delete(library, identifiers)))


@app.command("open")
def open_photo(
    identifier: Annotated[str, typer.Argument(help="Local identifier of the photo to open")],
    verbose: VerboseOption = False,
    config: ConfigOption = None,
):
    """
    Open a photo in the photo library app.

    [bold]Examples:[/bold]

        phb open B84E8479-474C-4727-8B95-B2CE1FFE2E0D/L0/001
    """
    try:
        cfg = get_config(config, verbose)
    except ConfigError as e:
        raise typer.Exit(1) from e

    try:
        library = get_library(cfg)
    except LibraryLoadError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    url = locate_asset(library, identifier, cfg.links.scheme)
    if url is None:
        logger.warning("User library collection not available; nothing to open")
        return

    logger.info(f"Opening {url}")
    typer.launch(url)


if __name__ == "__main__":
    app()
