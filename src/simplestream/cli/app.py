import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from simplestream.config import StreamConfig, load_config
from simplestream.core.document import Document, parse_document
from simplestream.core.errors import SimplestreamError
from simplestream.core.ports.source import DocumentSource
from simplestream.core.query import current_release, image_digests, list_releases
from simplestream.models import ReleaseNotFound

app = typer.Typer(
    name="simplestream",
    help="Print the latest Ubuntu cloud image information.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _get_source(config: StreamConfig, file: Path | None) -> DocumentSource:
    from simplestream.transport import FileDocumentSource, HttpDocumentSource

    if file is not None:
        return FileDocumentSource(file)
    return HttpDocumentSource(config.url, timeout=config.timeout)


def _print_releases(document: Document, config: StreamConfig) -> None:
    console.print("Supported Ubuntu releases:")
    for summary in list_releases(document, config):
        console.print(f"  {escape(summary.release_title)} ({escape(summary.release)})")


def _print_current(document: Document, config: StreamConfig, revision: str) -> None:
    current = current_release(document, config, revision)
    if current is None:
        console.print("[red]error:[/red] No current release found.")
        raise typer.Exit(1)
    console.print(f"Current Ubuntu LTS version: {escape(current.version)}")
    console.print(f"  {escape(current.pubname)}")


def _print_digests(document: Document, config: StreamConfig, releases: list[str], revision: str) -> None:
    for result in image_digests(document, releases, config, revision):
        if isinstance(result, ReleaseNotFound):
            console.print(f'[red]error:[/red] Release "{escape(result.identifier)}" not found.')
            continue
        console.print(f"SHA256 checksum for {escape(result.image_tag)} of {escape(result.pubname)}:")
        console.print(f"  {result.sha256}")


@app.command()
def main(
    ctx: typer.Context,
    releases: Annotated[
        list[str] | None,
        typer.Argument(help="Release version, codename or alias (used with --sha256).", show_default=False),
    ] = None,
    list_: Annotated[bool, typer.Option("--list", "-l", help="List currently supported Ubuntu releases.")] = False,
    current: Annotated[bool, typer.Option("--current", "-c", help="Current Ubuntu LTS version.")] = False,
    sha256: Annotated[bool, typer.Option("--sha256", "-s", help="SHA256 checksum of the disk image.")] = False,
    revision: Annotated[str, typer.Option(help="Revision id to use instead of the latest.")] = "",
    file: Annotated[Path | None, typer.Option(help="Read the catalog from a local file.")] = None,
    url: Annotated[str | None, typer.Option(help="Catalog URL.")] = None,
    arch: Annotated[str | None, typer.Option(help="Image architecture.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Print the latest Ubuntu cloud image information."""
    releases = releases or []
    if releases and not sha256:
        console.print(f"[red]error:[/red] unrecognized argument: {escape(releases[0])}")
        console.print(ctx.get_help(), markup=False, highlight=False)
        raise typer.Exit(1)
    if not (list_ or current or sha256):
        console.print(ctx.get_help(), markup=False, highlight=False)
        raise typer.Exit(1)
    if sha256 and not releases:
        console.print("[red]error:[/red] No release specified.\n")
        console.print(ctx.get_help(), markup=False, highlight=False)
        raise typer.Exit(1)

    _configure_logging(verbose)
    try:
        config = load_config(url=url, architecture=arch)
        document = parse_document(_get_source(config, file).fetch())
        if list_:
            _print_releases(document, config)
        if current:
            _print_current(document, config, revision)
        if sha256:
            _print_digests(document, config, releases, revision)
    except (SimplestreamError, ValueError) as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


def run() -> None:
    app()
