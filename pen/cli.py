"""Command-line interface for the PEN registry parser."""

import logging
from pathlib import Path

import requests
import typer
from rich.console import Console
from rich.table import Table

from pen import __version__
from pen.config import PEN_URL
from pen.logging_config import setup_logging
from pen.models import Entry
from pen.parsers import PenParseError, download_pen, parse_file
from pen.registry import Registry
from pen.storage.yaml_writer import save_yaml

app = typer.Typer(
    name="pen",
    help="Parse and search the IANA Private Enterprise Numbers registry.",
)
console = Console()

FileArgument = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    help="Path to a downloaded enterprise-numbers file",
)
LenientOption = typer.Option(
    False,
    "--lenient",
    help="Accept truncated entries instead of failing",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def _load(path: Path, lenient: bool, verbose: bool) -> Registry:
    """Parse the file, turning failures into a non-zero exit."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    try:
        return parse_file(path, strict=not lenient)
    except (OSError, PenParseError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e


def _print_entry(registry: Registry, entry: Entry) -> None:
    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    for key, value in entry.to_dict(registry.prefix).items():
        table.add_row(key, value)
    console.print(table)


@app.command()
def header(
    file: Path = FileArgument,
    lenient: bool = LenientOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the registry header."""
    registry = _load(file, lenient, verbose)

    for section, values in registry.header().items():
        table = Table(title=section, show_header=False)
        table.add_column(style="bold")
        table.add_column()
        for key, value in values.items():
            table.add_row(key, str(value))
        console.print(table)


@app.command()
def lookup(
    file: Path = FileArgument,
    oid: str | None = typer.Option(
        None, "--oid", help="Leaf number or dotted OID (e.g. 54399 or 1.3.6.1.4.1.54399)"
    ),
    iri: str | None = typer.Option(None, "--iri", help="Slash-delimited identifier"),
    email: str | None = typer.Option(None, "--email", help="Contact email address"),
    contact: str | None = typer.Option(None, "--contact", help="Contact name"),
    lenient: bool = LenientOption,
    verbose: bool = VerboseOption,
) -> None:
    """Look up one entry."""
    given = [value for value in (oid, iri, email, contact) if value is not None]
    if len(given) != 1:
        console.print(
            "[bold red]Error:[/bold red] give exactly one of --oid, --iri, --email, --contact"
        )
        raise typer.Exit(2)

    registry = _load(file, lenient, verbose)

    if oid is not None:
        entry = registry.find_by_identifier(oid)
    elif iri is not None:
        entry = registry.find_by_path(iri)
    elif email is not None:
        entry = registry.find_by_email(email)
    else:
        entry = registry.find_by_contact(contact)

    if entry is None:
        console.print(f"[yellow]No entry found for {given[0]}[/yellow]")
        raise typer.Exit(1)

    _print_entry(registry, entry)


@app.command()
def export(
    file: Path = FileArgument,
    output: Path = typer.Argument(..., help="Destination YAML file"),
    lenient: bool = LenientOption,
    verbose: bool = VerboseOption,
) -> None:
    """Export the parsed registry as YAML."""
    registry = _load(file, lenient, verbose)
    output_path = save_yaml(registry, output)
    console.print(
        f"[bold green]Saved {registry.count()} entries to:[/bold green] {output_path}"
    )


@app.command()
def download(
    dest: Path = typer.Argument(
        Path("enterprise-numbers.txt"), help="Where to write the registry file"
    ),
    url: str = typer.Option(PEN_URL, "--url", help="Registry location"),
) -> None:
    """Download the registry file."""
    console.print(f"[dim]Downloading {url}...[/dim]")
    try:
        path = download_pen(dest, url)
    except requests.RequestException as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    console.print(f"[bold green]Saved to:[/bold green] {path}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"pen {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
