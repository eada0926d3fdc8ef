# -*- coding: utf-8 -*-
"""
sheetcsv CLI
====================

Inspect and re-encode CSV files through the sparse Spreadsheet model.

Commands:
    convert  Re-encode a CSV file with a different dialect or encoding
    show     Render a CSV file as a table with address headers
    cell     Print one cell by Excel-type address
    info     Print dimensions and content hash
    version  Show sheetcsv version

Character options accept backslash escapes, so ``--out-delimiter '\\t'``
writes tab-separated output.
"""

import codecs
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sheetcsv.config import configure_logging
from sheetcsv.csv_codec import decode_file, encode_file
from sheetcsv.exceptions import DialectError, MalformedAddress
from sheetcsv.models import SheetSummary
from sheetcsv.spreadsheet import Spreadsheet, format_address

# Fallback version constant
FALLBACK_VERSION = "0.1.0"

EXIT_MALFORMED_ADDRESS = 2

app = typer.Typer(
    name="sheetcsv",
    help="sheetcsv: sparse spreadsheet CSV codec",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


def _version() -> str:
    try:
        from sheetcsv import __version__

        return __version__
    except ImportError:
        return FALLBACK_VERSION


def _unescape(value: Optional[str], option: str) -> Optional[str]:
    """Expand backslash escapes in a character option."""
    if value is None:
        return None
    try:
        return codecs.decode(value, "unicode_escape")
    except UnicodeError as exc:
        raise typer.BadParameter(f"invalid escape sequence: {value!r}", param_hint=option) from exc


def _load(path: Path, encoding: Optional[str] = None, detect_bom: Optional[bool] = None,
          delimiter: Optional[str] = None, newline: Optional[str] = None) -> Spreadsheet:
    """Decode ``path`` or exit with status 1."""
    try:
        return decode_file(
            path,
            encoding=encoding,
            detect_bom=detect_bom,
            delimiter=delimiter,
            newline=newline,
        )
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    except DialectError as exc:
        console.print(f"[red]Error: {escape(exc.message)}[/red]")
        raise typer.Exit(1)
    except UnicodeDecodeError as exc:
        console.print(f"[red]Error: Cannot decode {escape(str(path))}: {exc.reason}[/red]")
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def _root(
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level for sheetcsv (default: SHEETCSV_LOG_LEVEL)"
    ),
):
    """
    sheetcsv - sparse spreadsheet CSV codec
    """
    if version:
        console.print(f"sheetcsv v{_version()}")
        raise typer.Exit(0)
    configure_logging(log_level)


@app.command()
def version():
    """Show sheetcsv version"""
    console.print(f"[bold green]sheetcsv v{_version()}[/bold green]")


@app.command()
def convert(
    src: Path = typer.Argument(..., help="Input CSV file"),
    dst: Path = typer.Argument(..., help="Output CSV file"),
    in_delimiter: Optional[str] = typer.Option(None, "--in-delimiter", help="Input cell separator"),
    out_delimiter: Optional[str] = typer.Option(None, "--out-delimiter", help="Output cell separator"),
    in_newline: Optional[str] = typer.Option(
        None, "--in-newline", help="Exact input row terminator (default: any CR/LF)"
    ),
    out_newline: Optional[str] = typer.Option(None, "--out-newline", help="Output row terminator"),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", "-e", help="Input encoding, or 'auto' to detect"
    ),
    out_encoding: Optional[str] = typer.Option(None, "--out-encoding", help="Output encoding"),
    no_bom: bool = typer.Option(False, "--no-bom", help="Do not sniff a byte order mark on input"),
    shrink: bool = typer.Option(False, "--shrink", help="Drop trailing empty rows and columns"),
):
    """
    Re-encode a CSV file

    Examples:
        sheetcsv convert data.csv data.tsv --out-delimiter '\\t'

        sheetcsv convert legacy.csv clean.csv --encoding auto --out-newline '\\n'
    """
    sheet = _load(
        src,
        encoding=encoding,
        detect_bom=False if no_bom else None,
        delimiter=_unescape(in_delimiter, "--in-delimiter"),
        newline=_unescape(in_newline, "--in-newline"),
    )
    if shrink:
        sheet.shrink()

    try:
        encode_file(
            sheet,
            dst,
            encoding=out_encoding,
            delimiter=_unescape(out_delimiter, "--out-delimiter"),
            newline=_unescape(out_newline, "--out-newline"),
        )
    except DialectError as exc:
        console.print(f"[red]Error: {escape(exc.message)}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Wrote {sheet.rows} x {sheet.columns} sheet to {escape(str(dst))}[/green]"
    )


@app.command()
def show(
    file: Path = typer.Argument(..., help="CSV file to display"),
    limit: int = typer.Option(20, "--limit", "-n", min=0, help="Maximum rows to display"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Cell separator"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Input encoding"),
):
    """Render a CSV file as a table"""
    sheet = _load(file, encoding=encoding, delimiter=_unescape(delimiter, "--delimiter"))

    table = Table(title=escape(file.name), box=box.ROUNDED)
    table.add_column("", style="cyan", justify="right")
    for col in range(sheet.columns):
        table.add_column(format_address((-1, col)), style="white")

    shown = min(limit, sheet.rows)
    for row in range(shown):
        table.add_row(
            format_address((row, -1)), *(escape(value) for value in sheet.row(row))
        )

    console.print(table)
    if shown < sheet.rows:
        console.print(f"[dim]... {sheet.rows - shown} more rows[/dim]")


@app.command()
def cell(
    file: Path = typer.Argument(..., help="CSV file"),
    address: str = typer.Argument(..., help="Cell address such as B3"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Cell separator"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Input encoding"),
):
    """Print one cell"""
    try:
        idx = Spreadsheet.index(address)
    except MalformedAddress as exc:
        console.print(f"[red]Error: {escape(exc.message)}[/red]")
        raise typer.Exit(EXIT_MALFORMED_ADDRESS)

    if idx[0] < 0 or idx[1] < 0:
        console.print(f"[red]Error: Address {escape(address)} needs both a column and a row[/red]")
        raise typer.Exit(EXIT_MALFORMED_ADDRESS)

    sheet = _load(file, encoding=encoding, delimiter=_unescape(delimiter, "--delimiter"))
    typer.echo(sheet.get(idx))


@app.command()
def info(
    file: Path = typer.Argument(..., help="CSV file"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Cell separator"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Input encoding"),
):
    """Print dimensions and content hash"""
    sheet = _load(file, encoding=encoding, delimiter=_unescape(delimiter, "--delimiter"))
    summary = SheetSummary.from_sheet(sheet)

    table = Table(box=box.ROUNDED, show_header=False)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("File", escape(str(file)))
    table.add_row("Rows", str(summary.rows))
    table.add_row("Columns", str(summary.columns))
    table.add_row("Cells", str(summary.cell_count))
    table.add_row("SHA-256", summary.content_hash)
    console.print(table)


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
