"""Command-line interface for styledextract."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.syntax import Syntax
from rich.table import Table

from styledextract.core.config import config
from styledextract.core.document import Document
from styledextract.core.error_handling import EditConflictError, StyledExtractError
from styledextract.intention import StyledComponentsExtractor
from styledextract.main import StyledExtract


def _open(path: str, console: Console) -> Document:
    if not os.path.exists(path):
        console.print(f"[bold red]File not found:[/bold red] {path}")
        sys.exit(1)
    try:
        return Document.from_file(path)
    except StyledExtractError as e:
        console.print(f"[bold red]Unsupported file:[/bold red] {path} ({e.message})")
        sys.exit(1)


def _offset(document: Document, line: int, column: int, console: Console) -> int:
    try:
        return document.offset_at(line, column)
    except StyledExtractError as e:
        console.print(f"[bold red]Invalid position:[/bold red] {e.message}")
        sys.exit(1)


def _check(path: str, line: int, column: int, console: Console) -> None:
    document = _open(path, console)
    offset = _offset(document, line, column, console)
    extractor = StyledComponentsExtractor()
    if extractor.is_available(document, offset):
        tag = extractor.find_tag_at(document, offset)
        console.print(f"[green]{extractor.text}[/green] available for <{tag.name}>")
    else:
        console.print("[yellow]Not available at this position[/yellow]")
        sys.exit(2)


def _tags(path: str, raw_json: bool, console: Console) -> None:
    document = _open(path, console)
    hem = StyledExtract(document.kind.value)
    tags = hem.find_tags(document.text)
    rows = []
    for tag in tags:
        position = document.position_at(tag.name_ranges[0].start)
        rows.append({
            "name": tag.name,
            "kind": tag.kind.value,
            "line": position.line,
            "column": position.column,
        })
    if raw_json:
        print(json.dumps(rows, indent=2))
        return
    table = Table(title=os.path.basename(path))
    table.add_column("Tag")
    table.add_column("Kind")
    table.add_column("Line", justify="right")
    table.add_column("Column", justify="right")
    for row in rows:
        table.add_row(row["name"], row["kind"], str(row["line"]), str(row["column"]))
    console.print(table)


def _extract(
    path: str,
    line: int,
    column: int,
    name: Optional[str],
    dry_run: bool,
    no_input: bool,
    console: Console,
) -> None:
    document = _open(path, console)
    offset = _offset(document, line, column, console)
    extractor = StyledComponentsExtractor()
    try:
        session = extractor.invoke(document, offset)
    except EditConflictError as e:
        console.print(f"[bold red]Extraction failed:[/bold red] {e.message}")
        sys.exit(1)
    if session is None:
        console.print("[yellow]Nothing to extract at this position[/yellow]")
        sys.exit(2)
    if name is None and not no_input and sys.stdin.isatty():
        name = Prompt.ask("Enter the name for the new styled component", default=session.default_name,
                          console=console)
    if name is not None:
        session.type(name)
    result = session.finish()
    if dry_run:
        console.print(Syntax(result.code, document.kind.value, line_numbers=True))
        return
    document.save()
    console.print(Panel(f"Extracted <{result.tag_name}> into {result.name}", style="green"))


def main() -> None:
    """Entry point for the ``styledextract`` command."""

    console = Console()
    parser = argparse.ArgumentParser(description="Extract JSX tags into styled-components")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    parser.add_argument("--indent-size", type=int, help="Spaces before the placeholder line")
    parser.add_argument("--placeholder", help="Body of the generated template literal")
    sub = parser.add_subparsers(dest="command")

    check_p = sub.add_parser("check", help="Tell whether the refactoring is available")
    check_p.add_argument("file", help="Source file path (.jsx or .tsx)")
    check_p.add_argument("--line", type=int, required=True, help="1-based line")
    check_p.add_argument("--column", type=int, required=True, help="0-based column")

    tags_p = sub.add_parser("tags", help="List extractable tags")
    tags_p.add_argument("file", help="Source file path (.jsx or .tsx)")
    tags_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")

    extract_p = sub.add_parser("extract", help="Extract the tag at a position")
    extract_p.add_argument("file", help="Source file path (.jsx or .tsx)")
    extract_p.add_argument("--line", type=int, required=True, help="1-based line")
    extract_p.add_argument("--column", type=int, required=True, help="0-based column")
    extract_p.add_argument("--name", help="Component name (prompted for when omitted)")
    extract_p.add_argument("--dry-run", action="store_true", help="Print the result instead of writing it")
    extract_p.add_argument("--no-input", action="store_true", help="Never prompt; use the default name")

    args = parser.parse_args()
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, config.get("logging", "level", "WARNING"))
    logging.basicConfig(level=log_level)

    try:
        if args.indent_size is not None:
            config.set("formatting", "indent_size", args.indent_size)
        if args.placeholder is not None:
            config.set("styling", "placeholder", args.placeholder)
    except StyledExtractError as e:
        console.print(f"[bold red]{e.message}[/bold red]")
        sys.exit(1)

    if args.command == "check":
        _check(args.file, args.line, args.column, console)
    elif args.command == "tags":
        _tags(args.file, args.raw_json, console)
    elif args.command == "extract":
        _extract(args.file, args.line, args.column, args.name, args.dry_run, args.no_input, console)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
