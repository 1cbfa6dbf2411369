#!/usr/bin/env python3
"""
CLI for the schema compiler.

Usage:
    schema-compiler run ./fixtures            # Validate every fixture triple under a tree
    schema-compiler check target.json schema.json
    schema-compiler config
"""
import json
import sys
import traceback
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from schema_compiler import validate
from schema_compiler.config import config as compiler_config
from schema_compiler.errors import SchemaCompilerError

console = Console()

# Global verbose flag
VERBOSE = False


@dataclass
class FixtureResult:
    case: str
    file: str
    ok: bool
    message: str = ""


def _holds_files(directory: Path) -> bool:
    entries = sorted(directory.iterdir())
    return bool(entries) and entries[0].is_file()


def discover_cases(root: Path) -> List[Path]:
    """
    Find fixture case directories.

    The tree is `<type>/<keyword>/` holding files directly, or
    `<type>/<keyword>/<case>/` when a keyword has several cases.
    """
    cases: List[Path] = []
    for type_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        for keyword_dir in sorted(p for p in type_dir.iterdir() if p.is_dir()):
            if _holds_files(keyword_dir):
                cases.append(keyword_dir)
            else:
                cases.extend(sorted(p for p in keyword_dir.iterdir() if p.is_dir()))
    return cases


def run_case(case_dir: Path, root: Path) -> List[FixtureResult]:
    """
    Validate the triples of one case directory.

    Files are taken in name order, three at a time: a target, the schema, and
    a second target checked against the same schema.
    """
    case = case_dir.relative_to(root).as_posix()
    files = sorted(p for p in case_dir.iterdir() if p.is_file())
    results: List[FixtureResult] = []

    if len(files) % 3:
        results.append(
            FixtureResult(case=case, file="", ok=False, message=f"expected file triples, found {len(files)} files")
        )

    for index in range(0, len(files) - len(files) % 3, 3):
        first, schema, second = files[index:index + 3]
        for target in (first, second):
            try:
                validate(str(target), str(schema))
            except SchemaCompilerError as exc:
                results.append(FixtureResult(case=case, file=target.name, ok=False, message=str(exc)))
            else:
                results.append(FixtureResult(case=case, file=target.name, ok=True))
    return results


@click.group()
@click.version_option(version="0.1.0", prog_name="schema-compiler")
@click.option('--verbose', '-v', is_flag=True, help='Show full error tracebacks for debugging')
def cli(verbose: bool):
    """
    Schema Compiler - validate JSON data against keyword schemas.

    \b
    Commands:
      run     - Validate every fixture triple under a directory tree
      check   - Validate one target against one schema
      config  - Show current configuration
    """
    global VERBOSE
    VERBOSE = verbose


@cli.command()
@click.argument('fixtures_dir', required=False, type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option('--format', '-f', 'fmt', type=click.Choice(['text', 'table', 'json']), default='text', help='Output format')
def run(fixtures_dir: Path, fmt: str):
    """
    Run a fixture tree.

    Prints one line per validated target: `successful <file>` or
    `error <file> <message>`.

    \b
    Example:
      schema-compiler run ./fixtures
      schema-compiler run ./fixtures --format table
    """
    root = fixtures_dir or Path(compiler_config.fixtures_dir)
    if not root.is_dir():
        console.print(f"[bold red]❌ Error:[/bold red] fixtures directory not found: {escape(str(root))}", soft_wrap=True)
        sys.exit(1)

    results: List[FixtureResult] = []
    for case_dir in discover_cases(root):
        if fmt == 'text':
            console.print(f"Testing {escape(case_dir.relative_to(root).as_posix())}", highlight=False, soft_wrap=True)
        case_results = run_case(case_dir, root)
        results.extend(case_results)
        if fmt == 'text':
            for result in case_results:
                _print_result_line(result)

    if fmt == 'json':
        console.print(
            json.dumps([asdict(result) for result in results], indent=2),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
    elif fmt == 'table':
        table = Table(title="Fixture results", box=box.ROUNDED)
        table.add_column("Case", style="cyan")
        table.add_column("File", style="dim")
        table.add_column("Status", justify="center")
        table.add_column("Message")
        for result in results:
            status = "[green]●[/green]" if result.ok else "[red]●[/red]"
            table.add_row(escape(result.case), escape(result.file), status, escape(result.message))
        console.print(table)

    passed = sum(1 for result in results if result.ok)
    if fmt != 'json':
        console.print(f"[dim]{passed} successful, {len(results) - passed} error[/dim]")


def _print_result_line(result: FixtureResult) -> None:
    if result.ok:
        console.print(f"[green]successful[/green] {escape(result.file)}", highlight=False, soft_wrap=True)
    else:
        console.print(
            f"[red]error[/red] {escape(result.file)} {escape(result.message)}",
            highlight=False,
            soft_wrap=True,
        )


@cli.command()
@click.argument('target', required=True)
@click.argument('schema', required=True)
def check(target: str, schema: str):
    """
    Validate TARGET against SCHEMA.

    Each argument may be a file path, an http(s) URL, or literal JSON text.
    Exits with status 1 on failure.

    \b
    Example:
      schema-compiler check payload.json schema.json
      schema-compiler check '{"a": 1}' '{"type": "object", "required": ["a"]}'
    """
    try:
        validate(target, schema)
    except SchemaCompilerError as e:
        if VERBOSE:
            console.print(escape(traceback.format_exc()), highlight=False)
        console.print(f"[bold red]❌ Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)
    console.print("[green]✓[/green] valid")


@cli.command()
@click.option('--format', '-f', 'fmt', type=click.Choice(['json', 'table']), default='table', help='Output format')
def config(fmt: str):
    """
    Show current configuration.

    Displays configuration values loaded from environment variables and .env file.
    """
    settings = [
        ("log_level", "SCHEMA_COMPILER_LOG_LEVEL"),
        ("http_timeout", "SCHEMA_COMPILER_HTTP_TIMEOUT"),
        ("http_verify_ssl", "SCHEMA_COMPILER_HTTP_VERIFY_SSL"),
        ("allow_remote_sources", "SCHEMA_COMPILER_ALLOW_REMOTE_SOURCES"),
        ("fixtures_dir", "SCHEMA_COMPILER_FIXTURES_DIR"),
    ]

    if fmt == 'json':
        output = {attr: getattr(compiler_config, attr) for attr, _ in settings}
        console.print(json.dumps(output, indent=2, default=str), markup=False, emoji=False, highlight=False, soft_wrap=True)
        return

    table = Table(title="Schema Compiler Configuration", box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Env Variable", style="dim")
    table.add_column("Value")
    for attr, env_var in settings:
        table.add_row(attr, env_var, str(getattr(compiler_config, attr)))
    console.print(table)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
