"""
CLI Main - Typer-based command-line interface.

Usage:
    schemaform analyze schema.json page.html
    schemaform analyze schema.json page.html --output result.json
    schemaform validate schema.json
    schemaform version

Schemas use regular expressions as their rule and init programs.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from schemaform.adapters.regex import regex_init_factory, regex_rule_factory
from schemaform.config import SchemaError, configure_logging, get_settings
from schemaform.domains.analysis import (
    AnalyzeContext,
    Analyzer,
    Schema,
    load_schema_file,
)

app = typer.Typer(
    name="schemaform",
    help="Schemaform - Schema-driven structured data extraction",
    add_completion=False,
)
console = Console()


@app.command()
def analyze(
    schema_path: Path = typer.Argument(..., help="Path to JSON schema file"),
    document_path: Path = typer.Argument(..., help="Path to the document to analyze"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output JSON path"),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Log level"),
) -> None:
    """Extract structured data from a document."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)

    for path in (schema_path, document_path):
        if not path.exists():
            console.print(f"[red]Error:[/red] File not found: {path}")
            raise typer.Exit(1)

    schema = _load(schema_path)
    document = document_path.read_text(encoding="utf-8", errors="replace")

    ctx = AnalyzeContext(url=document_path.resolve().as_uri())
    result = Analyzer(settings=settings).analyze_result(schema, document, ctx)
    if not result.ok:
        console.print(f"[red]Error:[/red] Analysis aborted: {escape(str(result.error))}")
        raise typer.Exit(1)

    payload = json.dumps(result.value, indent=2, ensure_ascii=False)
    if output:
        output.write_text(payload, encoding="utf-8")
        console.print(f"[green]Saved to:[/green] {output}")
    else:
        console.print_json(payload)


@app.command()
def validate(
    schema_path: Path = typer.Argument(..., help="Path to JSON schema file"),
) -> None:
    """Check a schema file and show its tree."""
    if not schema_path.exists():
        console.print(f"[red]Error:[/red] File not found: {schema_path}")
        raise typer.Exit(1)

    schema = _load(schema_path)
    tree = Tree(f"[bold]{schema_path.name}[/bold]")
    _render(tree, "$", schema)
    console.print(tree)
    console.print("[green]Schema is valid[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from schemaform import __version__

    console.print(f"Schemaform v{__version__}")


def _load(schema_path: Path) -> Schema:
    try:
        return load_schema_file(schema_path, regex_rule_factory, regex_init_factory)
    except SchemaError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)


def _render(tree: Tree, name: str, schema: Schema) -> None:
    label = f"[cyan]{escape(name)}[/cyan]: {schema.kind.value}"
    if schema.format is not None:
        label += f" -> {schema.format.value}"
    if schema.init is not None:
        label += f" [dim]init={escape(repr(schema.init))}[/dim]"
    if schema.rule is not None:
        label += f" [dim]rule={escape(repr(schema.rule))}[/dim]"
    branch = tree.add(label)
    for field, field_schema in schema.properties.items():
        _render(branch, field, field_schema)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
