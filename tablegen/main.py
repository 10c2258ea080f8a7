"""
tablegen — C# entity class generator
Typer CLI entry point.

Exit codes: 0 success, 1 missing table name, 2 table not found, 99 any other error.
"""
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tablegen.config import settings
from tablegen.core.errors import ExitCode, TablegenError
from tablegen.core.generator import generate_entity
from tablegen.models.generation import GenerationRequest

console = Console(stderr=True)

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
    handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=True)],
)
logger = logging.getLogger("tablegen")

app = typer.Typer(help="Generate a C# entity class from a database table's schema.")


@app.command()
def generate(
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Schema name (blank for the default schema)"),
    table: Optional[str] = typer.Option(None, "--table", "-t", help="Table name; prompted for when omitted"),
    connection: Optional[str] = typer.Option(None, "--connection", "-c", help="SQLAlchemy URL, overrides DB_CONNECTION_STRING"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory, overrides OUTPUT_DIR"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the generated code instead of writing it"),
):
    """
    Read one table's columns and keys and write Cls<Table>.cs.

    Exit codes: 0 ok, 1 no table name, 2 table not found, 99 other error.
    """
    if table is None:
        if schema is None:
            schema = typer.prompt("Schema (ENTER for default)", default="", show_default=False)
        table = typer.prompt("Table name", default="", show_default=False)

    overrides = {}
    if connection:
        overrides["DB_CONNECTION_STRING"] = connection
    if output_dir is not None:
        overrides["OUTPUT_DIR"] = str(output_dir)
    run_settings = settings.model_copy(update=overrides)

    request = GenerationRequest(schema_name=schema or None, table_name=table, dry_run=dry_run)
    try:
        result = generate_entity(request, run_settings)
    except TablegenError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=int(e.exit_code))
    except Exception as e:
        logger.exception("Generation failed")
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=int(ExitCode.FAILURE))

    if dry_run:
        typer.echo(result.code, nl=False)
    else:
        console.print(f"[green]OK.[/green] Generated: {result.file_path}")


if __name__ == "__main__":
    app()
