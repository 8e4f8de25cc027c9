"""Command-line interface for specscout.

Commands:
- detect: Discover and normalize the API behind a URL
- inspect: Extract listing fields from a local spec file
- serve: Run the HTTP detection service
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.config import load_settings
from .core.errors import ConfigError, SpecLoadError, TargetValidationError
from .core.logging import configure_logging
from .core.models import DetectionResult, Endpoint, SpecSummary
from .core.serialization import to_json
from .discovery import SpecDetector
from .openapi import load_spec_file, summarize_spec

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="specscout",
    help="specscout - discover and normalize API specs for marketplace listings",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


# ============================================================================
# Detect Command
# ============================================================================


@app.command()
def detect(
    url: str = typer.Argument(..., help="API, docs or spec URL to inspect"),
    json_output: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with a 'detector:' section"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Overall discovery timeout in seconds"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Discover the API behind a URL.

    Tries the URL itself, then conventional spec locations such as
    /openapi.json, and finally falls back to what the page reveals.

    Example:
        $ specscout detect https://api.example.com
        $ specscout detect https://example.com/openapi.json --json
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        settings = load_settings(config, {"discovery_timeout": timeout})
        if json_output:
            result = SpecDetector(settings).detect(url)
        else:
            with console.status(f"Detecting {url}..."):
                result = SpecDetector(settings).detect(url)
    except (TargetValidationError, ConfigError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        typer.echo(to_json(result))
        return

    _print_detection(result)


# ============================================================================
# Inspect Command
# ============================================================================


@app.command()
def inspect(
    spec_file: Path = typer.Argument(..., help="Path to an OpenAPI/Swagger JSON or YAML file"),
    source_url: Optional[str] = typer.Option(
        None, "--source-url", help="URL the spec is published at (resolves relative servers)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the raw summary as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Extract listing fields from a local spec file.

    Example:
        $ specscout inspect openapi.yaml
        $ specscout inspect spec.json --source-url https://api.example.com/openapi.json
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        summary = summarize_spec(load_spec_file(spec_file), source_url)
    except SpecLoadError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        typer.echo(to_json(summary))
        return

    _print_summary(summary)


# ============================================================================
# Serve Command
# ============================================================================


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with a 'detector:' section"
    ),
):
    """Run the HTTP detection service (POST /detect)."""
    import uvicorn

    from .server import create_app

    try:
        settings = load_settings(config)
    except ConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    configure_logging(settings.log_level)
    console.print(f"[cyan]Serving specscout on http://{host}:{port}[/cyan]")
    uvicorn.run(create_app(settings), host=host, port=port)


# ============================================================================
# Helper Functions
# ============================================================================


def _print_detection(result: DetectionResult) -> None:
    """Render a DetectionResult as Rich tables."""
    if result.detected:
        console.print("[bold green]✓[/bold green] Spec detected")
    else:
        console.print("[bold yellow]![/bold yellow] No spec found, inferred from the page")
    console.print()

    table = Table(title="Detection Result", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Name", result.name or "-")
    table.add_row("Description", result.description or "-")
    table.add_row("Base URL", result.base_url or "-")
    table.add_row("Docs URL", result.docs_url or "-")
    table.add_row("Health Check URL", result.health_check_url or "-")
    table.add_row("Auth", result.auth_type.value)
    table.add_row("Listing Type", result.listing_type.value)
    table.add_row("Category", result.suggested_category_slug or "-")
    table.add_row("Tags", ", ".join(result.tags) or "-")
    if result.health_check_status is not None:
        status = result.health_check_status
        label = "[green]up[/green]" if status.ok else "[red]down[/red]"
        table.add_row("Health", f"{label} ({status.latency_ms}ms)")

    console.print(table)
    _print_endpoints(result.endpoints)

    if result.sample_request is not None:
        console.print(Panel(to_json(result.sample_request), title="Sample Request"))
    if result.sample_response is not None:
        console.print(Panel(to_json(result.sample_response), title="Sample Response"))

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def _print_summary(summary: SpecSummary) -> None:
    """Render a SpecSummary as Rich tables."""
    table = Table(title="Spec Summary", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Name", summary.name)
    table.add_row("Version", summary.version)
    table.add_row("Description", summary.description or "-")
    table.add_row("Base URL", summary.base_url or "-")
    table.add_row("Docs URL", summary.docs_url or "-")
    table.add_row("Auth", summary.auth_type.value)
    table.add_row("Listing Type", summary.listing_type.value)
    table.add_row("Category", summary.suggested_category_slug or "-")
    table.add_row("Tags", ", ".join(summary.tags) or "-")

    console.print(table)
    _print_endpoints(summary.endpoints)

    if summary.sample_request is not None:
        console.print(Panel(to_json(summary.sample_request), title="Sample Request"))


def _print_endpoints(endpoints: list[Endpoint]) -> None:
    if not endpoints:
        return

    table = Table(title=f"Endpoints ({len(endpoints)})")
    table.add_column("Method", style="magenta")
    table.add_column("Path", style="cyan")
    table.add_column("Summary", style="white")

    for endpoint in endpoints:
        table.add_row(endpoint.method, endpoint.path, endpoint.summary or "")

    console.print(table)


if __name__ == "__main__":
    app()
