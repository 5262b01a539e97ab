"""CLI commands for Tweet Search."""

import json
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import settings
from ..errors import TweetSearchError
from ..models.search_result import SearchResults
from ..storage.json_store import JsonStore
from ..utils.logging import setup_logging

app = typer.Typer(
    name="tweet-search",
    help="Inspect search result pages and derive pagination parameters",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _load_page(path: str, data_dir: Optional[str], verbose: bool) -> SearchResults:
    """Configure logging and load a stored page, exiting on failure."""
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(log_level, json_output=settings.log_json)

    store = JsonStore(data_dir or settings.data_dir)
    try:
        return store.load_page(path)
    except TweetSearchError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)


def _print_params(params: dict) -> None:
    console.print_json(json.dumps(params, ensure_ascii=False))


@app.command()
def inspect(
    path: Annotated[str, typer.Argument(help="Stored response body (JSON)")],
    data_dir: Annotated[
        Optional[str],
        typer.Option("--data-dir", "-d", help="Directory relative paths are resolved against"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the summary as JSON"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Show search metadata and item count of a result page."""
    page = _load_page(path, data_dir, verbose)

    summary = {
        "query": page.query,
        "completed_in": page.completed_in,
        "max_id": page.max_id,
        "since_id": page.since_id,
        "page": page.page,
        "results_per_page": page.results_per_page,
        "item_count": len(page),
        "has_next_results": page.has_next_results,
    }

    if as_json:
        _print_params(summary)
        return

    table = Table(title=f"Search results for {page.query!r}", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    for key, value in summary.items():
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@app.command("next-page")
def next_page(
    path: Annotated[str, typer.Argument(help="Stored response body (JSON)")],
    data_dir: Annotated[
        Optional[str],
        typer.Option("--data-dir", "-d", help="Directory relative paths are resolved against"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Print the query parameters for the next page."""
    page = _load_page(path, data_dir, verbose)

    try:
        params = page.next_results()
    except TweetSearchError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)

    if params is None:
        err_console.print("[yellow]No next page.[/yellow]")
        return
    _print_params(params)


@app.command()
def refresh(
    path: Annotated[str, typer.Argument(help="Stored response body (JSON)")],
    data_dir: Annotated[
        Optional[str],
        typer.Option("--data-dir", "-d", help="Directory relative paths are resolved against"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """Print the query parameters for refreshing the search."""
    page = _load_page(path, data_dir, verbose)

    try:
        params = page.refresh_results()
    except TweetSearchError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)

    _print_params(params)


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", "-h", help="API host"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="API port"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", "-r", help="Enable auto-reload"),
    ] = False,
) -> None:
    """Start the FastAPI server."""
    import uvicorn

    host = host or settings.api_host
    port = port or settings.api_port

    console.print("\n[bold blue]Starting Tweet Search API[/bold blue]")
    console.print(f"Host: {host}")
    console.print(f"Port: {port}")
    console.print(f"Docs: http://{host}:{port}/docs")
    console.print()

    uvicorn.run(
        "tweet_search.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    console.print(f"Tweet Search v{__version__}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
