from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pricewatch.core.config import get_settings
from pricewatch.core.errors import ConfigurationError
from pricewatch.core.observability.logging import setup_logging
from pricewatch.extraction import ExtractionHints, extract_price
from pricewatch.tracker.formatting import format_price
from pricewatch.tracker.items import load_items
from pricewatch.tracker.service import create_report_service

console = Console()
app = typer.Typer(help="Track product prices and send a daily report.")


@app.command()
def run(
    notify: bool = typer.Option(
        True, "--notify/--no-notify", help="Send the report through Telegram."
    ),
) -> None:
    """Check every configured item once and print the report."""

    settings = get_settings()
    setup_logging(settings.log_level, settings.environment)
    try:
        tracked = load_items(settings)
    except ConfigurationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc

    service = create_report_service(settings)
    result = asyncio.run(service.run(tracked, notify=notify))

    console.print(result.message, markup=False, highlight=False)
    if notify and not result.delivered:
        console.print("[yellow]Report was not delivered.[/yellow]")


@app.command()
def extract(
    html_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    selector: str | None = typer.Option(None, "--selector", "-s", help="CSS selector."),
    pattern: str | None = typer.Option(None, "--pattern", "-p", help="Regular expression."),
    attribute: str | None = typer.Option(
        None, "--attribute", "-a", help="Attribute to read from the selected element."
    ),
    currency: str | None = typer.Option(None, "--currency", help="Symbol used for output."),
) -> None:
    """Run the extraction pipeline against a saved HTML page."""

    html = html_file.read_text(encoding="utf-8", errors="replace")
    hints = ExtractionHints(selector=selector, pattern=pattern, attribute=attribute)
    try:
        price = asyncio.run(extract_price(html, hints))
    except ConfigurationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc

    if price is None:
        console.print("[yellow]No price found.[/yellow]")
        raise typer.Exit(code=1)
    console.print(format_price(currency, price), markup=False, highlight=False)


@app.command()
def items() -> None:
    """List the configured items and their extraction rules."""

    settings = get_settings()
    try:
        tracked = load_items(settings)
    except ConfigurationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc

    table = Table(title="Tracked items")
    table.add_column("Name")
    table.add_column("Enabled")
    table.add_column("Selector")
    table.add_column("Pattern")
    table.add_column("URL")
    for item in tracked:
        table.add_row(
            escape(item.name),
            "yes" if item.enabled else "no",
            escape(item.selector or "-"),
            escape(item.pattern or "-"),
            escape(item.url),
        )
    console.print(table)


@app.command()
def serve() -> None:
    """Serve the HTTP trigger and the daily scheduler."""

    import uvicorn

    from pricewatch.interfaces.http.app import create_app

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    app()
