"""
cli.py — Click CLI entrypoint.

Usage:
    shipdash serve --port 8000
    shipdash summary
"""

from __future__ import annotations

import click
import structlog

from shipdash_shared.config import settings
from shipdash_shared.db import DatasetError, ShipmentStore
from shipdash_shared.models import StatsResponse

from shipdash_api.services import company_service
from shipdash_api.utils.logging import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level",
)
def main(log_level: str) -> None:
    """shipdash shipment analytics."""
    configure_logging(log_level=log_level)


@main.command()
@click.option("--host", default=settings.api_host, show_default=True)
@click.option("--port", default=settings.api_port, type=int, show_default=True)
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API."""
    import uvicorn

    log.info("api_starting", host=host, port=port, dataset_path=settings.dataset_path)
    uvicorn.run("shipdash_api.app:app", host=host, port=port, reload=reload)


@main.command()
@click.option(
    "--dataset",
    default=settings.dataset_path,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Shipment JSON file",
)
def summary(dataset: str) -> None:
    """Print importer/exporter counts, top commodities and monthly volume."""
    store = ShipmentStore(dataset, threads=settings.duckdb_threads)
    try:
        stats = StatsResponse.model_validate(company_service.get_company_stats(store))
    except DatasetError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        store.close()

    click.echo(f"Importers: {stats.total_importers}")
    click.echo(f"Exporters: {stats.total_exporters}")
    click.echo("Top commodities:")
    for item in stats.top_commodities:
        click.echo(f"  {item.commodity:30s} {item.kg:>14,} kg")
    click.echo("Monthly volume:")
    for month in stats.monthly_volume:
        click.echo(f"  {month.month:10s} {month.kg:>14,} kg")


if __name__ == "__main__":
    main()
