import logging
from typing import Optional

import httpx
import typer

from skyforecast.domain.formatting import format_result
from skyforecast.providers.darksky import DarkSkyForecastProvider

app = typer.Typer(help="Fetch and tabulate forecasts from the Dark Sky API")


def _build_provider() -> DarkSkyForecastProvider:
    return DarkSkyForecastProvider()


def _run(
    *,
    lat: str,
    lon: str,
    timestamp: Optional[str],
    units: str,
    language: str,
    exclude: Optional[str],
    add_json: bool,
    add_headers: bool,
    max_rows: int,
    verbose: bool,
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        provider = _build_provider()
        result = provider.fetch_forecast(
            latitude=lat,
            longitude=lon,
            timestamp=timestamp,
            units=units,
            language=language,
            exclude=exclude,
            add_json=add_json,
            add_headers=add_headers,
        )
    except (httpx.HTTPError, RuntimeError, TypeError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_result(result, max_rows=max_rows))


@app.command("forecast")
def cli_forecast(
    lat: str = typer.Option(..., help="Latitude (decimal)"),
    lon: str = typer.Option(..., help="Longitude (decimal)"),
    time: str = typer.Option(..., help="YYYY-MM-DDTHH:MM:SS, optional Z or +HHMM suffix"),
    units: str = typer.Option("us", help="us, si, ca, uk or auto"),
    language: str = typer.Option("en", help="Language for text summaries"),
    exclude: Optional[str] = typer.Option(None, help="Comma-separated blocks to exclude"),
    add_json: bool = typer.Option(False, "--json", help="Attach the raw JSON response"),
    add_headers: bool = typer.Option(False, "--headers", help="Attach selected response headers"),
    max_rows: int = typer.Option(5, help="Rows to print per block"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Forecast for a place at a given time."""
    _run(
        lat=lat,
        lon=lon,
        timestamp=time,
        units=units,
        language=language,
        exclude=exclude,
        add_json=add_json,
        add_headers=add_headers,
        max_rows=max_rows,
        verbose=verbose,
    )


@app.command("current")
def cli_current(
    lat: str = typer.Option(..., help="Latitude (decimal)"),
    lon: str = typer.Option(..., help="Longitude (decimal)"),
    units: str = typer.Option("us", help="us, si, ca, uk or auto"),
    language: str = typer.Option("en", help="Language for text summaries"),
    exclude: Optional[str] = typer.Option(None, help="Comma-separated blocks to exclude"),
    add_json: bool = typer.Option(False, "--json", help="Attach the raw JSON response"),
    add_headers: bool = typer.Option(False, "--headers", help="Attach selected response headers"),
    max_rows: int = typer.Option(5, help="Rows to print per block"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Current forecast for a place."""
    _run(
        lat=lat,
        lon=lon,
        timestamp=None,
        units=units,
        language=language,
        exclude=exclude,
        add_json=add_json,
        add_headers=add_headers,
        max_rows=max_rows,
        verbose=verbose,
    )


if __name__ == "__main__":
    app()
