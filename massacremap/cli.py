"""
Command-line interface for MassacreMap.
"""

import json
import logging

import click
from rich.console import Console
from rich.table import Table

from massacremap.analysis.filters import list_governors
from massacremap.analysis.timeline import yearly_timeline
from massacremap.core.config import ALL_GOVERNORS, LOG_FORMAT, VICTIM_CATEGORIES
from massacremap.core.state import apply_search, initial_state, select_governor
from massacremap.data.parser import load_incidents
from massacremap.data.schemas import IncidentResponse

console = Console()
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

data_option = click.option("--data", "data_path", default=None, help="Path to the massacres CSV")
governor_option = click.option("--governor", default=ALL_GOVERNORS, help="Governor to filter by")
query_option = click.option("--query", default="", help="Search name, governor or location")


def _load_state(data_path, governor=ALL_GOVERNORS, query=""):
    state = initial_state(load_incidents(data_path))
    return apply_search(select_governor(state, governor), query)


@click.group()
def main():
    """MassacreMap: data backend for the massacre map and timeline dashboard."""
    pass


@main.command()
@data_option
@governor_option
@query_option
def summary(data_path, governor, query):
    """Show summary statistics for the selected incidents."""
    state = _load_state(data_path, governor, query)
    if not state.records:
        console.print("[yellow]No incident data available.[/yellow]")

    stats = state.statistics
    table = Table(title="MassacreMap Summary")
    table.add_column("Statistic", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Massacres", str(stats.total_massacres))
    table.add_row("Victims", str(stats.total_victims))
    table.add_row("Minor victims", str(stats.minor_victims))
    table.add_row("Avg. victims per incident", str(stats.avg_victims_per_incident))
    table.add_row("Years covered", str(stats.years_covered))
    table.add_row("Governors involved", str(stats.governors_involved))
    console.print(table)


@main.command()
@data_option
def governors(data_path):
    """List the governors present in the dataset."""
    names = list_governors(load_incidents(data_path))
    if not names:
        console.print("[yellow]No governors found.[/yellow]")
        return
    for name in names:
        console.print(name)


@main.command()
@data_option
@governor_option
@query_option
def timeline(data_path, governor, query):
    """Show victims per year and category."""
    state = _load_state(data_path, governor, query)
    entries = yearly_timeline(state.visible)
    if not entries:
        console.print("[yellow]No dated incidents to show.[/yellow]")
        return

    table = Table(title="MassacreMap Timeline")
    table.add_column("Year", style="bold")
    table.add_column("Incidents", justify="right")
    for category in VICTIM_CATEGORIES:
        table.add_column(category, justify="right")
    for entry in entries:
        table.add_row(
            str(entry["year"]),
            str(entry["incidents"]),
            *(str(entry[category]) for category in VICTIM_CATEGORIES),
        )
    console.print(table)


@main.command()
@click.argument("output")
@data_option
@governor_option
@query_option
def export(output, data_path, governor, query):
    """Write the selected incidents, statistics and timeline to a JSON file."""
    state = _load_state(data_path, governor, query)
    payload = {
        "governor": state.governor,
        "query": state.query,
        "statistics": state.statistics.to_dict(),
        "timeline": yearly_timeline(state.visible),
        "incidents": [IncidentResponse.from_record(r).model_dump() for r in state.visible],
    }
    with open(output, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    console.print(f"[green]Exported {len(state.visible)} incidents to {output}[/green]")


@main.command()
@click.argument("address")
@click.option("--provider", default="nominatim", help="nominatim or google")
def geocode(address, provider):
    """Look up coordinates for an address."""
    from massacremap.geo.geocoding import get_geocoder

    try:
        geocoder = get_geocoder(provider)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--provider")

    result = geocoder.geocode(address)
    if result is None:
        console.print(f"[yellow]No match for '{address}'.[/yellow]")
        return
    console.print(f"{result.lat}, {result.lon}  ({result.display_name or address})")


@main.command()
@click.option("--port", default=8000, help="Port to listen on")
def serve(port):
    """Start the dashboard API server."""
    import uvicorn
    console.print(f"[green]Starting MassacreMap API on http://0.0.0.0:{port}[/green]")
    console.print(f"  API Docs:    http://localhost:{port}/docs")
    uvicorn.run("massacremap.api.app:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
