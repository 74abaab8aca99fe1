"""Mini README: Command line entry point for the Dronesurvey planner.

This script exposes a Typer CLI with two commands: ``run`` starts the FastAPI
planning service under uvicorn, and ``plan`` generates a flight plan for a
GeoJSON boundary file and prints it as JSON. Both read defaults from
``DRONESURVEY_*`` environment variables.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn

from dronesurvey.configuration import get_settings
from dronesurvey.logging_utils import configure_root_logger
from dronesurvey.missions import FlightPlanService
from dronesurvey.route_planning import PatternType

cli = typer.Typer(help="Plan drone survey coverage paths and serve the planning API.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 is a bind address, not something a browser can open.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Dronesurvey planner on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "dronesurvey.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def plan(
    boundary_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GeoJSON Polygon file."),
    pattern: PatternType = typer.Option(PatternType.LINEAR, help="Coverage pattern to fly."),
    altitude: int = typer.Option(100, min=10, max=500, help="Flight altitude in metres."),
    overlap: int = typer.Option(50, min=0, max=100, help="Overlap percentage between passes."),
    waypoints_only: bool = typer.Option(
        False, help="Print only the stored waypoint JSON instead of the full plan."
    ),
) -> None:
    """Generate a flight plan for BOUNDARY_FILE and print it as JSON."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    service = FlightPlanService(settings)
    try:
        flight_plan = service.generate_pattern(
            boundary_file.read_text(encoding="utf-8"), pattern, altitude, overlap
        )
    except ValueError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    if waypoints_only:
        typer.echo(flight_plan.waypoints_json)
    else:
        typer.echo(json.dumps(flight_plan.as_dict(), indent=2))


if __name__ == "__main__":
    cli()
