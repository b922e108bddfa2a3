# rein_planner/cli.py
"""
CLI interface for rein-planner.

Thin presentation layer over the tools/ service layer.
All commands delegate to the same functions that MCP wraps.
"""

import json

import typer

app = typer.Typer(
    name="rein-planner",
    help="Turn a natural-language timeframe into dated roadmap stages and tasks.",
    no_args_is_help=True,
)


def _load_config():
    """Load config and set up stderr logging at the configured verbosity."""
    from rein_planner.config.loader import load_config
    from rein_planner.logging_config import configure_cli_logging

    config = load_config()
    configure_cli_logging(config.output.verbosity)
    return config


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _print_table(result: dict) -> None:
    """Render a calculate_dates result as a rich table."""
    from rich.console import Console
    from rich.table import Table

    console = Console()
    title = (
        f"{result['total_days']} days · {result['stage_count']} stages · "
        f"{result['spacing_description']}"
    )
    table = Table(title=title, title_justify="left")
    table.add_column("Stage", justify="right", style="bold")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Nodes", justify="right")
    table.add_column("Node dates", style="dim")

    for stage in result["stages"]:
        table.add_row(
            str(stage["stage_index"]),
            stage["start_date"],
            stage["end_date"],
            str(len(stage["node_dates"])),
            ", ".join(stage["node_dates"]),
        )

    console.print(table)
    console.print(
        f"[dim]Span:[/dim] {result['start_date']} → {result['end_date']} "
        f"({result['span']}), {result['total_nodes']} nodes"
    )


@app.command()
def dates(
    timeframe: str = typer.Argument(None, help="Timeframe such as '2 weeks' or 'in 6 months'"),
    level: str = typer.Option(None, "--level", "-l", help="Experience level: beginner, intermediate, advanced"),
    start: str = typer.Option(None, "--start", "-s", help="Start date (YYYY-MM-DD), defaults to today"),
    format: str = typer.Option(None, "--format", "-f", help="Output format: table, json, markdown"),
):
    """Calculate stage and node dates for a roadmap."""
    from rein_planner.scheduling import DistributionRenderer, RoadmapDateDistribution
    from rein_planner.tools.calculate_dates import calculate_dates

    config = _load_config()
    output_format = format or config.output.format
    if output_format not in ("table", "json", "markdown"):
        _fail(ValueError(f"Unknown format '{output_format}': use table, json or markdown"))

    try:
        result = calculate_dates(timeframe, level, start, config=config)
    except Exception as e:
        _fail(e)

    if output_format == "json":
        typer.echo(json.dumps(result, indent=2))
    elif output_format == "markdown":
        distribution = RoadmapDateDistribution.model_validate(result)
        typer.echo(DistributionRenderer().render(distribution), nl=False)
    else:
        _print_table(result)


@app.command()
def spacing(
    timeframe: str = typer.Argument(None, help="Timeframe such as '3 months'"),
):
    """Show task density and stage count for a timeframe."""
    from rein_planner.tools.spacing_info import spacing_info

    _load_config()
    result = spacing_info(timeframe)

    typer.echo(f"Total days:      {result['total_days']}")
    typer.echo(f"Stages:          {result['stage_count']}")
    typer.echo(f"Spacing:         {result['spacing_description']} (every {result['node_spacing']} day(s))")
    typer.echo(f"Estimated nodes: {result['estimated_node_count']}")


@app.command()
def parse(timeframe: str = typer.Argument(..., help="Timeframe text to parse")):
    """Print the number of days a timeframe resolves to."""
    from rein_planner.scheduling import parse_timeframe_to_total_days

    _load_config()
    typer.echo(str(parse_timeframe_to_total_days(timeframe)))


@app.command()
def span(
    start: str = typer.Argument(..., help="Start date (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="End date (YYYY-MM-DD), inclusive"),
):
    """Describe an inclusive date range as a human duration."""
    from rein_planner.tools.format_range import format_range

    _load_config()
    try:
        result = format_range(start, end)
    except Exception as e:
        _fail(e)

    typer.echo(result["label"])


@app.command()
def serve():
    """Start the MCP server."""
    import asyncio

    from rein_planner.__main__ import main

    asyncio.run(main())


if __name__ == "__main__":
    app()
