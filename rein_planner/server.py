# rein_planner/server.py
"""
FastMCP server instance with tool registration.

CRITICAL: configure_logging() is called first to prevent stdout pollution.
All logging goes to stderr as JSON.
"""

# Configure logging FIRST before any other imports
from rein_planner.logging_config import configure_logging

configure_logging()

# Now safe to import everything else
import logging

from fastmcp import FastMCP

from rein_planner.config.loader import load_config
from rein_planner.logging_config import VERBOSITY_LEVELS
from rein_planner.tools.calculate_dates import calculate_dates as _calculate_dates
from rein_planner.tools.format_range import format_range as _format_range
from rein_planner.tools.spacing_info import spacing_info as _spacing_info

logger = logging.getLogger(__name__)

mcp = FastMCP("rein-planner")

_config = load_config()
logging.getLogger().setLevel(VERBOSITY_LEVELS.get(_config.output.verbosity, logging.INFO))
logger.info(f"Loaded configuration: output={_config.output.format}")


@mcp.tool()
def calculate_dates(
    timeframe: str | None = None,
    experience_level: str | None = None,
    start_date: str | None = None,
) -> dict:
    """Calculate stage and task dates for a roadmap from a natural-language timeframe."""
    return _calculate_dates(timeframe, experience_level, start_date, config=_config)


@mcp.tool()
def spacing_info(timeframe: str | None = None) -> dict:
    """Describe task density (daily, weekly, ...) and stage count for a timeframe."""
    return _spacing_info(timeframe)


@mcp.tool()
def format_range(start_date: str, end_date: str) -> dict:
    """Format an inclusive ISO date range as a human duration such as '2 weeks'."""
    return _format_range(start_date, end_date)


logger.info("MCP server initialized with 3 tools")
