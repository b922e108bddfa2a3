# rein_planner/tools/format_range.py
"""format_range tool implementation."""

from fastmcp.exceptions import ToolError

from rein_planner.models.responses import DateRangeResponse
from rein_planner.scheduling import format_date_range
from rein_planner.scheduling.dates import inclusive_days, to_iso
from rein_planner.validation.sanitize import sanitize_start_date


def format_range(start_date: str, end_date: str) -> dict:
    """
    Describe an inclusive date range as a human duration.

    Args:
        start_date: ISO start date
        end_date: ISO end date (inclusive)

    Returns:
        DateRangeResponse as dict

    Raises:
        ToolError: If either date is missing or malformed
    """
    start = sanitize_start_date(start_date)
    end = sanitize_start_date(end_date)
    if start is None or end is None:
        raise ToolError("Both start_date and end_date are required")

    response = DateRangeResponse(
        start_date=to_iso(start),
        end_date=to_iso(end),
        days=inclusive_days(start, end),
        label=format_date_range(start, end),
    )
    return response.model_dump()
