# rein_planner/tools/spacing_info.py
"""spacing_info tool implementation."""

import logging

from rein_planner.models.responses import SpacingInfoResponse
from rein_planner.scheduling import get_spacing_info, parse_timeframe_to_total_days
from rein_planner.validation.sanitize import sanitize_timeframe

logger = logging.getLogger(__name__)


def spacing_info(timeframe: str | None = None) -> dict:
    """
    Describe how densely a roadmap of the given timeframe is scheduled.

    Args:
        timeframe: Free-text duration (None = one-month default)

    Returns:
        SpacingInfoResponse as dict
    """
    cleaned_timeframe = sanitize_timeframe(timeframe)
    info = get_spacing_info(parse_timeframe_to_total_days(cleaned_timeframe))

    logger.info(f"spacing_info: {info.total_days} days -> {info.spacing_description}")

    response = SpacingInfoResponse(timeframe=cleaned_timeframe, **info.model_dump())
    return response.model_dump()
