# rein_planner/tools/calculate_dates.py
"""
calculate_dates tool implementation.

Validates inputs, applies configured defaults, and computes the roadmap's
date distribution.
"""

import logging

from rein_planner.config.schema import ReinPlannerConfig
from rein_planner.models.responses import RoadmapDatesResponse
from rein_planner.scheduling import (
    calculate_roadmap_dates,
    describe_spacing,
    extract_roadmap_bounds,
    format_date_range,
    resolve_total_days,
)
from rein_planner.validation.sanitize import (
    sanitize_experience_level,
    sanitize_start_date,
    sanitize_timeframe,
    sanitize_total_days,
)

logger = logging.getLogger(__name__)


def calculate_dates(
    timeframe: str | None,
    experience_level: str | None = None,
    start_date: str | None = None,
    config: ReinPlannerConfig | None = None,
) -> dict:
    """
    Calculate stage and node dates for a roadmap.

    Args:
        timeframe: Free-text duration, e.g. "2 weeks" or "in 6 months"
        experience_level: beginner/intermediate/advanced (falls back to config)
        start_date: ISO start date (falls back to config, then today)
        config: Configuration instance

    Returns:
        RoadmapDatesResponse as dict

    Raises:
        ToolError: If start_date or experience_level is invalid, or the
            timeframe is too long to schedule
    """
    config = config or ReinPlannerConfig()

    cleaned_timeframe = sanitize_timeframe(timeframe)
    level = sanitize_experience_level(experience_level) or config.schedule.experience_level
    start = sanitize_start_date(start_date) or sanitize_start_date(config.schedule.start_date)
    sanitize_total_days(resolve_total_days(cleaned_timeframe, level), start)

    distribution = calculate_roadmap_dates(cleaned_timeframe, level, start)
    bounds = extract_roadmap_bounds(distribution.stages)

    logger.info(
        f"calculate_dates: timeframe={cleaned_timeframe!r} level={level} "
        f"start={bounds.start_date} total_days={distribution.total_days}"
    )

    response = RoadmapDatesResponse(
        timeframe=cleaned_timeframe,
        experience_level=level,
        total_days=distribution.total_days,
        stage_count=distribution.stage_count,
        node_spacing=distribution.node_spacing,
        spacing_description=describe_spacing(distribution.node_spacing),
        start_date=bounds.start_date,
        end_date=bounds.end_date,
        span=format_date_range(bounds.start_date, bounds.end_date),
        total_nodes=distribution.total_nodes,
        stages=distribution.stages,
    )
    return response.model_dump()
