# rein_planner/scheduling/calculator.py
"""
Roadmap date calculation.

Composes the timeframe parser, spacing rules, stage allocator and node
distributor into a complete date layout for a roadmap.
"""

import logging
import math

from rein_planner.scheduling.dates import DateLike, inclusive_days
from rein_planner.scheduling.nodes import distribute_nodes_in_stage
from rein_planner.scheduling.schemas import (
    ExperienceLevel,
    RoadmapDateDistribution,
    SpacingRule,
    StageDateEntry,
)
from rein_planner.scheduling.spacing import get_spacing_rule
from rein_planner.scheduling.stages import calculate_stage_dates
from rein_planner.scheduling.timeframe import parse_timeframe_to_total_days

logger = logging.getLogger(__name__)

# Used only when no explicit timeframe was given
EXPERIENCE_DEFAULT_DAYS: dict[str, int] = {
    "beginner": 60,
    "intermediate": 45,
    "advanced": 30,
}


def resolve_total_days(
    timeframe: str | None,
    experience_level: ExperienceLevel | None = None,
) -> int:
    """Total days from the timeframe, or from the experience level when there is none."""
    total_days = parse_timeframe_to_total_days(timeframe)
    if not timeframe and experience_level in EXPERIENCE_DEFAULT_DAYS:
        total_days = EXPERIENCE_DEFAULT_DAYS[experience_level]
    return total_days


def _stage_node_count(rule: SpacingRule, index: int) -> int:
    """Light first stage, heavy middle stages, average final stage."""
    average = rule.nodes_per_stage.average
    if rule.stage_count < 4:
        return average
    if index == 0:
        return rule.nodes_per_stage.min
    if index < rule.stage_count - 1:
        return rule.nodes_per_stage.max
    return average


def calculate_roadmap_dates(
    timeframe: str | None,
    experience_level: ExperienceLevel | None = None,
    start_date: DateLike | None = None,
) -> RoadmapDateDistribution:
    """
    Calculate the complete date distribution for a roadmap.

    Args:
        timeframe: Free-text duration such as "2 weeks" (None if unknown)
        experience_level: beginner/intermediate/advanced, used for the
            default length when timeframe is absent
        start_date: First day of the roadmap (defaults to today)

    Returns:
        RoadmapDateDistribution with one entry per stage
    """
    total_days = resolve_total_days(timeframe, experience_level)
    rule = get_spacing_rule(total_days)

    stage_ranges = calculate_stage_dates(total_days, rule.stage_count, start_date)

    stages = []
    for index, stage_range in enumerate(stage_ranges):
        node_dates = distribute_nodes_in_stage(
            stage_range.start_date,
            stage_range.end_date,
            _stage_node_count(rule, index),
            rule.node_spacing,
        )
        stages.append(
            StageDateEntry(
                stage_index=index + 1,
                start_date=stage_range.start_date,
                end_date=stage_range.end_date,
                node_dates=node_dates,
            )
        )

    distribution = RoadmapDateDistribution(
        total_days=total_days,
        stage_count=rule.stage_count,
        node_spacing=rule.node_spacing,
        stages=stages,
    )
    logger.info(
        f"Calculated roadmap dates: {total_days} days, {rule.stage_count} stages, "
        f"{distribution.total_nodes} nodes every {rule.node_spacing} day(s)"
    )
    return distribution


def format_date_range(start_date: DateLike, end_date: DateLike) -> str:
    """
    Format an inclusive date range as a rough human duration.

    Days below a week, weeks below 30 days, months otherwise. Weeks and
    months round up.
    """
    days = inclusive_days(start_date, end_date)

    if days == 1:
        return "1 day"
    if days < 7:
        return f"{days} days"

    weeks = math.ceil(days / 7)
    if weeks == 1:
        return "1 week"
    if days < 30:
        return f"{weeks} weeks"

    months = math.ceil(days / 30)
    if months == 1:
        return "1 month"
    return f"{months} months"
