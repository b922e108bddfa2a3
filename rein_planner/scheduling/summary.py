# rein_planner/scheduling/summary.py
"""Summaries derived from spacing rules and stored roadmaps."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from rein_planner.scheduling.dates import DateLike, add_days, to_date, to_iso
from rein_planner.scheduling.schemas import RoadmapBounds, SpacingInfo, StageDateEntry
from rein_planner.scheduling.spacing import (
    describe_spacing,
    get_recommended_node_count,
    get_spacing_rule,
)
from rein_planner.scheduling.timeframe import DEFAULT_TOTAL_DAYS

logger = logging.getLogger(__name__)

# Roadmap length assumed per stage when stored stages carry no dates
DAYS_PER_UNDATED_STAGE = 7


def get_spacing_info(total_days: int | None = None) -> SpacingInfo:
    """
    Summarize task density for a roadmap length, e.g. for "weekly tasks" hints.

    A missing or zero total_days falls back to the one-month default.
    """
    total_days = total_days or DEFAULT_TOTAL_DAYS
    rule = get_spacing_rule(total_days)

    return SpacingInfo(
        total_days=total_days,
        node_spacing=rule.node_spacing,
        spacing_description=describe_spacing(rule.node_spacing),
        stage_count=rule.stage_count,
        estimated_node_count=get_recommended_node_count(total_days),
    )


def _stage_field(stage: Any, camel: str, snake: str) -> Any:
    if isinstance(stage, StageDateEntry):
        return getattr(stage, snake)
    if isinstance(stage, Mapping):
        return stage.get(camel) or stage.get(snake)
    return None


def _parse_stored_date(value: Any) -> date | None:
    if not value:
        return None
    try:
        return to_date(value)
    except (TypeError, ValueError):
        logger.warning(f"Skipping unparseable stage date: {value!r}")
        return None


def extract_roadmap_bounds(
    stages: Iterable[Mapping[str, Any] | StageDateEntry] | None,
    today: DateLike | None = None,
) -> RoadmapBounds:
    """
    Find the overall start and end of a stored roadmap.

    Stages may be StageDateEntry objects or stored JSON dicts using either
    ``startDate``/``endDate`` or ``start_date``/``end_date`` keys.

    Args:
        stages: Stored stages, in any order
        today: Reference day for the fallbacks (defaults to today)

    Returns:
        Earliest stage start and latest stage end. Without stages, today plus
        30 days; without usable dates, today plus a week per stage.
    """
    stage_list = list(stages or [])
    reference = to_date(today)

    if not stage_list:
        return RoadmapBounds(
            start_date=to_iso(reference),
            end_date=to_iso(add_days(reference, DEFAULT_TOTAL_DAYS)),
        )

    starts = [
        d for d in (_parse_stored_date(_stage_field(s, "startDate", "start_date")) for s in stage_list) if d
    ]
    ends = [
        d for d in (_parse_stored_date(_stage_field(s, "endDate", "end_date")) for s in stage_list) if d
    ]

    if not starts or not ends:
        return RoadmapBounds(
            start_date=to_iso(reference),
            end_date=to_iso(add_days(reference, len(stage_list) * DAYS_PER_UNDATED_STAGE)),
        )

    return RoadmapBounds(start_date=to_iso(min(starts)), end_date=to_iso(max(ends)))
