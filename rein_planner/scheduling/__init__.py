# rein_planner/scheduling/__init__.py
"""Roadmap date distribution: timeframe parsing, spacing rules, stage and node dates."""

from rein_planner.scheduling.calculator import (
    EXPERIENCE_DEFAULT_DAYS,
    calculate_roadmap_dates,
    format_date_range,
    resolve_total_days,
)
from rein_planner.scheduling.nodes import distribute_nodes_in_stage
from rein_planner.scheduling.render import DistributionRenderer
from rein_planner.scheduling.schemas import (
    DateRange,
    ExperienceLevel,
    NodesPerStage,
    RoadmapBounds,
    RoadmapDateDistribution,
    SpacingInfo,
    SpacingRule,
    StageDateEntry,
)
from rein_planner.scheduling.spacing import (
    SPACING_RULES,
    describe_spacing,
    get_recommended_node_count,
    get_spacing_rule,
)
from rein_planner.scheduling.stages import calculate_stage_dates
from rein_planner.scheduling.summary import extract_roadmap_bounds, get_spacing_info
from rein_planner.scheduling.timeframe import DEFAULT_TOTAL_DAYS, parse_timeframe_to_total_days

__all__ = [
    "DEFAULT_TOTAL_DAYS",
    "EXPERIENCE_DEFAULT_DAYS",
    "SPACING_RULES",
    "DateRange",
    "DistributionRenderer",
    "ExperienceLevel",
    "NodesPerStage",
    "RoadmapBounds",
    "RoadmapDateDistribution",
    "SpacingInfo",
    "SpacingRule",
    "StageDateEntry",
    "calculate_roadmap_dates",
    "calculate_stage_dates",
    "describe_spacing",
    "distribute_nodes_in_stage",
    "extract_roadmap_bounds",
    "format_date_range",
    "get_recommended_node_count",
    "get_spacing_info",
    "get_spacing_rule",
    "parse_timeframe_to_total_days",
    "resolve_total_days",
]
