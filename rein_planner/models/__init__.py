# rein_planner/models/__init__.py
"""Response models for rein-planner tools."""

from .responses import DateRangeResponse, RoadmapDatesResponse, SpacingInfoResponse

__all__ = [
    "RoadmapDatesResponse",
    "SpacingInfoResponse",
    "DateRangeResponse",
]
