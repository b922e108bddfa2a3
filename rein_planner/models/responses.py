# rein_planner/models/responses.py
"""
Pydantic response models for tool outputs.

All tools return structured responses using these models for consistency.
"""

from pydantic import BaseModel, Field

from rein_planner.scheduling.schemas import StageDateEntry


class RoadmapDatesResponse(BaseModel):
    """Response from calculate_dates tool."""

    timeframe: str | None = Field(default=None, description="Timeframe as given (after cleanup)")
    experience_level: str | None = Field(default=None, description="Experience level applied, if any")
    total_days: int = Field(description="Resolved length of the roadmap in days")
    stage_count: int = Field(description="Number of stages")
    node_spacing: int = Field(description="Days between consecutive nodes")
    spacing_description: str = Field(description="Human phrase for the spacing, e.g. 'weekly tasks'")
    start_date: str = Field(description="First day of the roadmap (ISO)")
    end_date: str = Field(description="Last day of the roadmap (ISO)")
    span: str = Field(description="Human-readable length of the whole roadmap")
    total_nodes: int = Field(description="Number of scheduled nodes across all stages")
    stages: list[StageDateEntry] = Field(default_factory=list, description="Per-stage dates")


class SpacingInfoResponse(BaseModel):
    """Response from spacing_info tool."""

    timeframe: str | None = Field(default=None, description="Timeframe as given (after cleanup)")
    total_days: int = Field(description="Resolved length of the roadmap in days")
    node_spacing: int = Field(description="Days between consecutive nodes")
    spacing_description: str = Field(description="Human phrase for the spacing")
    stage_count: int = Field(description="Number of stages")
    estimated_node_count: int = Field(description="Recommended total node count")


class DateRangeResponse(BaseModel):
    """Response from format_range tool."""

    start_date: str = Field(description="Range start (ISO)")
    end_date: str = Field(description="Range end (ISO), inclusive")
    days: int = Field(description="Inclusive day count")
    label: str = Field(description="Human-readable duration, e.g. '2 weeks'")
