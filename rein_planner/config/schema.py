# rein_planner/config/schema.py
"""
Pydantic configuration models for rein-planner.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScheduleConfig(BaseModel):
    """Defaults applied when a request leaves them out."""

    model_config = ConfigDict(extra="ignore")

    experience_level: Literal["beginner", "intermediate", "advanced"] | None = Field(
        default=None,
        description="Experience level used when a request gives neither level nor timeframe",
    )
    start_date: str | None = Field(
        default=None,
        description="Fixed ISO start date for roadmaps (None = today)",
    )


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    model_config = ConfigDict(extra="ignore")

    format: Literal["table", "json", "markdown"] = Field(
        default="table", description="Default CLI output format"
    )
    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )


class ReinPlannerConfig(BaseModel):
    """Root configuration for rein-planner."""

    model_config = ConfigDict(extra="ignore")

    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
