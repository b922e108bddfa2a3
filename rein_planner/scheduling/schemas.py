# rein_planner/scheduling/schemas.py
"""Value types for roadmap date distribution.

All models are frozen: they are built fresh on every calculation and never
mutated afterwards. Dates are ISO ``YYYY-MM-DD`` strings, which is the form
consumed downstream.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ExperienceLevel = Literal["beginner", "intermediate", "advanced"]


class NodesPerStage(BaseModel):
    """Bounds on how many nodes a stage holds."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    min: int = Field(..., description="Fewest nodes in a stage")
    max: int = Field(..., description="Most nodes in a stage")

    @property
    def average(self) -> int:
        """Rounded-down midpoint of min and max."""
        return (self.min + self.max) // 2


class SpacingRule(BaseModel):
    """Density bucket selected by the total day count of a roadmap."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    min_days: int = Field(..., description="Inclusive lower bound of the bucket")
    max_days: int = Field(..., description="Inclusive upper bound of the bucket")
    node_spacing: int = Field(..., description="Days between consecutive nodes")
    nodes_per_stage: NodesPerStage
    stage_count: int = Field(..., description="Number of stages in the roadmap")


class DateRange(BaseModel):
    """Inclusive calendar range of a stage."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    start_date: str = Field(..., description="ISO start date (YYYY-MM-DD)")
    end_date: str = Field(..., description="ISO end date (YYYY-MM-DD), inclusive")


class StageDateEntry(BaseModel):
    """One stage's range plus the ordered dates of its nodes."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    stage_index: int = Field(..., description="Stage number (1-indexed)")
    start_date: str
    end_date: str
    node_dates: list[str] = Field(default_factory=list)


class RoadmapDateDistribution(BaseModel):
    """Complete date layout of a roadmap."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    total_days: int
    stage_count: int
    node_spacing: int
    stages: list[StageDateEntry] = Field(default_factory=list)

    @property
    def total_nodes(self) -> int:
        return sum(len(stage.node_dates) for stage in self.stages)


class SpacingInfo(BaseModel):
    """Summary of how densely a roadmap of a given length is scheduled."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    total_days: int
    node_spacing: int
    spacing_description: str
    stage_count: int
    estimated_node_count: int


class RoadmapBounds(BaseModel):
    """Overall start and end of a stored roadmap."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    start_date: str
    end_date: str
