# rein_planner/scheduling/render.py
"""
Markdown renderer for roadmap date distributions.

Format:
    ## Roadmap Schedule

    Total duration: {total_days} days
    Stage count: {stage_count}
    Node spacing: {spacing description}

    ### Stage 1: 2026-01-01 → 2026-01-10 (2 weeks)
    - Node 1: 2026-01-01
    ...

    **Total nodes:** {n}
"""

from rein_planner.scheduling.calculator import format_date_range
from rein_planner.scheduling.schemas import RoadmapDateDistribution, StageDateEntry
from rein_planner.scheduling.spacing import describe_spacing


class DistributionRenderer:
    """Converts a RoadmapDateDistribution to a markdown schedule."""

    def render(self, distribution: RoadmapDateDistribution) -> str:
        """
        Render a distribution to a markdown string.

        Args:
            distribution: Calculated roadmap dates

        Returns:
            Markdown text ending with a newline
        """
        sections = ["## Roadmap Schedule", ""]
        sections.append(f"Total duration: {distribution.total_days} days")
        sections.append(f"Stage count: {distribution.stage_count}")
        sections.append(f"Node spacing: {describe_spacing(distribution.node_spacing).capitalize()}")
        sections.append("")

        for stage in distribution.stages:
            sections.extend(self._render_stage(stage))

        sections.append(f"**Total nodes:** {distribution.total_nodes}")
        return "\n".join(sections) + "\n"

    def _render_stage(self, stage: StageDateEntry) -> list[str]:
        span = format_date_range(stage.start_date, stage.end_date)
        lines = [f"### Stage {stage.stage_index}: {stage.start_date} → {stage.end_date} ({span})"]
        for i, node_date in enumerate(stage.node_dates, start=1):
            lines.append(f"- Node {i}: {node_date}")
        lines.append("")
        return lines
