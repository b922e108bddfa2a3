# rein_planner/scheduling/spacing.py
"""
Spacing rules.

Maps a roadmap's total length to how densely its tasks are packed: short
roadmaps get daily tasks in a few small stages, long ones get weekly or
bi-weekly tasks in more, larger stages.
"""

from rein_planner.scheduling.schemas import NodesPerStage, SpacingRule

# Ordered by max_days; the last rule also covers anything longer than a year
SPACING_RULES: tuple[SpacingRule, ...] = (
    SpacingRule(
        min_days=0,
        max_days=13,
        node_spacing=1,
        nodes_per_stage=NodesPerStage(min=3, max=4),
        stage_count=2,
    ),
    SpacingRule(
        min_days=14,
        max_days=30,
        node_spacing=1,
        nodes_per_stage=NodesPerStage(min=4, max=6),
        stage_count=3,
    ),
    SpacingRule(
        min_days=31,
        max_days=60,
        node_spacing=2,
        nodes_per_stage=NodesPerStage(min=6, max=8),
        stage_count=4,
    ),
    SpacingRule(
        min_days=61,
        max_days=90,
        node_spacing=3,
        nodes_per_stage=NodesPerStage(min=7, max=9),
        stage_count=4,
    ),
    SpacingRule(
        min_days=91,
        max_days=180,
        node_spacing=7,
        nodes_per_stage=NodesPerStage(min=8, max=12),
        stage_count=5,
    ),
    SpacingRule(
        min_days=181,
        max_days=365,
        node_spacing=14,
        nodes_per_stage=NodesPerStage(min=10, max=15),
        stage_count=6,
    ),
)

_SPACING_DESCRIPTIONS: dict[int, str] = {
    1: "daily tasks",
    7: "weekly tasks",
    14: "bi-weekly tasks",
}


def get_spacing_rule(total_days: int) -> SpacingRule:
    """Return the spacing rule whose bucket contains total_days."""
    for rule in SPACING_RULES[:-1]:
        if total_days <= rule.max_days:
            return rule
    return SPACING_RULES[-1]


def get_recommended_node_count(total_days: int) -> int:
    """Estimated node count: the average stage size times the stage count."""
    rule = get_spacing_rule(total_days)
    return rule.nodes_per_stage.average * rule.stage_count


def describe_spacing(node_spacing: int) -> str:
    """Human phrase for a node spacing, e.g. "weekly tasks"."""
    return _SPACING_DESCRIPTIONS.get(node_spacing, f"tasks every {node_spacing} days")
