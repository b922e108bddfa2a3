# rein_planner/scheduling/nodes.py
"""
Node date distribution within a single stage.

Nodes are placed at the requested spacing when the stage is long enough.
Otherwise the spacing is compressed and any nodes that still do not fit are
stacked onto the stage's last day, so every node gets a date inside the stage.
"""

from rein_planner.scheduling.dates import DateLike, add_days, days_between, to_date, to_iso


def distribute_nodes_in_stage(
    stage_start: DateLike,
    stage_end: DateLike,
    node_count: int,
    spacing: int,
) -> list[str]:
    """
    Distribute node dates within a stage.

    Args:
        stage_start: First day of the stage
        stage_end: Last day of the stage (inclusive)
        node_count: Number of nodes to place
        spacing: Preferred days between consecutive nodes

    Returns:
        node_count ISO dates, non-decreasing
    """
    if node_count <= 0:
        return []

    start = to_date(stage_start)
    end = to_date(stage_end)
    stage_days = days_between(start, end) + 1
    needed_days = (node_count - 1) * spacing + 1

    if needed_days <= stage_days:
        return [to_iso(add_days(start, i * spacing)) for i in range(node_count)]

    # Tight fit: compress spacing, saturate the rest onto the last day
    adjusted_spacing = max(1, stage_days // node_count)
    node_dates: list[str] = []
    current = start
    for _ in range(node_count):
        if current <= end:
            node_dates.append(to_iso(current))
            current = add_days(current, adjusted_spacing)
        else:
            node_dates.append(to_iso(end))

    return node_dates
