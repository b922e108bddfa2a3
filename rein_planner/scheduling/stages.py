# rein_planner/scheduling/stages.py
"""
Stage date allocation.

Splits a roadmap's total days into back-to-back stage ranges. Remainder days
go to the earliest stages.
"""

from rein_planner.scheduling.dates import DateLike, add_days, to_date, to_iso
from rein_planner.scheduling.schemas import DateRange


def calculate_stage_dates(
    total_days: int,
    stage_count: int,
    start_date: DateLike | None = None,
) -> list[DateRange]:
    """
    Calculate evenly distributed, contiguous stage date ranges.

    Stage i gets ``total_days // stage_count`` days, plus one while
    ``i < total_days % stage_count``. Each stage starts the day after the
    previous one ends, so the ranges partition exactly ``total_days`` days.

    When stage_count exceeds total_days the trailing stages get zero days:
    their end date falls one day before their start date and the next stage
    starts on the same day. Callers that need at least one day per stage must
    check before calling.

    Args:
        total_days: Length of the whole roadmap in days
        stage_count: Number of stages
        start_date: First day of the roadmap (defaults to today)

    Returns:
        One DateRange per stage, in order
    """
    if stage_count <= 0:
        return []

    base_days, extra_days = divmod(total_days, stage_count)
    current = to_date(start_date)

    stages: list[DateRange] = []
    for i in range(stage_count):
        days_for_stage = base_days + (1 if i < extra_days else 0)
        stages.append(
            DateRange(
                start_date=to_iso(current),
                end_date=to_iso(add_days(current, days_for_stage - 1)),
            )
        )
        current = add_days(current, days_for_stage)

    return stages
