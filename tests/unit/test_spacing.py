# tests/unit/test_spacing.py
"""Tests for spacing rule selection and related helpers."""

import pytest

from rein_planner.scheduling import (
    SPACING_RULES,
    describe_spacing,
    get_recommended_node_count,
    get_spacing_rule,
)


class TestGetSpacingRule:
    """Bucket lookup by total days."""

    @pytest.mark.parametrize(
        "total_days,stage_count,node_spacing,nodes_min,nodes_max",
        [
            (0, 2, 1, 3, 4),
            (13, 2, 1, 3, 4),
            (14, 3, 1, 4, 6),
            (30, 3, 1, 4, 6),
            (31, 4, 2, 6, 8),
            (60, 4, 2, 6, 8),
            (61, 4, 3, 7, 9),
            (90, 4, 3, 7, 9),
            (91, 5, 7, 8, 12),
            (180, 5, 7, 8, 12),
            (181, 6, 14, 10, 15),
            (365, 6, 14, 10, 15),
            (1000, 6, 14, 10, 15),
        ],
    )
    def test_bucket_boundaries(self, total_days, stage_count, node_spacing, nodes_min, nodes_max):
        rule = get_spacing_rule(total_days)
        assert rule.stage_count == stage_count
        assert rule.node_spacing == node_spacing
        assert rule.nodes_per_stage.min == nodes_min
        assert rule.nodes_per_stage.max == nodes_max

    def test_bucket_contains_total_days(self):
        for total_days in range(0, 366):
            rule = get_spacing_rule(total_days)
            assert rule.min_days <= total_days <= rule.max_days

    def test_stage_count_is_non_decreasing_step(self):
        previous = 0
        for total_days in range(0, 800):
            stage_count = get_spacing_rule(total_days).stage_count
            assert stage_count in {2, 3, 4, 5, 6}
            assert stage_count >= previous
            previous = stage_count

    def test_buckets_are_contiguous(self):
        for earlier, later in zip(SPACING_RULES, SPACING_RULES[1:]):
            assert later.min_days == earlier.max_days + 1

    def test_rules_are_immutable(self):
        rule = get_spacing_rule(30)
        with pytest.raises(Exception):
            rule.stage_count = 10


class TestRecommendedNodeCount:
    """Average stage size times stage count."""

    @pytest.mark.parametrize(
        "total_days,expected",
        [
            (10, 6),
            (30, 15),
            (45, 28),
            (90, 32),
            (120, 50),
            (365, 72),
        ],
    )
    def test_counts(self, total_days, expected):
        assert get_recommended_node_count(total_days) == expected


class TestDescribeSpacing:
    """Spacing phrases shown to users."""

    @pytest.mark.parametrize(
        "spacing,expected",
        [
            (1, "daily tasks"),
            (2, "tasks every 2 days"),
            (3, "tasks every 3 days"),
            (7, "weekly tasks"),
            (14, "bi-weekly tasks"),
            (5, "tasks every 5 days"),
        ],
    )
    def test_descriptions(self, spacing, expected):
        assert describe_spacing(spacing) == expected
