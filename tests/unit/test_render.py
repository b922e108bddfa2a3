# tests/unit/test_render.py
"""Tests for the markdown distribution renderer."""

from datetime import date

from rein_planner.scheduling import DistributionRenderer, calculate_roadmap_dates


class TestDistributionRenderer:
    def test_render_thirty_days(self):
        distribution = calculate_roadmap_dates("30 days", None, date(2026, 1, 1))
        output = DistributionRenderer().render(distribution)

        assert output.startswith("## Roadmap Schedule\n")
        assert "Total duration: 30 days" in output
        assert "Stage count: 3" in output
        assert "Node spacing: Daily tasks" in output
        assert "### Stage 1: 2026-01-01 → 2026-01-10 (2 weeks)" in output
        assert "### Stage 3: 2026-01-21 → 2026-01-30 (2 weeks)" in output
        assert "- Node 1: 2026-01-01" in output
        assert "- Node 5: 2026-01-25" in output
        assert output.endswith("**Total nodes:** 15\n")

    def test_one_section_per_stage(self):
        distribution = calculate_roadmap_dates("6 months", None, date(2026, 1, 1))
        output = DistributionRenderer().render(distribution)
        assert output.count("### Stage ") == 5
        assert "Node spacing: Weekly tasks" in output
