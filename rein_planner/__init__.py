# rein_planner/__init__.py
"""Roadmap date distribution for goal-tracking plans."""

__version__ = "0.1.0"
