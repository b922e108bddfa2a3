# rein_planner/validation/__init__.py
"""Input validation and sanitization utilities."""

from .sanitize import (
    MAX_TOTAL_DAYS,
    sanitize_experience_level,
    sanitize_start_date,
    sanitize_timeframe,
    sanitize_total_days,
)

__all__ = [
    "MAX_TOTAL_DAYS",
    "sanitize_timeframe",
    "sanitize_start_date",
    "sanitize_experience_level",
    "sanitize_total_days",
]
