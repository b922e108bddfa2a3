# rein_planner/validation/sanitize.py
"""
Input sanitization and validation utilities.

Guards the boundary in front of the scheduling core: the core itself never
rejects input, so malformed dates, unknown experience levels and oversized
timeframes are caught here and reported as ToolError.
"""

import logging
from datetime import date, datetime

from fastmcp.exceptions import ToolError

from rein_planner.scheduling.calculator import EXPERIENCE_DEFAULT_DAYS

logger = logging.getLogger(__name__)

MAX_TIMEFRAME_LENGTH = 200

# 100 years
MAX_TOTAL_DAYS = 36_500


def sanitize_timeframe(text: str | None, max_length: int = MAX_TIMEFRAME_LENGTH) -> str | None:
    """
    Sanitize timeframe text.

    Strips whitespace and truncates to max_length. Blank text becomes None so
    the experience-level default can apply.

    Args:
        text: User-provided timeframe, e.g. "in 6 months"
        max_length: Maximum allowed length (default 200)

    Returns:
        Cleaned timeframe or None
    """
    if text is None:
        return None

    cleaned = text.strip()
    if not cleaned:
        return None

    if len(cleaned) > max_length:
        logger.warning(
            f"Timeframe truncated from {len(cleaned)} to {max_length} characters"
        )
        cleaned = cleaned[:max_length]

    return cleaned


def sanitize_start_date(value: str | date | None) -> date | None:
    """
    Parse and validate a roadmap start date.

    Args:
        value: ISO date string (YYYY-MM-DD), date, or None

    Returns:
        Parsed date, or None when not provided

    Raises:
        ToolError: If the string is not a valid ISO calendar date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    cleaned = value.strip()
    if not cleaned:
        return None

    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        raise ToolError(f"Invalid date '{value}': expected YYYY-MM-DD")


def sanitize_experience_level(level: str | None) -> str | None:
    """
    Normalize and validate an experience level.

    Args:
        level: beginner, intermediate or advanced (any case), or None

    Returns:
        Lowercase level or None

    Raises:
        ToolError: If the level is not recognized
    """
    if level is None:
        return None

    cleaned = level.strip().lower()
    if not cleaned:
        return None

    if cleaned not in EXPERIENCE_DEFAULT_DAYS:
        allowed = ", ".join(EXPERIENCE_DEFAULT_DAYS)
        raise ToolError(f"Invalid experience level '{level}': must be one of {allowed}")

    return cleaned


def sanitize_total_days(total_days: int, start: date | None = None) -> int:
    """
    Validate a resolved roadmap length before dates are calculated.

    Args:
        total_days: Days the timeframe resolved to
        start: First day of the roadmap (defaults to today)

    Returns:
        total_days unchanged

    Raises:
        ToolError: If the roadmap is longer than MAX_TOTAL_DAYS or would end
            past the last representable calendar date
    """
    if total_days > MAX_TOTAL_DAYS:
        raise ToolError(
            f"Timeframe of {total_days} days is too long: maximum is {MAX_TOTAL_DAYS} days"
        )

    start = start or date.today()
    if total_days > (date.max - start).days:
        raise ToolError(f"Roadmap of {total_days} days starting {start.isoformat()} ends past year 9999")

    return total_days
