# rein_planner/scheduling/timeframe.py
"""
Timeframe parsing.

Turns a free-text duration phrase ("2 weeks", "in 6 months", "quick") into a
total day count. Unparseable text falls back to a one-month default instead
of raising.
"""

import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_DAYS = 30

DAYS_PER_UNIT: dict[str, int] = {
    "week": 7,
    "month": 30,
    "day": 1,
}

# Ordered: the first matching pattern wins
_COUNT_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(\d+)\s*weeks?"), "week"),
    (re.compile(r"(\d+)\s*months?"), "month"),
    (re.compile(r"(\d+)\s*days?"), "day"),
]

_IN_OVER_PATTERN = re.compile(r"(?:in|over)\s*(\d+)\s*(week|month|day)s?")

# Keyword fallbacks, checked as substrings in order
_KEYWORD_DAYS: list[tuple[tuple[str, ...], int]] = [
    (("quarter",), 90),
    (("year",), 365),
    (("quick", "fast"), 14),
    (("comprehensive", "deep"), 90),
]


def _count_to_days(count: str, unit: str) -> int | None:
    """Multiply a digit run by its unit length, or None if it cannot be converted."""
    try:
        return int(count) * DAYS_PER_UNIT[unit]
    except ValueError:
        # int() refuses digit strings past the interpreter's conversion limit
        logger.debug(f"Timeframe count of {len(count)} digits is not convertible")
        return None


def parse_timeframe_to_total_days(timeframe: str | None) -> int:
    """
    Parse a natural-language timeframe into a number of days.

    Examples: "2 weeks" -> 14, "3 months" -> 90, "in 6 months" -> 180,
    "a quick intro" -> 14.

    Args:
        timeframe: Free-text duration, or None

    Returns:
        Total days (30 when absent, unrecognized or not convertible)
    """
    if not timeframe:
        return DEFAULT_TOTAL_DAYS

    lower = timeframe.lower().strip()

    for pattern, unit in _COUNT_PATTERNS:
        match = pattern.search(lower)
        if match:
            days = _count_to_days(match.group(1), unit)
            if days is None:
                return DEFAULT_TOTAL_DAYS
            logger.debug(f"Timeframe '{timeframe}' matched '{unit}' count: {days} days")
            return days

    match = _IN_OVER_PATTERN.search(lower)
    if match:
        days = _count_to_days(match.group(1), match.group(2))
        if days is None:
            return DEFAULT_TOTAL_DAYS
        logger.debug(f"Timeframe '{timeframe}' matched in/over phrase: {days} days")
        return days

    for keywords, days in _KEYWORD_DAYS:
        if any(keyword in lower for keyword in keywords):
            logger.debug(f"Timeframe '{timeframe}' matched keyword: {days} days")
            return days

    logger.debug(f"Unrecognized timeframe '{timeframe}', using {DEFAULT_TOTAL_DAYS} days")
    return DEFAULT_TOTAL_DAYS
