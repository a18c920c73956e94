"""Numeric range extraction from free-text budget and timeline strings."""

import re
from typing import Any, Pattern

from pitchforge.models.case_study import Interval

# "$50,000", "50,000", "50000"
BUDGET_TOKEN: Pattern[str] = re.compile(r"\$?\d[\d,]*")
# "3", "12"
TIMELINE_TOKEN: Pattern[str] = re.compile(r"\d+")

NO_INTERVAL = Interval(min=0, max=0)


def _to_number(token: str) -> int:
    return int(token.replace("$", "").replace(",", ""))


def parse_interval(text: Any, pattern: Pattern[str] = BUDGET_TOKEN) -> Interval:
    """
    Extract a {min, max} range from free text.

    The first two numeric tokens become min and max in the order they
    appear, so "100 - 50" gives min=100, max=50. Text with fewer than two
    tokens (or that is not a string at all) gives the 0/0 sentinel.

    Args:
        text: Free-text range such as "$25,000 - $50,000" or "3-4 months"
        pattern: Token pattern; budget tokens by default

    Returns:
        Parsed Interval, never raises
    """
    if not isinstance(text, str):
        return NO_INTERVAL.model_copy()

    tokens = pattern.findall(text)
    if len(tokens) < 2:
        return NO_INTERVAL.model_copy()

    return Interval(min=_to_number(tokens[0]), max=_to_number(tokens[1]))


def parse_budget(text: Any) -> Interval:
    """Parse a budget range like "$50,000 - $100,000"."""
    return parse_interval(text, BUDGET_TOKEN)


def parse_timeline(text: Any) -> Interval:
    """Parse a timeline range like "3-4 months"."""
    return parse_interval(text, TIMELINE_TOKEN)


def overlaps(a: Interval, b: Interval) -> bool:
    """True when the two closed ranges share at least one point."""
    return a.max >= b.min and a.min <= b.max
