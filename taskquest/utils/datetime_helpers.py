"""
Standardized Date/Time Handling Utilities

All calendar-day comparisons (streaks, "completed today", daily bonus) go
through this module so they agree on one timezone.

RULES:
- Task timestamps are stored as timezone-aware UTC (use now_utc())
- "Today" and task creation days are taken in the configured TIMEZONE
- Naive datetimes are treated as UTC
"""

import logging
from datetime import datetime, date
from typing import Optional
from zoneinfo import ZoneInfo

from taskquest import config

logger = logging.getLogger(__name__)

UTC = ZoneInfo("UTC")


def get_app_timezone() -> ZoneInfo:
    """
    Get the configured calendar timezone, falling back to UTC

    Returns:
        ZoneInfo object for config.TIMEZONE
    """
    try:
        return ZoneInfo(config.TIMEZONE)
    except Exception as e:
        logger.error(f"Invalid timezone '{config.TIMEZONE}': {e}")
        return UTC


def now_utc() -> datetime:
    """Current datetime in UTC (timezone-aware)"""
    return datetime.now(UTC)


def to_local_date(dt: datetime) -> date:
    """
    Calendar date of a timestamp in the configured timezone

    Args:
        dt: Datetime (aware, or naive meaning UTC)

    Returns:
        Local calendar date
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(get_app_timezone()).date()


def today_local(now: Optional[datetime] = None) -> date:
    """
    Today's date in the configured timezone

    Args:
        now: Reference instant (defaults to the current time)
    """
    return to_local_date(now or now_utc())


def parse_date(date_str: str) -> date:
    """
    Parse a YYYY-MM-DD date string

    Raises:
        ValueError: If date_str is not in ISO format
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid date format '{date_str}'. Expected YYYY-MM-DD")
