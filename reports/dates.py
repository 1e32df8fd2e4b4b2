"""
Date Helpers
============
Timestamp parsing and calendar-day boundaries in the portal time zone
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import config
from reports.errors import ValidationError


def portal_zone(name: Optional[str] = None) -> ZoneInfo:
    """Portal time zone (config.PORTAL_TIMEZONE unless overridden)"""
    key = name or config.PORTAL_TIMEZONE
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown time zone: {key}") from e


def parse_timestamp(value: Union[str, date, datetime], tz: Optional[ZoneInfo] = None) -> datetime:
    """
    Parse an ISO 8601 value into an aware datetime

    Parameters
    ----------
    value : str | date | datetime
        '2025-10-05T10:30:00Z', '2024-01-15', or a date/datetime object.
        Date-only and naive values are taken in the portal time zone.
    tz : ZoneInfo, optional
        Zone for naive values

    Returns
    -------
    datetime
        Timezone-aware datetime

    Raises
    ------
    ValidationError
        If the value cannot be parsed
    """
    tz = tz or portal_zone()

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        # fromisoformat only accepts "Z" from Python 3.11 on
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"Invalid timestamp: {value!r}") from e
    else:
        raise ValidationError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def day_start(day: date, tz: Optional[ZoneInfo] = None) -> datetime:
    """00:00:00 of a calendar day in the portal zone"""
    return datetime.combine(day, time.min, tzinfo=tz or portal_zone())


def next_day_start(day: date, tz: Optional[ZoneInfo] = None) -> datetime:
    """00:00:00 of the following calendar day (exclusive end-of-day bound)"""
    return day_start(day + timedelta(days=1), tz)


def format_timestamp(value: datetime, tz: Optional[ZoneInfo] = None) -> str:
    """Local date and time as shown in tables and exports"""
    return value.astimezone(tz or portal_zone()).strftime('%Y-%m-%d %H:%M')


def format_date(value: Optional[Union[date, datetime]], tz: Optional[ZoneInfo] = None) -> str:
    if value is None:
        return ''
    if isinstance(value, datetime):
        value = value.astimezone(tz or portal_zone()).date()
    return value.strftime('%Y-%m-%d')
