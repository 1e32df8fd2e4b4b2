"""
Report Filters
==============
Store scoping, date-range / categorical filtering and filter choice lists.
All functions are pure and keep the input order of the records.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from config import ALL
from reports.dates import day_start, next_day_start, portal_zone
from reports.errors import AuthorizationError, ValidationError
from reports.models import Record

logger = logging.getLogger(__name__)

Selector = Union[str, Callable[[Any], Any]]


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days; either end may be open"""

    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def span_days(self) -> int:
        """Whole days between the two ends (0 for a single-day range)"""
        if not self.is_complete:
            raise ValidationError("Date range required")
        return (self.end - self.start).days

    @classmethod
    def from_picker(cls, value: Any) -> 'DateRange':
        """
        Build from st.date_input range output

        st.date_input returns (), (start,) or (start, end) while the user
        is still picking.
        """
        if value is None:
            return cls()
        if isinstance(value, date):
            return cls(start=value)
        picked = list(value)
        start = picked[0] if len(picked) > 0 else None
        end = picked[1] if len(picked) > 1 else None
        return cls(start=start, end=end)


@dataclass(frozen=True)
class ReportFilter:
    """
    Caller-owned filter state

    predicates maps a record attribute to the expected value; ALL means
    no constraint on that attribute.
    """

    date_range: DateRange = field(default_factory=DateRange)
    predicates: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'predicates', MappingProxyType(dict(self.predicates)))

    def apply(self, records: Sequence[Record]) -> List[Record]:
        return filter_records(records, self.date_range, self.predicates)


def scope_records(records: Iterable[Record], allowed_store_ids: Iterable[str]) -> List[Record]:
    """
    Keep only records of stores in the caller's allow-list

    Parameters
    ----------
    records : Iterable[Record]
        Full collection from the record source
    allowed_store_ids : Iterable[str]
        Allow-list from the authorization collaborator, trusted verbatim

    Returns
    -------
    List[Record]
        Scoped records in their original order
    """
    allowed = set(allowed_store_ids)
    return [r for r in records if r.store_id in allowed]


def authorize_store(store_id: str, allowed_store_ids: Iterable[str]) -> None:
    """Raise AuthorizationError when a concrete store outside the allow-list is requested"""
    if store_id == ALL:
        return
    if store_id not in set(allowed_store_ids):
        raise AuthorizationError(f"You do not have access to store {store_id}")


def _matches_range(record: Record, date_range: DateRange, tz) -> bool:
    ts = record.timestamp
    if date_range.start is not None and ts < day_start(date_range.start, tz):
        return False
    # end bound covers the whole end day
    if date_range.end is not None and ts >= next_day_start(date_range.end, tz):
        return False
    return True


def _matches_predicates(record: Record, predicates: Mapping[str, Any]) -> bool:
    for name, expected in predicates.items():
        if expected == ALL:
            continue
        try:
            actual = getattr(record, name)
        except AttributeError as e:
            raise ValidationError(f"Unknown filter field: {name}") from e
        if actual != expected:
            return False
    return True


def filter_records(
    records: Sequence[Record],
    date_range: Optional[DateRange] = None,
    predicates: Optional[Mapping[str, Any]] = None,
) -> List[Record]:
    """
    Filter scoped records by date range and categorical equality

    Parameters
    ----------
    records : Sequence[Record]
        Scoped collection
    date_range : DateRange, optional
        Inclusive calendar-day range in the portal time zone.
        A range with start > end simply matches nothing.
    predicates : Mapping, optional
        {attribute: expected value}; ALL disables a predicate

    Raises
    ------
    ValidationError
        If a predicate names an attribute the records do not have

    Returns
    -------
    List[Record]
        Matching records in input order
    """
    date_range = date_range or DateRange()
    predicates = predicates or {}
    tz = portal_zone()

    result = [
        r for r in records
        if _matches_range(r, date_range, tz) and _matches_predicates(r, predicates)
    ]
    logger.debug(f"[Filter] {len(result)}/{len(records)} records matched "
                 f"(range={date_range.start}..{date_range.end}, predicates={dict(predicates)})")
    return result


def distinct_values(records: Iterable[Record], selector: Selector) -> List[Any]:
    """
    Distinct values in order of first occurrence (filter choice lists)

    Parameters
    ----------
    records : Iterable[Record]
        Scoped collection; values outside it never appear
    selector : str | callable
        Attribute name or function of a record
    """
    get = selector if callable(selector) else (lambda r: getattr(r, selector))
    seen = []
    for record in records:
        value = get(record)
        if value not in seen:
            seen.append(value)
    return seen


def validate_search_range(
    date_range: DateRange,
    require_both: bool = True,
    max_days: Optional[int] = None,
) -> DateRange:
    """
    Validate a search-form date range

    Raises
    ------
    ValidationError
        Missing endpoint, inverted range, or span over max_days
    """
    if require_both and not date_range.is_complete:
        raise ValidationError("Date range required: please pick a start and end date")

    if date_range.is_complete:
        if date_range.start > date_range.end:
            raise ValidationError("Start date must be on or before end date")
        if max_days is not None and date_range.span_days() > max_days:
            raise ValidationError(f"Date range cannot exceed {max_days} days")

    return date_range
