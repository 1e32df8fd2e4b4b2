"""
Report Records
==============
Immutable record types shown on the portal pages
- FieldVisitReport (field-visit reports)
- Payment (payment history)
- ProductReturn / ReturnItem (product returns)
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from config import (
    APPROVAL_STATUSES,
    PAYMENT_MODES,
    RATING_MAX,
    RATING_MIN,
    TO_REPLENISHMENT_STATUSES,
    YES_NO,
)
from reports.dates import parse_timestamp
from reports.errors import ValidationError


# Ratings covered by the non-compliance flag, with display labels
RATING_FIELDS = {
    'store_environment': 'Store Env',
    'staff_grooming': 'Grooming',
    'staff_quality': 'Quality',
    'pvt_label_pharma': 'Pvt Label Pharma',
    'pvt_label_non_pharma': 'Pvt Label Non-Pharma',
}


def _check_choice(name: str, value: Any, choices: Sequence[str]) -> None:
    if value not in choices:
        raise ValidationError(f"{name} must be one of {', '.join(choices)} (got {value!r})")


def _check_amount(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValidationError(f"{name} must be a non-negative number (got {value!r})")


def _optional_text(value: Optional[str]) -> Optional[str]:
    return value if value else None


def _parse_day(value: Any) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_timestamp(value).date()


class Record:
    """
    Common accessors of portal records

    Subclasses set TIME_FIELD to the attribute used for date filtering.
    """

    TIME_FIELD = ''

    @property
    def record_id(self) -> str:
        return self.id

    @property
    def timestamp(self) -> datetime:
        return getattr(self, self.TIME_FIELD)

    def _normalize_time(self, name: str, optional: bool = False) -> None:
        """Store an attribute as an aware datetime; naive values get the portal zone"""
        value = getattr(self, name)
        if value is None and optional:
            return
        object.__setattr__(self, name, parse_timestamp(value))


@dataclass(frozen=True)
class Rating:
    """Small ordinal rating (1-5) with optional remarks"""

    value: int
    remarks: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Rating must be an integer (got {self.value!r})")
        if not RATING_MIN <= self.value <= RATING_MAX:
            raise ValidationError(f"Rating must be between {RATING_MIN} and {RATING_MAX} (got {self.value})")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Rating':
        return cls(value=data['value'], remarks=_optional_text(data.get('remarks')))


@dataclass(frozen=True)
class FieldVisitReport(Record):
    """Store visit filed by a field employee"""

    TIME_FIELD = 'visited_at'

    id: str
    visited_at: datetime
    employee_id: str
    employee_name: str
    store_id: str
    store_name: str
    local_head_name: str
    store_environment: Rating
    staff_grooming: Rating
    staff_quality: Rating
    staff_present: int
    pvt_label_pharma: Rating
    pvt_label_non_pharma: Rating
    to_replenishment: str
    outstanding_payments: str
    sop_deviations: Optional[str] = None
    other_observations: Optional[str] = None

    def __post_init__(self):
        self._normalize_time(self.TIME_FIELD)
        _check_choice('to_replenishment', self.to_replenishment, TO_REPLENISHMENT_STATUSES)
        _check_choice('outstanding_payments', self.outstanding_payments, YES_NO)
        if isinstance(self.staff_present, bool) or not isinstance(self.staff_present, int) or self.staff_present < 0:
            raise ValidationError(f"staff_present must be a non-negative integer (got {self.staff_present!r})")

    def ratings(self) -> Dict[str, Rating]:
        """Covered ratings keyed by field name"""
        return {name: getattr(self, name) for name in RATING_FIELDS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FieldVisitReport':
        try:
            return cls(
                id=data['id'],
                visited_at=parse_timestamp(data['datetime']),
                employee_id=data['employee_id'],
                employee_name=data['employee_name'],
                store_id=data['store_id'],
                store_name=data['store_name'],
                local_head_name=data['local_head_name'],
                store_environment=Rating.from_dict(data['store_environment']),
                staff_grooming=Rating.from_dict(data['staff_grooming']),
                staff_quality=Rating.from_dict(data['staff_quality']),
                staff_present=data['staff_present'],
                pvt_label_pharma=Rating.from_dict(data['pvt_label_pharma']),
                pvt_label_non_pharma=Rating.from_dict(data['pvt_label_non_pharma']),
                to_replenishment=data['to_replenishment'],
                outstanding_payments=data['outstanding_payments'],
                sop_deviations=_optional_text(data.get('sop_deviations')),
                other_observations=_optional_text(data.get('other_observations')),
            )
        except KeyError as e:
            raise ValidationError(f"Field visit report is missing {e.args[0]!r}") from e


@dataclass(frozen=True)
class Payment(Record):
    """Payment submitted by the franchisee"""

    TIME_FIELD = 'created_at'

    id: str
    payment_id: str
    name: str
    store_id: str
    created_at: datetime
    status: str
    amount: float
    mode_of_payment: str
    approved_at: Optional[datetime] = None

    def __post_init__(self):
        self._normalize_time(self.TIME_FIELD)
        self._normalize_time('approved_at', optional=True)
        _check_choice('status', self.status, APPROVAL_STATUSES)
        _check_choice('mode_of_payment', self.mode_of_payment, PAYMENT_MODES)
        _check_amount('amount', self.amount)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Payment':
        try:
            approved = data.get('approved_date')
            return cls(
                id=data['id'],
                payment_id=data['payment_id'],
                name=data['name'],
                store_id=data['store_id'],
                created_at=parse_timestamp(data['created_date']),
                status=data['status'],
                amount=data['amount'],
                mode_of_payment=data['mode_of_payment'],
                approved_at=parse_timestamp(approved) if approved else None,
            )
        except KeyError as e:
            raise ValidationError(f"Payment is missing {e.args[0]!r}") from e


@dataclass(frozen=True)
class ReturnItem:
    """One product line of a return note"""

    product_name: str
    product_id: str
    batch_id: str
    pack_size: str
    expiry_date: date
    invoice_id: str
    order_id: str
    price: float
    returned_quantity: int
    total: float

    def __post_init__(self):
        _check_amount('price', self.price)
        _check_amount('total', self.total)
        if isinstance(self.returned_quantity, bool) or not isinstance(self.returned_quantity, int) \
                or self.returned_quantity < 0:
            raise ValidationError(f"returned_quantity must be a non-negative integer (got {self.returned_quantity!r})")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReturnItem':
        try:
            return cls(
                product_name=data['product_name'],
                product_id=data['product_id'],
                batch_id=data['batch_id'],
                pack_size=data['pack_size'],
                expiry_date=_parse_day(data['exp_date']),
                invoice_id=data['invoice_id'],
                order_id=data['order_id'],
                price=data['price'],
                returned_quantity=data['returned_quantity'],
                total=data['total'],
            )
        except KeyError as e:
            raise ValidationError(f"Return item is missing {e.args[0]!r}") from e


@dataclass(frozen=True)
class ProductReturn(Record):
    """Product return raised against a tax invoice"""

    TIME_FIELD = 'received_at'

    id: str
    return_id: str
    tax_invoice: str
    store_id: str
    created_by: str
    total: float
    received_at: datetime
    return_note_id: str
    status: str
    items: Tuple[ReturnItem, ...] = field(default=())

    def __post_init__(self):
        self._normalize_time(self.TIME_FIELD)
        _check_choice('status', self.status, APPROVAL_STATUSES)
        _check_amount('total', self.total)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], items: Iterable[ReturnItem] = ()) -> 'ProductReturn':
        try:
            return cls(
                id=data['id'],
                return_id=data['return_id'],
                tax_invoice=data['tax_invoice'],
                store_id=data['store_id'],
                created_by=data['created_by'],
                total=data['total'],
                received_at=parse_timestamp(data['received_date']),
                return_note_id=data['return_note_id'],
                status=data['status'],
                items=tuple(items),
            )
        except KeyError as e:
            raise ValidationError(f"Return is missing {e.args[0]!r}") from e


def ensure_unique_ids(records: Iterable[Record]) -> List[Record]:
    """
    Collection invariant: identifiers are unique

    Returns
    -------
    list
        The records, in their original order

    Raises
    ------
    ValidationError
        On the first duplicated identifier
    """
    seen = set()
    result = []
    for record in records:
        if record.record_id in seen:
            raise ValidationError(f"Duplicate record id: {record.record_id}")
        seen.add(record.record_id)
        result.append(record)
    return result
