"""
Payment Form
============
Validation of the create-payment form. Submissions are acknowledged only.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from config import DEFAULT_CUSTOMER, PAYMENT_MODES, PAYMENT_TYPES
from reports.errors import ValidationError

REQUIRED_FIELDS = ('payment_type', 'payment_name', 'total_amount', 'payment_mode')


@dataclass(frozen=True)
class PaymentRequest:
    payment_type: str
    payment_name: str
    customer_id: str
    customer_name: str
    total_amount: float
    payment_mode: str
    remarks: Optional[str] = None


def empty_payment_form() -> Dict[str, Any]:
    """Initial form state (customer fields are fixed)"""
    return {
        'payment_type': '',
        'payment_name': '',
        'customer_id': DEFAULT_CUSTOMER['id'],
        'customer_name': DEFAULT_CUSTOMER['name'],
        'total_amount': '',
        'remarks': '',
        'payment_mode': '',
    }


def validate_payment_request(form: Dict[str, Any]) -> PaymentRequest:
    """
    Validate create-payment form values

    Parameters
    ----------
    form : dict
        Raw form state (see empty_payment_form)

    Returns
    -------
    PaymentRequest

    Raises
    ------
    ValidationError
        Missing required fields, unknown type/mode, or a non-positive amount
    """
    missing = [name for name in REQUIRED_FIELDS if not str(form.get(name) or '').strip()]
    if missing:
        raise ValidationError(f"Missing fields: please fill in {', '.join(missing)}")

    if form['payment_type'] not in PAYMENT_TYPES:
        raise ValidationError(f"Unknown payment type: {form['payment_type']}")
    if form['payment_mode'] not in PAYMENT_MODES:
        raise ValidationError(f"Unknown payment mode: {form['payment_mode']}")

    try:
        amount = float(form['total_amount'])
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Total amount must be a number (got {form['total_amount']!r})") from e
    if amount <= 0:
        raise ValidationError("Total amount must be greater than zero")

    return PaymentRequest(
        payment_type=form['payment_type'],
        payment_name=str(form['payment_name']).strip(),
        customer_id=form.get('customer_id') or DEFAULT_CUSTOMER['id'],
        customer_name=form.get('customer_name') or DEFAULT_CUSTOMER['name'],
        total_amount=amount,
        payment_mode=form['payment_mode'],
        remarks=(form.get('remarks') or '').strip() or None,
    )
