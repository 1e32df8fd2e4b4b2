"""Table display helpers (badge colours, currency)"""

from typing import Optional, Union

STATUS_COLORS = {
    'approved': 'green',
    'pending': 'orange',
    'rejected': 'red',
}
DEFAULT_STATUS_COLOR = 'gray'


def status_color(status: Optional[str]) -> str:
    """Badge colour of an approval status (case-insensitive)"""
    return STATUS_COLORS.get((status or '').lower(), DEFAULT_STATUS_COLOR)


def status_badge(status: str) -> str:
    """Streamlit colored-text markdown for a status"""
    return f":{status_color(status)}[{status}]"


def format_amount(amount: Union[int, float]) -> str:
    """₹ with thousands separators (30000 -> ₹30,000)"""
    if float(amount).is_integer():
        return f"₹{int(amount):,}"
    return f"₹{amount:,.2f}"


def rating_badge(label: str, value: int, low: bool) -> str:
    color = 'red' if low else 'green'
    return f":{color}[{label}: {value}]"
