"""
CSV Export
==========
Column definitions and CSV serialization of report tables

Format
------
- first line: header labels joined by commas
- one line per record, every value double-quoted, quotes doubled
- missing values render as an empty string
- LF line separator, no trailing newline, UTF-8 when encoded
"""

import csv
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

import pandas as pd

from reports.dates import format_date, format_timestamp

logger = logging.getLogger(__name__)

LINE_TERMINATOR = '\n'
_HEADER_FORBIDDEN = (',', '"', '\n', '\r')


@dataclass(frozen=True)
class Column:
    """Header label and value extractor of one export column"""

    label: str
    extractor: Callable[[Any], Any]

    def __post_init__(self):
        # header labels are written unquoted
        if any(ch in self.label for ch in _HEADER_FORBIDDEN):
            raise ValueError(f"Column label may not contain commas, quotes or newlines: {self.label!r}")


def _cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_frame(records: Sequence[Any], columns: Sequence[Column]) -> pd.DataFrame:
    """Records as a DataFrame with one column per Column (raw values)"""
    rows = [[col.extractor(r) for col in columns] for r in records]
    return pd.DataFrame(rows, columns=[col.label for col in columns])


def export_csv(records: Sequence[Any], columns: Sequence[Column]) -> str:
    """
    Serialize records to CSV text

    Parameters
    ----------
    records : Sequence
        Records in the order they should appear (usually a filter result)
    columns : Sequence[Column]
        Ordered column definitions

    Returns
    -------
    str
        CSV document; row order equals input order
    """
    header = ','.join(col.label for col in columns)
    if not records:
        return header

    # object dtype keeps None as None instead of NaN
    rows = [[_cell(col.extractor(r)) for col in columns] for r in records]
    frame = pd.DataFrame(rows, columns=[col.label for col in columns], dtype=object)
    body = frame.to_csv(
        index=False,
        header=False,
        quoting=csv.QUOTE_ALL,
        lineterminator=LINE_TERMINATOR,
    )
    if body.endswith(LINE_TERMINATOR):
        body = body[:-len(LINE_TERMINATOR)]

    logger.debug(f"[Export] {len(records)} rows, {len(columns)} columns")
    return header + LINE_TERMINATOR + body


def export_csv_bytes(records: Sequence[Any], columns: Sequence[Column]) -> bytes:
    """UTF-8 payload for st.download_button"""
    return export_csv(records, columns).encode('utf-8')


def _rating(name: str) -> Callable[[Any], Any]:
    return lambda r: getattr(r, name).value


def _remarks(name: str) -> Callable[[Any], Any]:
    return lambda r: getattr(r, name).remarks


FIELD_VISIT_COLUMNS: List[Column] = [
    Column('Date & Time', lambda r: format_timestamp(r.visited_at)),
    Column('Employee Name', lambda r: r.employee_name),
    Column('Employee ID', lambda r: r.employee_id),
    Column('Store ID', lambda r: r.store_id),
    Column('Store Name', lambda r: r.store_name),
    Column('Local Head', lambda r: r.local_head_name),
    Column('Store Env', _rating('store_environment')),
    Column('Store Env Remarks', _remarks('store_environment')),
    Column('Staff Grooming', _rating('staff_grooming')),
    Column('Grooming Remarks', _remarks('staff_grooming')),
    Column('Staff Quality', _rating('staff_quality')),
    Column('Quality Remarks', _remarks('staff_quality')),
    Column('Staff Present', lambda r: r.staff_present),
    Column('Pvt Label Pharma', _rating('pvt_label_pharma')),
    Column('Pharma Remarks', _remarks('pvt_label_pharma')),
    Column('Pvt Label Non-Pharma', _rating('pvt_label_non_pharma')),
    Column('Non-Pharma Remarks', _remarks('pvt_label_non_pharma')),
    Column('TO Replenishment', lambda r: r.to_replenishment),
    Column('Outstanding Payments', lambda r: r.outstanding_payments),
    Column('SOP Deviations', lambda r: r.sop_deviations),
    Column('Other Observations', lambda r: r.other_observations),
]

PAYMENT_COLUMNS: List[Column] = [
    Column('Payment ID', lambda r: r.payment_id),
    Column('Name', lambda r: r.name),
    Column('Store ID', lambda r: r.store_id),
    Column('Created Date', lambda r: format_date(r.created_at)),
    Column('Approved Date', lambda r: format_date(r.approved_at)),
    Column('Status', lambda r: r.status),
    Column('Amount', lambda r: r.amount),
    Column('Mode of Payment', lambda r: r.mode_of_payment),
]

RETURN_COLUMNS: List[Column] = [
    Column('Return ID', lambda r: r.return_id),
    Column('Tax Invoice', lambda r: r.tax_invoice),
    Column('Store ID', lambda r: r.store_id),
    Column('Created By', lambda r: r.created_by),
    Column('Total', lambda r: r.total),
    Column('Received Date', lambda r: format_date(r.received_at)),
    Column('Return Note ID', lambda r: r.return_note_id),
    Column('Status', lambda r: r.status),
]

RETURN_ITEM_COLUMNS: List[Column] = [
    Column('Product Name', lambda i: i.product_name),
    Column('Product ID', lambda i: i.product_id),
    Column('Batch ID', lambda i: i.batch_id),
    Column('Pack Size', lambda i: i.pack_size),
    Column('Exp. Date', lambda i: format_date(i.expiry_date)),
    Column('Price', lambda i: i.price),
    Column('Qty', lambda i: i.returned_quantity),
    Column('Total', lambda i: i.total),
]
