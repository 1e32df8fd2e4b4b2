"""
Record Source
=============
Supplies the full record collection of a view session
- RecordSource: interface
- MockRecordSource: fixtures from data/mock_data.py
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional

import config
from data import mock_data
from reports.errors import DataUnavailable, ValidationError
from reports.filters import scope_records
from reports.models import (
    FieldVisitReport,
    Payment,
    ProductReturn,
    Record,
    ReturnItem,
    ensure_unique_ids,
)

logger = logging.getLogger(__name__)

FIELD_VISITS = 'field_visits'
PAYMENTS = 'payments'
RETURNS = 'returns'
RECORD_KINDS = (FIELD_VISITS, PAYMENTS, RETURNS)


class RecordSource(ABC):
    """Record source base class"""

    @abstractmethod
    def fetch_records(self, kind: str, scope_filter: Optional[Iterable[str]] = None) -> List[Record]:
        """
        Full collection of one record kind

        Parameters
        ----------
        kind : str
            FIELD_VISITS / PAYMENTS / RETURNS
        scope_filter : Iterable[str], optional
            Store allow-list; None returns every store

        Returns
        -------
        List[Record]
            Records in source order

        Raises
        ------
        DataUnavailable
            If the source cannot be reached
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Source reachable"""
        pass


class MockRecordSource(RecordSource):
    """Builds validated records from in-memory fixtures"""

    def __init__(
        self,
        visit_reports: Optional[List[Dict[str, Any]]] = None,
        payments: Optional[List[Dict[str, Any]]] = None,
        returns: Optional[List[Dict[str, Any]]] = None,
        return_items: Optional[List[Dict[str, Any]]] = None,
        available: bool = True,
    ):
        self._fixtures = {
            FIELD_VISITS: mock_data.MOCK_VISIT_REPORTS if visit_reports is None else visit_reports,
            PAYMENTS: mock_data.MOCK_PAYMENTS if payments is None else payments,
            RETURNS: mock_data.MOCK_RETURNS if returns is None else returns,
        }
        self._return_items = mock_data.MOCK_RETURN_ITEMS if return_items is None else return_items
        self._available = available

    def is_available(self) -> bool:
        return self._available

    def _build_returns(self, rows: List[Dict[str, Any]]) -> List[ProductReturn]:
        items_by_invoice: Dict[str, List[ReturnItem]] = {}
        for row in self._return_items:
            item = ReturnItem.from_dict(row)
            items_by_invoice.setdefault(item.invoice_id, []).append(item)

        return [
            ProductReturn.from_dict(row, items=items_by_invoice.get(row.get('tax_invoice'), []))
            for row in rows
        ]

    def fetch_records(self, kind: str, scope_filter: Optional[Iterable[str]] = None) -> List[Record]:
        if kind not in RECORD_KINDS:
            raise ValidationError(f"Unknown record kind: {kind}")
        if not self.is_available():
            logger.warning(f"[RecordSource] mock source unavailable ({kind})")
            raise DataUnavailable(f"Could not load {kind.replace('_', ' ')}. Please try again later.")

        rows = self._fixtures[kind]
        builders: Dict[str, Callable[[List[Dict[str, Any]]], List[Record]]] = {
            FIELD_VISITS: lambda rs: [FieldVisitReport.from_dict(r) for r in rs],
            PAYMENTS: lambda rs: [Payment.from_dict(r) for r in rs],
            RETURNS: self._build_returns,
        }

        try:
            records = ensure_unique_ids(builders[kind](rows))
        except ValidationError:
            logger.error(f"[RecordSource] invalid {kind} fixture", exc_info=True)
            raise

        if scope_filter is not None:
            records = scope_records(records, scope_filter)

        logger.debug(f"[RecordSource] {len(records)} {kind} loaded")
        return records


def create_record_source(name: Optional[str] = None) -> RecordSource:
    """Record source configured by config.RECORD_SOURCE"""
    name = name or config.RECORD_SOURCE
    if name == 'mock':
        return MockRecordSource()
    raise ValidationError(f"Unknown record source: {name}")
