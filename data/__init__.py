"""Dashboard Data Module"""
from data.record_source import (
    FIELD_VISITS,
    PAYMENTS,
    RETURNS,
    MockRecordSource,
    RecordSource,
    create_record_source,
)

__all__ = ['FIELD_VISITS', 'PAYMENTS', 'RETURNS', 'MockRecordSource', 'RecordSource', 'create_record_source']
