"""Report filtering, compliance flags and CSV export"""
from reports.compliance import is_non_compliant, low_ratings
from reports.errors import AuthorizationError, DataUnavailable, PortalError, ValidationError
from reports.export import export_csv, export_csv_bytes
from reports.filters import (
    DateRange,
    ReportFilter,
    authorize_store,
    distinct_values,
    filter_records,
    scope_records,
    validate_search_range,
)

__all__ = [
    'is_non_compliant', 'low_ratings',
    'AuthorizationError', 'DataUnavailable', 'PortalError', 'ValidationError',
    'export_csv', 'export_csv_bytes',
    'DateRange', 'ReportFilter', 'authorize_store', 'distinct_values',
    'filter_records', 'scope_records', 'validate_search_range',
]
