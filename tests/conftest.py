"""
================================================================================
Medplus Franchisee Portal - Test Configuration and Fixtures
================================================================================
Description:
    Shared pytest fixtures: sample field-visit reports, payments, returns
    and a mock record source.

Fixtures:
    - visit_rows / visit_reports: the two sample field visits (vr-1001, vr-1002)
    - payments / product_returns: records built from the mock fixtures
    - mock_source: MockRecordSource over the bundled fixtures
    - portal_utc: portal time zone forced to UTC
================================================================================
"""
import copy
import sys
from pathlib import Path

import pytest

# Add project root to path for all tests
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from data import mock_data  # noqa: E402
from data.record_source import MockRecordSource, PAYMENTS, RETURNS  # noqa: E402
from reports.models import FieldVisitReport  # noqa: E402


@pytest.fixture
def visit_rows():
    """Raw dicts of the two sample visits"""
    return copy.deepcopy(mock_data.MOCK_VISIT_REPORTS[:2])


@pytest.fixture
def visit_reports(visit_rows):
    """vr-1001 (2025-10-05, store env 2) and vr-1002 (2025-10-06, store env 5)"""
    return [FieldVisitReport.from_dict(row) for row in visit_rows]


@pytest.fixture
def mock_source():
    return MockRecordSource()


@pytest.fixture
def payments(mock_source):
    return mock_source.fetch_records(PAYMENTS)


@pytest.fixture
def product_returns(mock_source):
    return mock_source.fetch_records(RETURNS)


@pytest.fixture
def portal_utc(monkeypatch):
    """Calendar days taken in UTC"""
    import config
    monkeypatch.setattr(config, 'PORTAL_TIMEZONE', 'UTC')
    return 'UTC'
