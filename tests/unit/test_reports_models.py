"""
================================================================================
Medplus Franchisee Portal - Record Model Unit Tests
================================================================================
Description:
    Unit tests for reports.models and reports.dates: fixture parsing,
    closed value sets, rating range, id uniqueness and immutability.
================================================================================
"""
import dataclasses
from datetime import date, datetime, timezone

import pytest

from reports.dates import format_date, format_timestamp, parse_timestamp, portal_zone
from reports.errors import ValidationError
from reports.filters import DateRange, filter_records
from reports.models import FieldVisitReport, Payment, Rating, ensure_unique_ids


class TestRating:
    """Test suite for Rating"""

    @pytest.mark.parametrize('value', [1, 3, 5])
    def test_valid_values(self, value):
        assert Rating(value).value == value

    @pytest.mark.parametrize('value', [0, 6, -1, 2.5, '3', True])
    def test_invalid_values(self, value):
        with pytest.raises(ValidationError):
            Rating(value)

    def test_empty_remarks_become_none(self):
        assert Rating.from_dict({'value': 4, 'remarks': ''}).remarks is None


class TestFieldVisitReport:
    """Test suite for FieldVisitReport"""

    def test_from_dict(self, visit_reports):
        report = visit_reports[0]

        assert report.record_id == 'vr-1001'
        assert report.timestamp == datetime(2025, 10, 5, 10, 30, tzinfo=timezone.utc)
        assert report.store_environment == Rating(2, 'Dust near billing counter')
        assert report.staff_grooming.remarks is None

    def test_empty_narrative_is_none(self, visit_reports):
        assert visit_reports[1].sop_deviations is None

    def test_records_are_immutable(self, visit_reports):
        with pytest.raises(dataclasses.FrozenInstanceError):
            visit_reports[0].store_id = 'S-9999'

    def test_unknown_status_rejected(self, visit_rows):
        row = dict(visit_rows[0], to_replenishment='Done')

        with pytest.raises(ValidationError, match='to_replenishment'):
            FieldVisitReport.from_dict(row)

    def test_out_of_range_rating_rejected(self, visit_rows):
        row = dict(visit_rows[0], staff_quality={'value': 7})

        with pytest.raises(ValidationError):
            FieldVisitReport.from_dict(row)

    def test_missing_field_rejected(self, visit_rows):
        row = dict(visit_rows[0])
        del row['store_id']

        with pytest.raises(ValidationError, match='store_id'):
            FieldVisitReport.from_dict(row)

    def test_unparseable_timestamp_rejected(self, visit_rows):
        row = dict(visit_rows[0], datetime='yesterday')

        with pytest.raises(ValidationError, match='Invalid timestamp'):
            FieldVisitReport.from_dict(row)


class TestTimestampOnConstruction:
    """Records built directly validate and normalise their timestamp"""

    def test_unparseable_string_rejected(self, visit_reports):
        with pytest.raises(ValidationError, match='Invalid timestamp'):
            dataclasses.replace(visit_reports[1], visited_at='not-a-date')

    def test_missing_timestamp_rejected(self, visit_reports):
        with pytest.raises(ValidationError):
            dataclasses.replace(visit_reports[1], visited_at=None)

    def test_naive_datetime_gets_portal_zone(self, visit_reports, portal_utc):
        report = dataclasses.replace(visit_reports[1], visited_at=datetime(2025, 10, 6, 14, 10))

        assert report.visited_at.tzinfo is not None
        assert report.visited_at == datetime(2025, 10, 6, 14, 10, tzinfo=timezone.utc)

    def test_iso_string_is_parsed(self, visit_reports):
        report = dataclasses.replace(visit_reports[1], visited_at='2025-10-06T14:10:00Z')

        assert report.timestamp == datetime(2025, 10, 6, 14, 10, tzinfo=timezone.utc)

    def test_direct_record_can_be_filtered(self, visit_reports, portal_utc):
        report = dataclasses.replace(visit_reports[1], visited_at=datetime(2025, 10, 6, 14, 10))

        result = filter_records([visit_reports[0], report], DateRange(date(2025, 10, 6), date(2025, 10, 6)))

        assert result == [report]

    def test_payment_approved_date_validated(self, payments):
        with pytest.raises(ValidationError):
            dataclasses.replace(payments[0], approved_at='soon')

    def test_payment_approved_date_may_be_none(self, payments):
        assert dataclasses.replace(payments[0], approved_at=None).approved_at is None

    def test_return_received_date_validated(self, product_returns):
        with pytest.raises(ValidationError):
            dataclasses.replace(product_returns[0], received_at=20240115)


class TestPayment:
    """Test suite for Payment"""

    def test_optional_approved_date(self, payments):
        assert payments[0].approved_at is not None
        assert payments[1].approved_at is None

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError, match='mode_of_payment'):
            Payment.from_dict({
                'id': '9', 'payment_id': 'PAY-9', 'name': 'x', 'store_id': 'S-1001',
                'created_date': '2024-01-01', 'status': 'Approved', 'amount': 1,
                'mode_of_payment': 'Bitcoin',
            })

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match='amount'):
            Payment.from_dict({
                'id': '9', 'payment_id': 'PAY-9', 'name': 'x', 'store_id': 'S-1001',
                'created_date': '2024-01-01', 'status': 'Approved', 'amount': -5,
                'mode_of_payment': 'UPI',
            })


class TestProductReturn:
    """Test suite for ProductReturn"""

    def test_items_attached_by_invoice(self, product_returns):
        first, second = product_returns

        assert [i.product_id for i in first.items] == ['PROD-001', 'PROD-002']
        assert sum(i.total for i in first.items) == first.total
        assert [i.product_id for i in second.items] == ['PROD-014']

    def test_expiry_is_a_date(self, product_returns):
        assert product_returns[0].items[0].expiry_date == date(2025, 12, 31)


class TestUniqueIds:
    """Collection invariant"""

    def test_duplicate_ids_rejected(self, visit_reports):
        with pytest.raises(ValidationError, match='vr-1001'):
            ensure_unique_ids([visit_reports[0], visit_reports[1], visit_reports[0]])

    def test_order_kept(self, visit_reports):
        assert ensure_unique_ids(reversed(visit_reports)) == [visit_reports[1], visit_reports[0]]


class TestDates:
    """Test suite for reports.dates"""

    def test_z_suffix(self):
        assert parse_timestamp('2025-10-05T10:30:00Z') == datetime(2025, 10, 5, 10, 30, tzinfo=timezone.utc)

    def test_date_only_is_midnight_in_portal_zone(self, portal_utc):
        assert parse_timestamp('2024-01-15') == datetime(2024, 1, 15, tzinfo=portal_zone())

    def test_date_object(self, portal_utc):
        assert parse_timestamp(date(2024, 1, 15)).hour == 0

    @pytest.mark.parametrize('value', ['', None, 'not a date', '2024-13-01'])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            parse_timestamp(value)

    def test_unknown_zone(self):
        with pytest.raises(ValidationError):
            portal_zone('Mars/Olympus_Mons')

    def test_format_timestamp_uses_portal_zone(self, portal_utc):
        assert format_timestamp(parse_timestamp('2025-10-05T10:30:00Z')) == '2025-10-05 10:30'

    def test_format_date_none(self):
        assert format_date(None) == ''
