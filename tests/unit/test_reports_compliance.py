"""
================================================================================
Medplus Franchisee Portal - Compliance Flag Unit Tests
================================================================================
Description:
    Unit tests for the non-compliance flag of field-visit reports
    (any covered rating at or below 2).
================================================================================
"""
import dataclasses

import pytest

from reports.compliance import is_non_compliant, low_ratings
from reports.models import RATING_FIELDS, Rating


class TestIsNonCompliant:
    """Test suite for is_non_compliant"""

    def test_sample_visit_with_low_store_environment(self, visit_reports):
        """vr-1001 has storeEnvironment=2"""
        assert is_non_compliant(visit_reports[0]) is True

    def test_sample_visit_all_good(self, visit_reports):
        """vr-1002 has no rating at or below 2"""
        assert is_non_compliant(visit_reports[1]) is False

    @pytest.mark.parametrize('name', list(RATING_FIELDS))
    def test_each_covered_rating_triggers_flag(self, visit_reports, name):
        report = dataclasses.replace(visit_reports[1], **{name: Rating(2)})

        assert is_non_compliant(report) is True

    def test_threshold_is_inclusive(self, visit_reports):
        at_three = dataclasses.replace(visit_reports[1], staff_quality=Rating(3))
        at_one = dataclasses.replace(visit_reports[1], staff_quality=Rating(1))

        assert is_non_compliant(at_three) is False
        assert is_non_compliant(at_one) is True

    @pytest.mark.parametrize('name', list(RATING_FIELDS))
    @pytest.mark.parametrize('value', [1, 2])
    def test_lowering_a_rating_never_clears_flag(self, visit_reports, name, value):
        """Monotonic: a flagged report stays flagged when another rating drops"""
        flagged = visit_reports[0]
        lowered = dataclasses.replace(flagged, **{name: Rating(value)})

        assert is_non_compliant(flagged) is True
        assert is_non_compliant(lowered) is True

    def test_staff_present_is_not_a_rating(self, visit_reports):
        report = dataclasses.replace(visit_reports[1], staff_present=0)

        assert is_non_compliant(report) is False


class TestLowRatings:
    """Test suite for low_ratings"""

    def test_names_of_low_ratings(self, visit_reports):
        assert low_ratings(visit_reports[0]) == ['store_environment', 'pvt_label_pharma']

    def test_no_low_ratings(self, visit_reports):
        assert low_ratings(visit_reports[1]) == []
