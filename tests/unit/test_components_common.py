"""
================================================================================
Medplus Franchisee Portal - Page Helper Unit Tests
================================================================================
Description:
    Unit tests for components.common.submit_search: the payments and
    returns search forms store a validated range in the session state and
    drop the previous range when a new search is rejected.
================================================================================
"""
from datetime import date

import pytest

from components.common import submit_search
from config import MAX_RETURN_SEARCH_DAYS
from reports.errors import ValidationError
from reports.filters import DateRange


class TestSubmitSearch:
    """Test suite for submit_search"""

    def test_valid_search_is_stored(self):
        state = {}

        result = submit_search(state, 'payments_range', (date(2024, 1, 1), date(2024, 1, 31)))

        assert result == DateRange(date(2024, 1, 1), date(2024, 1, 31))
        assert state['payments_range'] == result

    def test_incomplete_range_clears_previous_search(self):
        state = {'payments_range': DateRange(date(2024, 1, 1), date(2024, 1, 31))}

        with pytest.raises(ValidationError, match='Date range required'):
            submit_search(state, 'payments_range', (date(2024, 2, 1),))

        assert 'payments_range' not in state

    def test_range_over_limit_clears_previous_search(self):
        state = {'returns_range': DateRange(date(2024, 1, 1), date(2024, 1, 31))}

        with pytest.raises(ValidationError, match=f'{MAX_RETURN_SEARCH_DAYS} days'):
            submit_search(state, 'returns_range', (date(2024, 1, 1), date(2024, 6, 30)),
                          max_days=MAX_RETURN_SEARCH_DAYS)

        assert 'returns_range' not in state

    def test_other_keys_untouched(self):
        state = {'returns_range': DateRange(date(2024, 1, 1), date(2024, 1, 31))}

        with pytest.raises(ValidationError):
            submit_search(state, 'payments_range', ())

        assert 'returns_range' in state
