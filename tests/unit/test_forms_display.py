"""
================================================================================
Medplus Franchisee Portal - Payment Form and Display Unit Tests
================================================================================
Description:
    Unit tests for reports.forms (create-payment validation) and
    reports.display (status badges, currency).
================================================================================
"""
import pytest

from reports.display import format_amount, rating_badge, status_badge, status_color
from reports.errors import ValidationError
from reports.forms import empty_payment_form, validate_payment_request


@pytest.fixture
def filled_form():
    form = empty_payment_form()
    form.update({
        'payment_type': 'monthly',
        'payment_name': ' October rent ',
        'total_amount': '30000',
        'payment_mode': 'NEFT',
    })
    return form


class TestValidatePaymentRequest:
    """Test suite for validate_payment_request"""

    def test_valid_form(self, filled_form):
        request = validate_payment_request(filled_form)

        assert request.payment_name == 'October rent'
        assert request.total_amount == 30000.0
        assert request.customer_id == 'CUST001'
        assert request.remarks is None

    @pytest.mark.parametrize('field', ['payment_type', 'payment_name', 'total_amount', 'payment_mode'])
    def test_missing_required_field(self, filled_form, field):
        filled_form[field] = ''

        with pytest.raises(ValidationError, match='Missing fields'):
            validate_payment_request(filled_form)

    def test_empty_form(self):
        with pytest.raises(ValidationError):
            validate_payment_request(empty_payment_form())

    @pytest.mark.parametrize('amount', ['abc', '0', '-10'])
    def test_bad_amount(self, filled_form, amount):
        filled_form['total_amount'] = amount

        with pytest.raises(ValidationError, match='amount'):
            validate_payment_request(filled_form)

    def test_unknown_mode(self, filled_form):
        filled_form['payment_mode'] = 'Barter'

        with pytest.raises(ValidationError, match='payment mode'):
            validate_payment_request(filled_form)


class TestDisplay:
    """Test suite for reports.display"""

    @pytest.mark.parametrize('status, color', [
        ('Approved', 'green'),
        ('PENDING', 'orange'),
        ('rejected', 'red'),
        ('On hold', 'gray'),
        (None, 'gray'),
    ])
    def test_status_color(self, status, color):
        assert status_color(status) == color

    def test_status_badge(self):
        assert status_badge('Approved') == ':green[Approved]'

    @pytest.mark.parametrize('amount, text', [
        (30000, '₹30,000'),
        (15000.0, '₹15,000'),
        (8250.5, '₹8,250.50'),
    ])
    def test_format_amount(self, amount, text):
        assert format_amount(amount) == text

    def test_rating_badge(self):
        assert rating_badge('Store Env', 2, True) == ':red[Store Env: 2]'
        assert rating_badge('Store Env', 5, False) == ':green[Store Env: 5]'
