"""Dashboard Components"""
from components.field_visits import render_field_visits_page
from components.payments import render_payments_page
from components.returns import render_returns_page

__all__ = ['render_field_visits_page', 'render_payments_page', 'render_returns_page']
