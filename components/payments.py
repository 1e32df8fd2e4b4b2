"""
Payments Component
==================
Payment history search and the create-payment dialog
"""

from typing import List

import streamlit as st

from config import EXPORT_FILENAMES, PAYMENT_MODES, PAYMENT_TYPES
from components.common import load_records, render_export_buttons, show_error, submit_search
from data.record_source import PAYMENTS
from reports.dates import format_date
from reports.display import format_amount, status_badge
from reports.errors import ValidationError
from reports.export import PAYMENT_COLUMNS
from reports.filters import DateRange, filter_records
from reports.forms import empty_payment_form, validate_payment_request
from reports.models import Payment

COLUMN_WIDTHS = [1.2, 1.4, 1.0, 1.0, 0.9, 1.0, 1.0]


def render_payments_page(allowed_store_ids: List[str]):
    """Payments page"""
    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown("## Payments")
        st.caption("View payment history and submit new payments")
    with col2:
        if st.button("➕ Create Payment", type="primary", use_container_width=True):
            create_payment_dialog()

    if st.session_state.get('payment_submitted'):
        request = st.session_state.pop('payment_submitted')
        st.success(f"Payment submitted: {request.payment_name} ({format_amount(request.total_amount)}) "
                   f"has been submitted for approval")

    payments = load_records(PAYMENTS, allowed_store_ids)
    if payments is None:
        return

    st.markdown("### Search Payments")
    col1, col2 = st.columns([3, 1])
    with col1:
        picked = st.date_input("Date Range", value=(), format="YYYY-MM-DD", key="payments_date_range")
    with col2:
        st.write("")
        search = st.button("🔍 Search", key="payments_search", use_container_width=True)

    searched = False
    if search:
        try:
            submit_search(st.session_state, 'payments_range', picked)
            searched = True
        except ValidationError as e:
            show_error(e)

    date_range = st.session_state.get('payments_range', DateRange())
    shown = filter_records(payments, date_range)
    if searched:
        st.toast(f"Search completed: found {len(shown)} payments")

    st.markdown("### Payment History")
    render_export_buttons(shown, PAYMENT_COLUMNS, EXPORT_FILENAMES['payments'], key="payments")
    render_payment_table(shown)


def render_payment_table(payments: List[Payment]):
    header_cols = st.columns(COLUMN_WIDTHS)
    headers = ['Payment ID', 'Name', 'Created Date', 'Approved Date', 'Status', 'Amount', 'Mode of Payment']
    for col, header in zip(header_cols, headers):
        col.markdown(f"**{header}**")

    if not payments:
        st.info("No payments found for the selected dates.")
        return

    for payment in payments:
        cols = st.columns(COLUMN_WIDTHS)
        cols[0].markdown(f"**{payment.payment_id}**")
        cols[1].write(payment.name)
        cols[2].write(format_date(payment.created_at))
        cols[3].write(format_date(payment.approved_at) or "-")
        cols[4].markdown(status_badge(payment.status))
        cols[5].write(format_amount(payment.amount))
        cols[6].write(payment.mode_of_payment)


@st.dialog("Create Payment")
def create_payment_dialog():
    """Create payment modal dialog"""
    st.caption("Submit a new payment entry")
    form = empty_payment_form()

    form['payment_type'] = st.selectbox(
        "Payment Type *",
        options=[''] + list(PAYMENT_TYPES.keys()),
        format_func=lambda x: PAYMENT_TYPES.get(x, "Select payment type"),
    )
    form['payment_name'] = st.text_input("Payment Name *", placeholder="Enter payment name")

    col1, col2 = st.columns(2)
    col1.text_input("Customer ID", value=form['customer_id'], disabled=True)
    col2.text_input("Customer Name", value=form['customer_name'], disabled=True)

    form['total_amount'] = st.text_input("Total Amount *", placeholder="Enter amount")
    form['payment_mode'] = st.selectbox(
        "Payment Mode *",
        options=[''] + list(PAYMENT_MODES),
        format_func=lambda x: x or "Select payment mode",
    )
    form['remarks'] = st.text_area("Remarks", placeholder="Enter any additional remarks", height=80)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Submit Payment", type="primary", use_container_width=True):
            try:
                st.session_state.payment_submitted = validate_payment_request(form)
            except ValidationError as e:
                show_error(e)
            else:
                st.rerun()
    with col2:
        if st.button("Cancel", use_container_width=True):
            st.rerun()
