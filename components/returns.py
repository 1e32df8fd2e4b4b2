"""
Returns Component
=================
Product return search (max 90 days) and return details dialog
"""

from typing import List

import streamlit as st

from config import EXPORT_FILENAMES, MAX_RETURN_SEARCH_DAYS
from components.common import load_records, render_export_buttons, show_error, submit_search
from data.record_source import RETURNS
from reports.dates import format_date
from reports.display import format_amount, status_badge
from reports.errors import ValidationError
from reports.export import RETURN_COLUMNS, RETURN_ITEM_COLUMNS, to_frame
from reports.filters import DateRange, filter_records
from reports.models import ProductReturn

COLUMN_WIDTHS = [1.2, 1.2, 1.0, 0.9, 1.0, 0.9, 0.9, 0.6]


def render_returns_page(allowed_store_ids: List[str]):
    """Return details page"""
    st.markdown("## Return Details")
    st.caption("View and track your product returns")

    returns = load_records(RETURNS, allowed_store_ids)
    if returns is None:
        return

    st.markdown("### Search Returns")
    st.caption(f"Filter returns by date range (maximum {MAX_RETURN_SEARCH_DAYS} days)")
    col1, col2 = st.columns([3, 1])
    with col1:
        picked = st.date_input("Date Range", value=(), format="YYYY-MM-DD", key="returns_date_range")
    with col2:
        st.write("")
        search = st.button("🔍 Search", key="returns_search", use_container_width=True)

    searched = False
    if search:
        try:
            submit_search(st.session_state, 'returns_range', picked, max_days=MAX_RETURN_SEARCH_DAYS)
            searched = True
        except ValidationError as e:
            show_error(e)

    date_range = st.session_state.get('returns_range', DateRange())
    shown = filter_records(returns, date_range)
    if searched:
        st.toast(f"Search completed: found {len(shown)} returns")

    st.markdown("### Return History")
    render_export_buttons(shown, RETURN_COLUMNS, EXPORT_FILENAMES['returns'], key="returns")
    render_return_table(shown)


def render_return_table(returns: List[ProductReturn]):
    header_cols = st.columns(COLUMN_WIDTHS)
    headers = ['Return ID', 'Tax Invoice', 'Created By', 'Total', 'Received Date', 'Return Note ID', 'Status', '']
    for col, header in zip(header_cols, headers):
        col.markdown(f"**{header}**")

    if not returns:
        st.info("No returns found for the selected dates.")
        return

    for item in returns:
        cols = st.columns(COLUMN_WIDTHS)
        cols[0].markdown(f"**{item.return_id}**")
        cols[1].write(item.tax_invoice)
        cols[2].write(item.created_by)
        cols[3].write(format_amount(item.total))
        cols[4].write(format_date(item.received_at))
        cols[5].write(item.return_note_id)
        cols[6].markdown(status_badge(item.status))
        if cols[7].button("👁️", key=f"return_view_{item.id}", help="View Details"):
            return_details_dialog(item)


@st.dialog("Return Details", width="large")
def return_details_dialog(product_return: ProductReturn):
    """Item lines of one return"""
    st.caption(f"Return ID: {product_return.return_id} | Tax Invoice: {product_return.tax_invoice}")

    if not product_return.items:
        st.info("No items recorded for this return.")
        return

    df = to_frame(product_return.items, RETURN_ITEM_COLUMNS)
    df['Price'] = df['Price'].map(format_amount)
    df['Total'] = df['Total'].map(format_amount)
    st.dataframe(df, hide_index=True, use_container_width=True)
