"""
Header Component
================
Filter bar of the field-visit reports page (date range, store, employee)
"""

from typing import List

import streamlit as st

from config import ALL, STORES
from reports.filters import DateRange, ReportFilter, distinct_values
from reports.models import Record


def render_header(scoped: List[Record], key: str = "visits", default_store: str = ALL) -> ReportFilter:
    """
    Filter bar rendering

    Choice lists only contain values of the scoped records.

    Parameters
    ----------
    scoped : List[Record]
        Records already restricted to the user's stores
    key : str
        Widget key prefix
    default_store : str
        Preselected store (already authorized)

    Returns
    -------
    ReportFilter
        Current selections
        {
            'date_range': DateRange,
            'predicates': {'store_id': str, 'employee_name': str},
        }
    """
    stores = distinct_values(scoped, lambda r: (r.store_id, r.store_name))
    store_names = {store_id: name for store_id, name in stores}
    employees = distinct_values(scoped, 'employee_name')

    st.markdown("🔎 **Filters**")
    col1, col2, col3 = st.columns([2, 1, 1])

    with col1:
        picked = st.date_input(
            "Date range",
            value=(),
            format="YYYY-MM-DD",
            key=f"{key}_date_range",
            help="Pick a start and end date",
        )

    store_options = [ALL] + list(store_names.keys())

    with col2:
        store_id = st.selectbox(
            "Store",
            options=store_options,
            format_func=lambda x: "All Stores" if x == ALL else f"{x} - {store_names.get(x, STORES.get(x, x))}",
            index=store_options.index(default_store) if default_store in store_options else 0,
            key=f"{key}_store",
        )

    with col3:
        employee = st.selectbox(
            "Employee",
            options=[ALL] + employees,
            format_func=lambda x: "All Employees" if x == ALL else x,
            index=0,
            key=f"{key}_employee",
        )

    return ReportFilter(
        date_range=DateRange.from_picker(picked),
        predicates={'store_id': store_id, 'employee_name': employee},
    )
