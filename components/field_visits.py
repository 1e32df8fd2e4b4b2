"""
Field Visit Reports Component
=============================
Field-visit table with non-compliance highlighting, detail drawer and export
"""

from typing import List

import streamlit as st

from config import ALL, EXPORT_FILENAMES
from components.common import load_records, render_export_buttons, show_error
from components.header import render_header
from data.record_source import FIELD_VISITS
from reports.compliance import is_low_rating, is_non_compliant
from reports.dates import format_timestamp
from reports.display import rating_badge
from reports.errors import AuthorizationError
from reports.export import FIELD_VISIT_COLUMNS
from reports.filters import authorize_store
from reports.models import RATING_FIELDS, FieldVisitReport

# Ratings shown in the table row; the drawer shows all of RATING_FIELDS
ROW_RATINGS = ('store_environment', 'staff_grooming', 'staff_quality')
COLUMN_WIDTHS = [1.2, 1.4, 1.6, 1.4, 2.4, 0.8]


def render_field_visits_page(allowed_store_ids: List[str]):
    """
    Field visit reports page

    Parameters
    ----------
    allowed_store_ids : List[str]
        User's store allow-list
    """
    st.markdown("## Field Visit Reports")

    scoped = load_records(FIELD_VISITS, allowed_store_ids)
    if scoped is None:
        return

    # ?store=S-1001 deep links must stay inside the allow-list
    requested_store = st.query_params.get("store", ALL)
    try:
        authorize_store(requested_store, allowed_store_ids)
    except AuthorizationError as e:
        show_error(e)
        return

    report_filter = render_header(scoped, key="visits", default_store=requested_store)
    filtered = report_filter.apply(scoped)

    render_export_buttons(filtered, FIELD_VISIT_COLUMNS, EXPORT_FILENAMES['field_visits'], key="visits")
    st.markdown("---")

    render_visit_table(filtered)


def render_visit_table(reports: List[FieldVisitReport]):
    """Visit rows; clicking Details toggles a single expanded row"""
    if 'expanded_visit_id' not in st.session_state:
        st.session_state.expanded_visit_id = None

    header_cols = st.columns(COLUMN_WIDTHS)
    headers = ['Date & Time', 'Employee', 'Store', 'Ratings', 'Comments', '']
    for col, header in zip(header_cols, headers):
        col.markdown(f"**{header}**")

    if not reports:
        st.info("No reports found for selected filters.")
        return

    for report in reports:
        flagged = is_non_compliant(report)
        expanded = st.session_state.expanded_visit_id == report.id

        cols = st.columns(COLUMN_WIDTHS)

        date_text = format_timestamp(report.visited_at)
        cols[0].markdown(f"🚩 {date_text}" if flagged else date_text)

        cols[1].markdown(f"**{report.employee_name}**  \n{report.employee_id}")
        cols[2].markdown(f"**{report.store_name}**  \n{report.store_id}")

        badges = [
            rating_badge(RATING_FIELDS[name], getattr(report, name).value, is_low_rating(getattr(report, name).value))
            for name in ROW_RATINGS
        ]
        cols[3].markdown("  \n".join(badges))

        comment = report.sop_deviations or report.other_observations
        cols[4].write(comment if comment else "-")

        if cols[5].button("▲" if expanded else "▼", key=f"visit_toggle_{report.id}", help="Details"):
            st.session_state.expanded_visit_id = None if expanded else report.id
            st.rerun()

        if expanded:
            render_visit_details(report)

        st.markdown("---")


def render_visit_details(report: FieldVisitReport):
    """Detail drawer of one visit"""
    with st.container(border=True):
        col1, col2, col3 = st.columns(3)

        with col1:
            st.markdown("**Details**")
            st.write(f"Local Head: {report.local_head_name}")
            st.write(f"Staff Present: {report.staff_present}")
            st.write(f"TO Replenishment: {report.to_replenishment}")
            st.write(f"Outstanding Payments: {report.outstanding_payments}")

        with col2:
            st.markdown("**Ratings & Remarks**")
            for name, rating in report.ratings().items():
                line = f"{RATING_FIELDS[name]}: {rating.value}"
                if rating.remarks:
                    line += f" ({rating.remarks})"
                st.write(line)

        with col3:
            st.markdown("**Comments**")
            st.write(f"SOP Deviations: {report.sop_deviations or '-'}")
            st.write(f"Other Observations: {report.other_observations or '-'}")
