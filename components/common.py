"""
Shared Page Helpers
===================
Record loading, error display and export triggers used by every page
"""

import logging
from typing import Any, Iterable, List, MutableMapping, Optional, Sequence

import streamlit as st
import streamlit.components.v1 as components

from data.record_source import RecordSource, create_record_source
from reports.errors import PortalError, ValidationError
from reports.export import Column, export_csv_bytes
from reports.filters import DateRange, validate_search_range
from reports.models import Record

logger = logging.getLogger(__name__)


def get_record_source() -> RecordSource:
    """Record source of the session"""
    if 'record_source' not in st.session_state:
        st.session_state.record_source = create_record_source()
    return st.session_state.record_source


def show_error(error: PortalError):
    """Report a recoverable error without stopping the session"""
    logger.info(f"[UI] {type(error).__name__}: {error}")
    st.error(f"**{error.title}**: {error}")


def load_records(kind: str, allowed_store_ids: Iterable[str]) -> Optional[List[Record]]:
    """
    Scoped records of one kind, or None after showing the error

    Parameters
    ----------
    kind : str
        FIELD_VISITS / PAYMENTS / RETURNS
    allowed_store_ids : Iterable[str]
        User's store allow-list
    """
    try:
        return get_record_source().fetch_records(kind, scope_filter=list(allowed_store_ids))
    except PortalError as e:
        show_error(e)
        return None


def submit_search(
    state: MutableMapping[str, Any],
    state_key: str,
    picked: Any,
    max_days: Optional[int] = None,
) -> DateRange:
    """
    Validate a search form range and keep it in the session state

    A rejected search clears the previously stored range so that the page
    never shows results of an older search next to the error.

    Raises
    ------
    ValidationError
        Missing endpoint, inverted range, or span over max_days
    """
    try:
        date_range = validate_search_range(DateRange.from_picker(picked), max_days=max_days)
    except ValidationError:
        state.pop(state_key, None)
        raise
    state[state_key] = date_range
    return date_range


def render_export_buttons(records: Sequence[Record], columns: Sequence[Column], file_name: str, key: str):
    """Export CSV (download) and Export PDF (browser print) buttons"""
    col1, col2 = st.columns(2)

    with col1:
        st.download_button(
            "📥 Export CSV",
            data=export_csv_bytes(records, columns),
            file_name=file_name,
            mime="text/csv",
            key=f"export_csv_{key}",
            use_container_width=True,
        )

    with col2:
        if st.button("🖨️ Export PDF", key=f"export_pdf_{key}", type="primary", use_container_width=True):
            trigger_print()


def trigger_print():
    """Open the browser print dialog (save as PDF)"""
    components.html("<script>window.parent.print();</script>", height=0)
