"""
Medplus Franchisee Portal - main entry point
============================================
Field-visit reports, payments and product returns of a franchisee

Run:
    streamlit run app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# Add the project directory to the import path
sys.path.insert(0, str(Path(__file__).parent))

from auth import check_page_access, get_authenticator, get_user_stores, init_session_state
from config import setup_logging

logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Medplus Franchisee Portal",
    page_icon="💊",
    layout="wide",
    initial_sidebar_state="expanded"
)

PAGES = {
    'field_visits': "📋 Field Visit Reports",
    'payments': "💳 Payments",
    'returns': "📦 Returns",
}


def login_page():
    """Login page"""
    st.title("💊 Medplus Franchisee Portal")
    st.markdown("---")

    authenticator = get_authenticator()

    try:
        authenticator.login(location='main')
    except Exception as e:
        logger.exception("[Auth] login widget failed")
        st.error(f"Login error: {e}")

    if st.session_state.get('authentication_status') is False:
        st.error("Username or password is incorrect.")
    elif st.session_state.get('authentication_status') is None:
        st.info("Please log in.")


def main():
    """Main"""
    setup_logging()
    init_session_state()

    # Not logged in
    if not st.session_state.get('authentication_status'):
        login_page()
        return

    username = st.session_state.get('username')
    name = st.session_state.get('name')
    allowed_store_ids = get_user_stores(username)
    pages = [page for page in PAGES if check_page_access(username, page)]

    # Sidebar
    with st.sidebar:
        st.write(f"**{name}**")
        st.caption(f"Stores: {', '.join(allowed_store_ids) or '-'}")
        authenticator = get_authenticator()
        authenticator.logout("Logout", "sidebar")

        st.markdown("---")
        page = st.radio("Menu", options=pages, format_func=lambda p: PAGES[p])

    if not pages:
        st.warning("Your role has no portal pages. Please contact your administrator.")
        return

    if not allowed_store_ids:
        st.warning("No stores are assigned to your account. Please contact your administrator.")
        return

    from components import render_field_visits_page, render_payments_page, render_returns_page

    if page == 'payments':
        render_payments_page(allowed_store_ids)
    elif page == 'returns':
        render_returns_page(allowed_store_ids)
    else:
        render_field_visits_page(allowed_store_ids)


if __name__ == "__main__":
    main()
