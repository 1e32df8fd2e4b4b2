"""
Authentication Module
=====================
streamlit-authenticator based login and per-user store allow-lists
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import streamlit as st
import streamlit_authenticator as stauth
import yaml

from config import STORES

logger = logging.getLogger(__name__)

AUTH_CONFIG_PATH = Path(__file__).parent / "auth_config.yaml"

# Pages each role may open
PAGE_ACCESS = {
    'admin': ('field_visits', 'payments', 'returns'),
    'franchisee': ('field_visits', 'payments', 'returns'),
    'field_officer': ('field_visits',),
}


def load_auth_config() -> Dict[str, Any]:
    """Load authentication settings"""
    with open(AUTH_CONFIG_PATH, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def get_authenticator() -> stauth.Authenticate:
    """Authenticator instance"""
    config = load_auth_config()

    authenticator = stauth.Authenticate(
        credentials=config['credentials'],
        cookie_name=config['cookie']['name'],
        cookie_key=config['cookie']['key'],
        cookie_expiry_days=config['cookie']['expiry_days'],
    )

    return authenticator


def _get_user(username: str) -> Dict[str, Any]:
    users = load_auth_config()['credentials']['usernames']
    return users.get(username) or {}


def get_user_role(username: str) -> str:
    """User role (admin / franchisee / field_officer)"""
    return _get_user(username).get('role', 'franchisee')


def get_user_stores(username: str) -> List[str]:
    """
    Store allow-list of a user

    Admins see every configured store. Unknown users see nothing.

    Parameters
    ----------
    username : str
        Login name

    Returns
    -------
    List[str]
        Store ids the user may view, in configuration order
    """
    user = _get_user(username)
    if not user:
        logger.warning(f"[Auth] unknown user {username!r}, empty store allow-list")
        return []

    if user.get('role') == 'admin':
        return list(STORES.keys())
    return [str(s) for s in user.get('stores', [])]


def is_admin(username: str) -> bool:
    """Admin check"""
    return get_user_role(username) == 'admin'


def check_page_access(username: str, page: str) -> bool:
    """
    Page access check

    Parameters
    ----------
    username : str
        Login name
    page : str
        'field_visits' / 'payments' / 'returns'

    Returns
    -------
    bool
        True if the user's role may open the page
    """
    return page in PAGE_ACCESS.get(get_user_role(username), ())


def init_session_state():
    """Initialise login keys of the session"""
    if 'authentication_status' not in st.session_state:
        st.session_state['authentication_status'] = None
    if 'username' not in st.session_state:
        st.session_state['username'] = None
    if 'name' not in st.session_state:
        st.session_state['name'] = None
