"""
Dashboard Configuration
=======================
Medplus franchisee portal settings
"""

import logging
import os

# Store information
STORES = {
    'S-1001': 'Medplus Koramangala',
    'S-1002': 'Medplus Indiranagar',
    'S-1003': 'Medplus HSR Layout',
}

# Sentinel for "no constraint" in filter selectors
ALL = 'all'

# Rating scale used on field-visit reports
RATING_MIN = 1
RATING_MAX = 5

# Any covered rating at or below this marks a visit as non-compliant
NON_COMPLIANCE_THRESHOLD = 2

# Returns search may not span more than this many days
MAX_RETURN_SEARCH_DAYS = 90

# Closed value sets
TO_REPLENISHMENT_STATUSES = ('Completed', 'Pending')
YES_NO = ('Yes', 'No')
APPROVAL_STATUSES = ('Approved', 'Pending', 'Rejected')
PAYMENT_MODES = ('Cash', 'NEFT', 'RTGS', 'UPI', 'Cheque')
PAYMENT_TYPES = {
    'advance': 'Advance Payment',
    'monthly': 'Monthly Payment',
    'outstanding': 'Outstanding Payment',
}

# Fixed customer shown on the create-payment form
DEFAULT_CUSTOMER = {'id': 'CUST001', 'name': 'John Doe'}

# Export file names
EXPORT_FILENAMES = {
    'field_visits': 'field-visit-reports.csv',
    'payments': 'payments.csv',
    'returns': 'returns.csv',
}

# Calendar days for date-range filters are taken in this zone
PORTAL_TIMEZONE = os.getenv('PORTAL_TIMEZONE', 'Asia/Kolkata')

# Record source backend (only "mock" ships with the portal)
RECORD_SOURCE = os.getenv('PORTAL_RECORD_SOURCE', 'mock')

LOG_LEVEL = os.getenv('PORTAL_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging():
    """Configure the root logger once for the Streamlit process"""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(LOG_LEVEL)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(LOG_LEVEL)
