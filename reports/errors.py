"""
Portal Errors
=============
Recoverable errors reported to the user at the page boundary
"""


class PortalError(Exception):
    """Base class for errors shown to the user as a message"""

    title = "Error"


class ValidationError(PortalError):
    """Malformed or missing input (filter, search form, record fixture)"""

    title = "Invalid input"


class DataUnavailable(PortalError):
    """The record source could not be reached"""

    title = "Data unavailable"


class AuthorizationError(PortalError):
    """A store outside the user's allow-list was requested"""

    title = "Access denied"
