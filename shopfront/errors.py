"""
Database error signal.
"""


class ConnectionFailure(Exception):
    """Raised when a database connection cannot be established.

    The original driver error, if any, is chained as ``__cause__``.
    """
