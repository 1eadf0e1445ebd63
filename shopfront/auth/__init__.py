"""
Auth Blueprint

Demo session login: a visitor logs in with an email address only.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from shopfront.auth import routes  # noqa: E402, F401
