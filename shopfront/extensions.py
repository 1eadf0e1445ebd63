"""
Flask Extensions

Shared extension instances, bound to the application in the factory.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Session-based login for storefront users
login_manager = LoginManager()
