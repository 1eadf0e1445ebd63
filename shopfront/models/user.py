"""
User Model
"""

from datetime import datetime, timezone
from flask_login import UserMixin
from shopfront.extensions import db


class User(UserMixin, db.Model):
    """User model for session authentication"""
    __tablename__ = 'users'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    
    def __repr__(self):
        return f'<User {self.email}>'
