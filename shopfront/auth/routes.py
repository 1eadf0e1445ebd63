"""
Auth Routes

User authentication routes using Flask-Login.
"""

import logging
from flask import render_template, request, current_app
from flask_login import login_user, logout_user, current_user
from sqlalchemy.exc import SQLAlchemyError
from shopfront.auth import auth_bp
from shopfront.database import guard_connection
from shopfront.extensions import db
from shopfront.models import User

logger = logging.getLogger(__name__)


def get_or_create_user(email):
    """Return the user registered under ``email``, creating it on first login."""
    with guard_connection():
        user = User.query.filter_by(email=email).first()
        if user:
            return user
        
        user = User(email=email, name=current_app.config['DEFAULT_USER_NAME'])
        try:
            db.session.add(user)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
    logger.info('Created user %s', user.id)
    return user


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        
        if not email:
            return render_template('auth/login.html', error='Missing email'), 422
        
        user = get_or_create_user(email)
        login_user(user)
        logger.info('User %s logged in', user.id)
        return render_template('auth/logged_in.html', user=user)
    
    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """User logout route"""
    if current_user.is_authenticated:
        logger.info('User %s logged out', current_user.id)
    logout_user()
    return render_template('auth/logged_out.html')
