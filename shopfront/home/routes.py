"""
Home Routes

Landing page and dashboard. Both render the same page; the dashboard
requires a logged-in user.
"""

from flask_login import login_required, current_user
from shopfront.home import home_bp
from shopfront.views import render_home


@home_bp.route('/')
def index():
    """Home page for visitors and users alike"""
    return render_home(current_user)


@home_bp.route('/dashboard')
@login_required
def dashboard():
    """Dashboard for the logged-in user"""
    return render_home(current_user)
