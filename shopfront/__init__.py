"""
Shopfront - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

from flask import Flask, render_template
from shopfront.extensions import db, login_manager
from shopfront.config import Config
from shopfront.errors import ConnectionFailure


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    
    Raises:
        ConnectionFailure: if the database cannot be reached at start-up
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    
    # Register blueprints
    from shopfront.auth import auth_bp
    from shopfront.home import home_bp
    from shopfront.products import products_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(home_bp)
    app.register_blueprint(products_bp)
    
    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from shopfront.database import guard_connection
        from shopfront.models import User
        with guard_connection():
            return db.session.get(User, int(user_id))
    
    @login_manager.unauthorized_handler
    def unauthorized():
        return render_template('errors/401.html'), 401
    
    @app.errorhandler(ConnectionFailure)
    def handle_connection_failure(error):
        app.logger.error('Database connection failed: %s', error, exc_info=error)
        return render_template('errors/503.html'), 503
    
    # Create database tables
    from shopfront.database import init_schema
    init_schema(app)
    
    return app
