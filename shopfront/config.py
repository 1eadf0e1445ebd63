"""
Configuration settings for the Shopfront application
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration; a relative SQLite path lives in the app's instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///shopfront.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    
    # Application settings
    DEFAULT_USER_NAME = 'Demo User'
    PRODUCT_TITLE_MAX_LENGTH = 255
    PRODUCT_SKU_MAX_LENGTH = 100


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
