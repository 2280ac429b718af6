"""
Configuration settings for the 30HERTZ admin panel
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'hertz_admin.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Content settings
    LATEST_ARTICLES_LIMIT = int(os.environ.get('LATEST_ARTICLES_LIMIT') or 10)
    LATEST_ARTICLES_MAX = 50

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Bootstrap admin account, created at startup when both are set
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_EMAIL = None
    ADMIN_PASSWORD = None
    LOG_LEVEL = 'DEBUG'
