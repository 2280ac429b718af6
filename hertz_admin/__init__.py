"""
30HERTZ Admin Panel - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException

from hertz_admin.extensions import db, login_manager
from hertz_admin.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from hertz_admin.admin import admin_bp
    from hertz_admin.articles import articles_bp
    from hertz_admin.stats import stats_bp
    from hertz_admin.ads import ads_bp

    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(articles_bp, url_prefix='/api/articles')
    app.register_blueprint(stats_bp, url_prefix='/api/stats')
    app.register_blueprint(ads_bp, url_prefix='/api/ad-blocks')

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_admin(admin_id):
        from hertz_admin.storage import storage
        return storage.get_admin_by_id(admin_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Authentication required'}), 401

    _register_error_handlers(app)

    # Create database tables
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)
        db.create_all()
        _ensure_default_admin(app)

    return app


def _configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    package_logger = logging.getLogger('hertz_admin')
    package_logger.setLevel(level)
    if not logging.getLogger().handlers and not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s: %(message)s'))
        package_logger.addHandler(handler)


def _register_error_handlers(app):
    """Render every error as JSON for the admin client."""

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(IntegrityError)
    def handle_conflict(error):
        logger.info('Store constraint violation: %s', error.orig)
        return jsonify({'message': 'Record conflicts with an existing one'}), 409

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        logger.exception('Database error: %s', error)
        return jsonify({'message': 'Database error'}), 500


def _ensure_default_admin(app):
    """Create the bootstrap admin from ADMIN_EMAIL / ADMIN_PASSWORD if missing."""
    from hertz_admin.storage import storage

    email = app.config.get('ADMIN_EMAIL')
    password = app.config.get('ADMIN_PASSWORD')
    if not email or not password:
        return

    if storage.get_admin_by_email(email) is None:
        storage.create_admin({'email': email, 'password': password})
        logger.info('Created bootstrap admin %s', email)
