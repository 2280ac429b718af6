"""
Flask Extensions

Shared extension instances, bound to the application in ``create_app``.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for admin authentication
login_manager = LoginManager()
