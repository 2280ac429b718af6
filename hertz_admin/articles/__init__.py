"""
Articles Blueprint
"""

from flask import Blueprint

articles_bp = Blueprint('articles', __name__)

from hertz_admin.articles import routes  # noqa: E402, F401
