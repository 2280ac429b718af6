"""
Stats Blueprint
"""

from flask import Blueprint

stats_bp = Blueprint('stats', __name__)

from hertz_admin.stats import routes  # noqa: E402, F401
