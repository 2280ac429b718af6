"""
Ad Blocks Blueprint
"""

from flask import Blueprint

ads_bp = Blueprint('ads', __name__)

from hertz_admin.ads import routes  # noqa: E402, F401
