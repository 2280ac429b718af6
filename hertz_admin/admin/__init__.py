"""
Admin Blueprint

Login, logout and session lookup for panel administrators.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from hertz_admin.admin import routes  # noqa: E402, F401
