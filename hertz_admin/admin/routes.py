"""
Admin Routes

Session-based administrator login backed by the admin_users table.
"""

import logging

from flask import jsonify
from flask_login import login_user, logout_user, current_user

from hertz_admin.admin import admin_bp
from hertz_admin.admin.decorators import admin_required
from hertz_admin.storage import storage
from hertz_admin.utils import json_payload, require_strings

logger = logging.getLogger(__name__)


@admin_bp.route('/login', methods=['POST'])
def admin_login():
    """Sign an administrator in with email and password."""
    payload = json_payload()
    require_strings(payload, ('email', 'password'))
    email = (payload.get('email') or '').strip()
    password = payload.get('password') or ''

    if not email or not password:
        return jsonify({'message': 'Email and password are required'}), 400

    admin = storage.get_admin_by_email(email)
    if admin is None or not admin.check_password(password):
        logger.warning('Failed admin login for %s', email)
        return jsonify({'message': 'Invalid credentials'}), 401

    login_user(admin)
    logger.info('Admin %s signed in', admin.email)
    return jsonify(admin.to_dict())


@admin_bp.route('/logout', methods=['POST'])
def admin_logout():
    logout_user()
    return jsonify({'message': 'Logged out'})


@admin_bp.route('/me')
@admin_required
def admin_me():
    """Return the signed-in administrator."""
    return jsonify(current_user.to_dict())
