"""
Admin Decorator
"""

from functools import wraps
from flask_login import current_user

from hertz_admin.extensions import login_manager


def admin_required(f):
    """Decorator to ensure the request comes from a signed-in administrator.

    Anonymous requests are handed to the login manager's unauthorized
    handler, which answers with a 401 JSON body so the admin client can show
    its login form.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        return f(*args, **kwargs)
    return wrapper
