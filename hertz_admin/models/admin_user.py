"""
Admin User Model
"""

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from hertz_admin.extensions import db
from hertz_admin.utils import new_id, utcnow, isoformat


class AdminUser(UserMixin, db.Model):
    """Administrator account used to sign in to the panel"""
    __tablename__ = 'admin_users'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.Text, unique=True, nullable=False, index=True)
    password_hash = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method='pbkdf2:sha256')

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        """Serialize for the API (the password hash is never exposed)."""
        return {
            'id': self.id,
            'email': self.email,
            'createdAt': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<AdminUser {self.email}>'
