"""
Ad Block Model
"""

from hertz_admin.extensions import db
from hertz_admin.utils import new_id, utcnow, isoformat


class AdBlock(db.Model):
    """Advertisement snippet placed at a named position on the site"""
    __tablename__ = 'ad_blocks'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    position = db.Column(db.Text, nullable=False)
    active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'content': self.content,
            'position': self.position,
            'active': self.active,
            'createdAt': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<AdBlock {self.name} @ {self.position}>'
