"""
Site Statistics Model
"""

from hertz_admin.extensions import db
from hertz_admin.utils import new_id, today_start, isoformat


class SiteStats(db.Model):
    """Daily site counters, one row per calendar day"""
    __tablename__ = 'site_stats'

    COUNTERS = ('visitors', 'pageviews', 'calculations')

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    date = db.Column(db.DateTime, default=today_start, unique=True, nullable=False)
    visitors = db.Column(db.Integer, default=0, nullable=False)
    pageviews = db.Column(db.Integer, default=0, nullable=False)
    calculations = db.Column(db.Integer, default=0, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'date': isoformat(self.date),
            'visitors': self.visitors,
            'pageviews': self.pageviews,
            'calculations': self.calculations,
        }

    def __repr__(self):
        return f'<SiteStats {self.date:%Y-%m-%d} visitors:{self.visitors}>'
