"""
Article Model
"""

from hertz_admin.extensions import db
from hertz_admin.utils import new_id, utcnow, isoformat


class Article(db.Model):
    """Article published on the marketing site"""
    __tablename__ = 'articles'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.Text, nullable=False)
    slug = db.Column(db.Text, unique=True, nullable=False, index=True)
    excerpt = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.Text)
    published = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'excerpt': self.excerpt,
            'content': self.content,
            'category': self.category,
            'imageUrl': self.image_url,
            'published': self.published,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Article {self.slug}>'
