"""
Data Access Layer

CRUD operations over admin users, articles, daily site statistics and ad
blocks. The layer keeps no state of its own: every call goes through the
Flask-SQLAlchemy session and returns freshly loaded rows.

Lookups return None when nothing matches. Store errors (unique-key
conflicts, connectivity) are rolled back and re-raised unchanged.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from hertz_admin.extensions import db
from hertz_admin.models import AdminUser, Article, SiteStats, AdBlock
from hertz_admin.utils import to_snake_case, today_start, utcnow

logger = logging.getLogger(__name__)

ARTICLE_FIELDS = ('title', 'slug', 'excerpt', 'content', 'category', 'image_url', 'published')
AD_BLOCK_FIELDS = ('name', 'content', 'position', 'active')


def _pick(data, allowed):
    """Keep only writable columns, accepting camelCase keys from the client."""
    picked = {}
    for key, value in (data or {}).items():
        name = to_snake_case(key)
        if name in allowed:
            picked[name] = value
    return picked


def _counter(delta, name):
    value = int(delta.get(name) or 0)
    # counters only ever grow
    return max(value, 0)


class DatabaseStorage:
    """Storage backed by the application's SQLAlchemy database."""

    def _commit(self):
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise

    # ------------------------------------------------------------------
    # Admin users
    # ------------------------------------------------------------------

    def get_admin_by_email(self, email):
        return AdminUser.query.filter_by(email=email).first()

    def get_admin_by_id(self, admin_id):
        return db.session.get(AdminUser, admin_id)

    def create_admin(self, data):
        """Insert an admin account.

        ``data`` carries ``email`` plus either a ready ``password_hash`` or a
        plaintext ``password`` which is hashed before it reaches the store.
        A duplicate email raises ``IntegrityError``.
        """
        admin = AdminUser(email=data.get('email'))
        if data.get('password') is not None:
            admin.set_password(data['password'])
        else:
            admin.password_hash = data.get('password_hash') or data.get('passwordHash')
        db.session.add(admin)
        self._commit()
        logger.debug('Created admin %s', admin.email)
        return admin

    # ------------------------------------------------------------------
    # Articles
    # ------------------------------------------------------------------

    def get_all_articles(self, published=None):
        query = Article.query
        if published is not None:
            query = query.filter_by(published=published)
        return query.order_by(Article.created_at.desc()).all()

    def count_articles(self, published=None):
        query = Article.query
        if published is not None:
            query = query.filter_by(published=published)
        return query.count()

    def get_article_by_id(self, article_id):
        return db.session.get(Article, article_id)

    def get_article_by_slug(self, slug):
        return Article.query.filter_by(slug=slug).first()

    def create_article(self, data):
        """Insert an article. The slug must already be set by the caller."""
        fields = _pick(data, ARTICLE_FIELDS)
        now = utcnow()
        article = Article(created_at=now, updated_at=now, **fields)
        db.session.add(article)
        self._commit()
        logger.debug('Created article %s (%s)', article.id, article.slug)
        return article

    def update_article(self, article_id, data):
        """Merge the given fields into an article and refresh ``updated_at``.

        Returns None when no article has that id.
        """
        article = db.session.get(Article, article_id)
        if article is None:
            return None
        for name, value in _pick(data, ARTICLE_FIELDS).items():
            setattr(article, name, value)
        article.updated_at = utcnow()
        self._commit()
        logger.debug('Updated article %s', article_id)
        return article

    def delete_article(self, article_id):
        Article.query.filter_by(id=article_id).delete(synchronize_session=False)
        self._commit()
        logger.debug('Deleted article %s', article_id)

    def get_latest_articles(self, limit):
        return Article.query.filter_by(published=True)\
            .order_by(Article.created_at.desc())\
            .limit(max(int(limit), 0)).all()

    # ------------------------------------------------------------------
    # Site statistics
    # ------------------------------------------------------------------

    def get_today_stats(self):
        return SiteStats.query.filter_by(date=today_start()).first()

    def update_stats(self, delta):
        """Add ``delta`` to today's counters, creating the row if needed.

        Increments are applied with a single arithmetic UPDATE so concurrent
        callers cannot overwrite each other. When today's row does not exist
        yet it is inserted; if a concurrent caller inserted it first, the
        unique date constraint rejects ours and the UPDATE is applied instead.
        """
        today = today_start()
        increments = {name: _counter(delta or {}, name) for name in SiteStats.COUNTERS}

        if not self._increment(today, increments):
            db.session.add(SiteStats(date=today, **increments))
            try:
                db.session.commit()
            except IntegrityError:
                db.session.rollback()
                logger.debug('Stats row for %s created concurrently, retrying as update', today.date())
                self._increment(today, increments)
            except SQLAlchemyError:
                db.session.rollback()
                raise

        return SiteStats.query.filter_by(date=today).first()

    def _increment(self, day, increments):
        values = {
            getattr(SiteStats, name): getattr(SiteStats, name) + amount
            for name, amount in increments.items()
        }
        updated = SiteStats.query.filter_by(date=day)\
            .update(values, synchronize_session=False)
        self._commit()
        return updated > 0

    # ------------------------------------------------------------------
    # Ad blocks
    # ------------------------------------------------------------------

    def get_ad_blocks(self, active=None):
        query = AdBlock.query
        if active is not None:
            query = query.filter_by(active=active)
        return query.order_by(AdBlock.created_at.desc()).all()

    def get_ad_block_by_id(self, ad_block_id):
        return db.session.get(AdBlock, ad_block_id)

    def create_ad_block(self, data):
        ad_block = AdBlock(**_pick(data, AD_BLOCK_FIELDS))
        db.session.add(ad_block)
        self._commit()
        logger.debug('Created ad block %s', ad_block.id)
        return ad_block

    def update_ad_block(self, ad_block_id, data):
        ad_block = db.session.get(AdBlock, ad_block_id)
        if ad_block is None:
            return None
        for name, value in _pick(data, AD_BLOCK_FIELDS).items():
            setattr(ad_block, name, value)
        self._commit()
        logger.debug('Updated ad block %s', ad_block_id)
        return ad_block

    def delete_ad_block(self, ad_block_id):
        AdBlock.query.filter_by(id=ad_block_id).delete(synchronize_session=False)
        self._commit()
        logger.debug('Deleted ad block %s', ad_block_id)


storage = DatabaseStorage()
