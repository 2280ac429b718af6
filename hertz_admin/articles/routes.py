"""
Article Routes

Article CRUD for the admin panel plus the public read endpoints used by the
marketing site.
"""

import logging

from flask import request, jsonify, abort, current_app
from flask_login import current_user

from hertz_admin.articles import articles_bp
from hertz_admin.admin.decorators import admin_required
from hertz_admin.services import unique_slug
from hertz_admin.storage import storage
from hertz_admin.utils import json_payload, parse_bool, require_strings

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'excerpt', 'content', 'category')


def _flag_arg(name):
    try:
        return parse_bool(request.args.get(name))
    except ValueError:
        abort(400, description=f'Query parameter "{name}" must be true or false.')


def _clean(payload):
    """Strip string fields and turn an empty image URL into None."""
    data = dict(payload)
    require_strings(data, REQUIRED_FIELDS + ('imageUrl', 'image_url'))
    for key in REQUIRED_FIELDS:
        if isinstance(data.get(key), str):
            data[key] = data[key].strip()
    for key in ('imageUrl', 'image_url'):
        if key in data and not data[key]:
            data[key] = None
    if 'published' in data and not isinstance(data['published'], bool):
        abort(400, description='"published" must be a boolean.')
    return data


@articles_bp.route('', methods=['GET'])
@admin_required
def list_articles():
    """All articles, newest first, optionally filtered by ?published=."""
    articles = storage.get_all_articles(_flag_arg('published'))
    return jsonify([a.to_dict() for a in articles])


@articles_bp.route('/latest', methods=['GET'])
def latest_articles():
    """Latest published articles for the public site."""
    default = current_app.config['LATEST_ARTICLES_LIMIT']
    limit = request.args.get('limit', default=default, type=int)
    limit = min(max(limit, 0), current_app.config['LATEST_ARTICLES_MAX'])
    return jsonify([a.to_dict() for a in storage.get_latest_articles(limit)])


@articles_bp.route('/slug/<slug>', methods=['GET'])
def get_article_by_slug(slug):
    article = storage.get_article_by_slug(slug)
    # drafts are only visible to administrators
    if article is None or (not article.published and not current_user.is_authenticated):
        abort(404, description='Article not found.')
    return jsonify(article.to_dict())


@articles_bp.route('/<article_id>', methods=['GET'])
@admin_required
def get_article(article_id):
    article = storage.get_article_by_id(article_id)
    if article is None:
        abort(404, description='Article not found.')
    return jsonify(article.to_dict())


@articles_bp.route('', methods=['POST'])
@admin_required
def create_article():
    """Create an article; the slug is derived from the title."""
    data = _clean(json_payload())

    missing = [f for f in REQUIRED_FIELDS if not data.get(f)]
    if missing:
        return jsonify({'message': 'Missing required fields', 'fields': missing}), 400

    data['slug'] = unique_slug(
        data['title'], lambda s: storage.get_article_by_slug(s) is not None)
    article = storage.create_article(data)
    logger.info('Article "%s" created by %s', article.slug, current_user.email)
    return jsonify(article.to_dict()), 201


@articles_bp.route('/<article_id>', methods=['PATCH', 'PUT'])
@admin_required
def update_article(article_id):
    data = _clean(json_payload())
    data.pop('slug', None)

    blank = [f for f in REQUIRED_FIELDS if f in data and not data[f]]
    if blank:
        return jsonify({'message': 'Fields cannot be empty', 'fields': blank}), 400

    article = storage.update_article(article_id, data)
    if article is None:
        abort(404, description='Article not found.')
    return jsonify(article.to_dict())


@articles_bp.route('/<article_id>', methods=['DELETE'])
@admin_required
def delete_article(article_id):
    storage.delete_article(article_id)
    return '', 204
