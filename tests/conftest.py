import pytest

from hertz_admin import create_app
from hertz_admin.config import TestConfig
from hertz_admin.extensions import db
from hertz_admin.storage import storage


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(app):
    return storage.create_admin({'email': 'admin@30hertz.ru', 'password': 'secret-pass'})


@pytest.fixture()
def admin_client(client, admin):
    r = client.post('/api/admin/login', json={'email': 'admin@30hertz.ru', 'password': 'secret-pass'})
    assert r.status_code == 200
    return client


@pytest.fixture()
def article_data():
    return {
        'title': 'Setup Guide',
        'slug': 'setup-guide',
        'excerpt': '...',
        'content': '...',
        'category': 'Установка',
        'published': False,
    }
