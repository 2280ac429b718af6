from hertz_admin import create_app
from hertz_admin.config import TestConfig
from hertz_admin.storage import storage


class BootstrapConfig(TestConfig):
    ADMIN_EMAIL = 'owner@30hertz.ru'
    ADMIN_PASSWORD = 'bootstrap-pass'


def test_bootstrap_admin_created_from_config():
    app = create_app(BootstrapConfig)
    with app.app_context():
        admin = storage.get_admin_by_email('owner@30hertz.ru')
        assert admin is not None
        assert admin.check_password('bootstrap-pass')

    client = app.test_client()
    r = client.post('/api/admin/login', json={'email': 'owner@30hertz.ru', 'password': 'bootstrap-pass'})
    assert r.status_code == 200


def test_no_bootstrap_admin_without_credentials(app):
    assert storage.get_admin_by_email('owner@30hertz.ru') is None


def test_unknown_route_returns_json_404(client):
    r = client.get('/api/nowhere')
    assert r.status_code == 404
    assert 'message' in r.get_json()
