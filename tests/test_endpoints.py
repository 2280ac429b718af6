from hertz_admin.storage import storage


def _create(client, **overrides):
    payload = {
        'title': 'Как настроить эквалайзер',
        'excerpt': 'Коротко о главном',
        'content': 'Полный текст статьи',
        'category': 'Настройка',
        'imageUrl': '',
        'published': False,
    }
    payload.update(overrides)
    return client.post('/api/articles', json=payload)


# ----------------------------------------------------------------------
# Admin auth
# ----------------------------------------------------------------------

def test_admin_routes_require_login(client):
    for path in ('/api/admin/me', '/api/articles', '/api/stats'):
        r = client.get(path)
        assert r.status_code == 401
        assert 'message' in r.get_json()

    assert client.post('/api/articles', json={}).status_code == 401
    assert client.delete('/api/articles/abc').status_code == 401


def test_login_rejects_bad_credentials(client, admin):
    r = client.post('/api/admin/login', json={'email': 'admin@30hertz.ru', 'password': 'nope'})
    assert r.status_code == 401

    r = client.post('/api/admin/login', json={'email': 'ghost@30hertz.ru', 'password': 'secret-pass'})
    assert r.status_code == 401


def test_login_requires_both_fields(client):
    r = client.post('/api/admin/login', json={'email': 'admin@30hertz.ru'})
    assert r.status_code == 400


def test_login_me_logout(client, admin):
    r = client.post('/api/admin/login', json={'email': 'admin@30hertz.ru', 'password': 'secret-pass'})
    assert r.status_code == 200
    body = r.get_json()
    assert body['email'] == 'admin@30hertz.ru'
    assert 'passwordHash' not in body

    r = client.get('/api/admin/me')
    assert r.status_code == 200
    assert r.get_json()['email'] == 'admin@30hertz.ru'

    assert client.post('/api/admin/logout').status_code == 200
    assert client.get('/api/admin/me').status_code == 401


# ----------------------------------------------------------------------
# Articles
# ----------------------------------------------------------------------

def test_create_article_generates_slug(admin_client):
    r = _create(admin_client)
    assert r.status_code == 201
    body = r.get_json()
    assert body['slug'] == 'kak-nastroit-ekvalayzer'
    assert body['imageUrl'] is None
    assert body['published'] is False
    assert body['createdAt'] and body['updatedAt']


def test_create_article_slug_collision_gets_suffix(admin_client):
    first = _create(admin_client).get_json()
    second = _create(admin_client).get_json()
    assert first['slug'] == 'kak-nastroit-ekvalayzer'
    assert second['slug'] == 'kak-nastroit-ekvalayzer-2'


def test_create_article_missing_fields(admin_client):
    r = admin_client.post('/api/articles', json={'title': 'Only title', 'content': ''})
    assert r.status_code == 400
    assert set(r.get_json()['fields']) == {'excerpt', 'content', 'category'}


def test_create_article_rejects_non_boolean_published(admin_client):
    r = _create(admin_client, published='yes')
    assert r.status_code == 400


def test_list_and_filter_articles(admin_client):
    _create(admin_client, title='Draft one')
    _create(admin_client, title='Live one', published=True)

    assert len(admin_client.get('/api/articles').get_json()) == 2

    published = admin_client.get('/api/articles?published=true').get_json()
    assert [a['title'] for a in published] == ['Live one']

    drafts = admin_client.get('/api/articles?published=false').get_json()
    assert [a['title'] for a in drafts] == ['Draft one']

    assert admin_client.get('/api/articles?published=maybe').status_code == 400


def test_get_update_delete_article(admin_client):
    article = _create(admin_client).get_json()
    url = f"/api/articles/{article['id']}"

    assert admin_client.get(url).get_json()['title'] == 'Как настроить эквалайзер'

    r = admin_client.patch(url, json={'published': True, 'title': 'Новый заголовок', 'slug': 'ignored'})
    assert r.status_code == 200
    body = r.get_json()
    assert body['published'] is True
    assert body['title'] == 'Новый заголовок'
    assert body['slug'] == article['slug']

    assert admin_client.patch(url, json={'title': '  '}).status_code == 400

    assert admin_client.delete(url).status_code == 204
    assert admin_client.delete(url).status_code == 204
    assert admin_client.get(url).status_code == 404


def test_update_missing_article_is_404(admin_client):
    r = admin_client.patch('/api/articles/missing', json={'title': 'x'})
    assert r.status_code == 404
    assert r.get_json()['message'] == 'Article not found.'


def test_public_latest_and_slug_lookup(admin_client, client):
    draft = _create(admin_client, title='Draft').get_json()
    live = _create(admin_client, title='Live', published=True).get_json()
    admin_client.post('/api/admin/logout')

    latest = client.get('/api/articles/latest').get_json()
    assert [a['id'] for a in latest] == [live['id']]
    assert client.get('/api/articles/latest?limit=0').get_json() == []

    assert client.get('/api/articles/slug/live').status_code == 200
    # drafts stay hidden from the public site
    assert client.get(f"/api/articles/slug/{draft['slug']}").status_code == 404
    assert client.get('/api/articles/slug/nothing').status_code == 404


# ----------------------------------------------------------------------
# Stats
# ----------------------------------------------------------------------

def test_stats_default_to_zero(admin_client):
    r = admin_client.get('/api/stats')
    assert r.status_code == 200
    body = r.get_json()
    assert (body['visitors'], body['pageviews'], body['calculations']) == (0, 0, 0)
    assert body['articles'] == 0
    assert body['publishedArticles'] == 0


def test_track_and_read_stats(admin_client):
    assert admin_client.post('/api/stats/track', json={'type': 'pageview'}).status_code == 200
    admin_client.post('/api/stats/track', json={'type': 'pageview'})
    admin_client.post('/api/stats/track', json={'type': 'visitor'})
    r = admin_client.post('/api/stats/track', json={'type': 'calculation'})
    assert r.get_json()['calculations'] == 1

    _create(admin_client, published=True)

    body = admin_client.get('/api/stats').get_json()
    assert body['pageviews'] == 2
    assert body['visitors'] == 1
    assert body['calculations'] == 1
    assert body['articles'] == 1
    assert body['publishedArticles'] == 1


def test_track_is_public_and_validates_type(client):
    assert client.post('/api/stats/track', json={'type': 'visitor'}).status_code == 200
    r = client.post('/api/stats/track', json={'type': 'click'})
    assert r.status_code == 400
    assert r.get_json()['allowed'] == ['calculation', 'pageview', 'visitor']


# ----------------------------------------------------------------------
# Ad blocks
# ----------------------------------------------------------------------

def test_ad_block_endpoints(admin_client, client):
    r = admin_client.post('/api/ad-blocks', json={'name': 'Top', 'content': '<b>ad</b>', 'position': 'header'})
    assert r.status_code == 201
    block = r.get_json()
    assert block['active'] is True

    assert admin_client.post('/api/ad-blocks', json={'name': 'x'}).status_code == 400

    url = f"/api/ad-blocks/{block['id']}"
    r = admin_client.patch(url, json={'active': False})
    assert r.status_code == 200
    assert r.get_json()['active'] is False

    assert client.get('/api/ad-blocks?active=true').get_json() == []
    assert len(client.get('/api/ad-blocks').get_json()) == 1

    assert admin_client.patch('/api/ad-blocks/missing', json={'name': 'y'}).status_code == 404
    assert admin_client.delete(url).status_code == 204
    assert admin_client.delete(url).status_code == 204
    assert storage.get_ad_blocks() == []


def test_slug_conflict_from_store_maps_to_409(admin_client, monkeypatch):
    _create(admin_client)
    # pretend the slug is free so the insert hits the unique constraint
    monkeypatch.setattr(storage, 'get_article_by_slug', lambda slug: None)

    r = _create(admin_client)
    assert r.status_code == 409
    assert len(admin_client.get('/api/articles').get_json()) == 1


def test_non_object_json_body_is_rejected(client):
    r = client.post('/api/stats/track', json=['pageview'])
    assert r.status_code == 400


def test_login_rejects_non_string_credentials(client, admin):
    r = client.post('/api/admin/login', json={'email': 123, 'password': 'secret-pass'})
    assert r.status_code == 400

    r = client.post('/api/admin/login', json={'email': 'admin@30hertz.ru', 'password': 12345})
    assert r.status_code == 400


def test_track_rejects_non_string_type(client):
    r = client.post('/api/stats/track', json={'type': ['visitor']})
    assert r.status_code == 400
    r = client.post('/api/stats/track', json={'type': {'visitor': 1}})
    assert r.status_code == 400


def test_create_article_rejects_non_string_fields(admin_client):
    for field in ('title', 'excerpt', 'content', 'category', 'imageUrl'):
        r = _create(admin_client, **{field: 42})
        assert r.status_code == 400, field
        assert field in r.get_json()['message']
    assert admin_client.get('/api/articles').get_json() == []


def test_update_article_rejects_non_string_fields(admin_client):
    article = _create(admin_client).get_json()
    r = admin_client.patch(f"/api/articles/{article['id']}", json={'title': ['x']})
    assert r.status_code == 400


def test_ad_block_rejects_non_string_fields(admin_client):
    r = admin_client.post('/api/ad-blocks', json={'name': 1, 'content': '<b/>', 'position': 'header'})
    assert r.status_code == 400


def test_unauthorized_response_comes_from_login_manager(app, client):
    from hertz_admin.extensions import login_manager

    assert login_manager.unauthorized_callback is not None
    r = client.get('/api/stats')
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Authentication required'}
