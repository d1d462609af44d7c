from datetime import timedelta

import mongomock
from flask_jwt_extended import create_access_token

from config import ProductionConfig
from flavor_fusion import create_app
from conftest import OWNER, BUYER, login


def test_index_is_alive(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.get_data(as_text=True) == 'FlavorFusion server is running!'


def test_jwt_sets_http_only_cookie(client):
    response = login(client, OWNER)
    cookie = response.headers['Set-Cookie']
    assert cookie.startswith('token=')
    assert 'HttpOnly' in cookie
    assert 'SameSite=Strict' in cookie
    assert '; Secure' not in cookie


def test_production_cookie_is_secure_and_cross_site():
    app = create_app(ProductionConfig, mongo_client=mongomock.MongoClient())
    client = app.test_client()
    response = client.post('/api/v1/jwt', json=OWNER)
    cookie = response.headers['Set-Cookie']
    assert '; Secure' in cookie
    assert 'SameSite=None' in cookie


def test_jwt_rejects_non_object_payload(client):
    response = client.post('/api/v1/jwt', json=['not', 'an', 'object'])
    body = response.get_json()
    assert response.status_code == 200
    assert body['error'] is True
    assert 'Set-Cookie' not in response.headers


def test_gated_route_without_cookie_is_401(client, food_item):
    response = client.get(f'/api/v1/food-item/{food_item}')
    assert response.status_code == 401
    assert response.get_json() == {'auth': False, 'message': 'Not authorized'}

    for path in ('/api/v1/my-added-foods', '/api/v1/my-ordered-foods'):
        response = client.get(path, query_string={'email': OWNER['email']})
        assert response.status_code == 401


def test_invalid_token_is_401(client, food_item):
    client.set_cookie('token', 'not-a-real-token')
    response = client.get(f'/api/v1/food-item/{food_item}')
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Unauthorized'}


def test_expired_token_is_401(app, client, food_item):
    token = create_access_token(
        identity=OWNER['email'],
        additional_claims=OWNER,
        expires_delta=timedelta(seconds=-10),
    )
    client.set_cookie('token', token)
    response = client.get(f'/api/v1/food-item/{food_item}')
    assert response.status_code == 401
    assert response.get_json() == {'message': 'Unauthorized'}


def test_token_signed_with_other_secret_is_401(client, food_item):
    other = create_app(ProductionConfig, mongo_client=mongomock.MongoClient())
    other.config['JWT_SECRET_KEY'] = 'some-other-secret'
    with other.app_context():
        token = create_access_token(identity=OWNER['email'], additional_claims=OWNER)
    client.set_cookie('token', token)
    response = client.get(f'/api/v1/food-item/{food_item}')
    assert response.status_code == 401


def test_valid_cookie_passes_gate(owner_client, food_item):
    response = owner_client.get(f'/api/v1/food-item/{food_item}')
    assert response.status_code == 200
    assert response.get_json()['_id'] == str(food_item)


def test_registered_claims_in_identity_are_dropped(app, food_item):
    client = app.test_client()
    login(client, dict(OWNER, aud='flavor-fusion-web', iss='firebase', exp=0, sub='someone-else'))

    response = client.get(f'/api/v1/food-item/{food_item}')
    assert response.status_code == 200

    response = client.get('/api/v1/my-added-foods', query_string={'email': OWNER['email']})
    assert response.status_code == 200


def test_email_mismatch_is_401(buyer_client):
    for path in ('/api/v1/my-added-foods', '/api/v1/my-ordered-foods'):
        response = buyer_client.get(path, query_string={'email': OWNER['email']})
        assert response.status_code == 401
        assert response.get_json() == {'message': 'Unauthorized Access Forbidden'}


def test_missing_email_query_is_401(buyer_client):
    response = buyer_client.get('/api/v1/my-ordered-foods')
    assert response.status_code == 401


def test_logout_clears_cookie(app):
    client = app.test_client()
    login(client, BUYER)
    response = client.post('/api/v1/logout', json=BUYER)
    assert response.get_json() == {'success': True}
    cookies = response.headers.getlist('Set-Cookie')
    assert any(c.startswith('token=;') and 'Expires=Thu, 01 Jan 1970' in c for c in cookies)

    response = client.get('/api/v1/my-ordered-foods', query_string={'email': BUYER['email']})
    assert response.status_code == 401
