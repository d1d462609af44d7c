import mongomock
import pytest

from config import TestingConfig
from flavor_fusion import create_app, store

OWNER = {'name': 'Admin', 'email': 'admin@fusion.com'}
BUYER = {'name': 'Jane Buyer', 'email': 'jane@example.com'}


@pytest.fixture
def app():
    app = create_app(TestingConfig, mongo_client=mongomock.MongoClient())
    with app.app_context():
        store.ensure_indexes()
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, user):
    response = client.post('/api/v1/jwt', json=user)
    assert response.get_json() == {'success': True}
    return response


@pytest.fixture
def owner_client(app):
    client = app.test_client()
    login(client, OWNER)
    return client


@pytest.fixture
def buyer_client(app):
    client = app.test_client()
    login(client, BUYER)
    return client


def make_food_item(**overrides):
    item = {
        'food_name': 'BBQ Chicken Salad',
        'food_category': 'Salad',
        'food_image': 'https://example.com/bbq.jpg',
        'price': 12.5,
        'quantity': 10,
        'order': 0,
        'origin': 'USA',
        'ingredients': ['chicken', 'lettuce', 'bbq sauce'],
        'added_by_name': OWNER['name'],
        'added_by_email': OWNER['email'],
    }
    item.update(overrides)
    return item


@pytest.fixture
def food_item(app):
    """An item with 10 units in stock, owned by OWNER"""
    result = store.food_items.insert_one(make_food_item())
    return result.inserted_id
