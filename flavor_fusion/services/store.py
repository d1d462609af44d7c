# Document store access for the Flask app
from pymongo import MongoClient, ASCENDING
from pymongo.server_api import ServerApi
from flask import current_app

from flavor_fusion.models.models import USERS, FOOD_ITEMS, FOOD_ORDERS


class MongoStore:
    """Flask extension giving each app one shared MongoClient.

    Collections are resolved through current_app, so handlers and
    services must run inside an app or request context.
    """

    def __init__(self, app=None, client=None):
        if app is not None:
            self.init_app(app, client)

    def init_app(self, app, client=None):
        if client is None:
            client = MongoClient(
                app.config['MONGO_URI'],
                server_api=ServerApi('1', strict=True, deprecation_errors=True),
            )
        app.extensions['mongo_store'] = {
            'client': client,
            'db': client[app.config['MONGO_DB_NAME']],
        }

    @property
    def client(self):
        return current_app.extensions['mongo_store']['client']

    @property
    def db(self):
        return current_app.extensions['mongo_store']['db']

    @property
    def users(self):
        return self.db[USERS]

    @property
    def food_items(self):
        return self.db[FOOD_ITEMS]

    @property
    def food_orders(self):
        return self.db[FOOD_ORDERS]

    def ensure_indexes(self):
        """Create the uniqueness and lookup indexes the handlers rely on"""
        self.users.create_index(
            [('name', ASCENDING), ('email', ASCENDING)],
            unique=True,
            name='name_email_unique',
        )
        self.food_items.create_index(
            [('food_name', ASCENDING), ('food_category', ASCENDING)],
            unique=True,
            name='food_name_category_unique',
        )
        self.food_items.create_index('added_by_email', name='added_by_email')
        self.food_items.create_index('order', name='order')
        self.food_orders.create_index('buyer_email', name='buyer_email')
        current_app.logger.info(f"Indexes ensured on {self.db.name}")

    def ping(self):
        self.client.admin.command('ping')
        current_app.logger.info("Pinged your deployment. Connected to MongoDB!")
        return True
