from bson import ObjectId
from flask import Flask
from flask.json.provider import DefaultJSONProvider
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from config import get_config
from flavor_fusion.services.store import MongoStore

store = MongoStore()
jwt = JWTManager()
cors = CORS()


class MongoJSONProvider(DefaultJSONProvider):
    """JSON provider that renders ObjectIds as their hex string"""

    @staticmethod
    def default(o):
        if isinstance(o, ObjectId):
            return str(o)
        return DefaultJSONProvider.default(o)


def create_app(config_class=None, mongo_client=None):
    app = Flask(__name__)
    app.json = MongoJSONProvider(app)
    app.config.from_object(config_class or get_config())
    app.logger.setLevel(app.config['LOG_LEVEL'])

    store.init_app(app, client=mongo_client)
    jwt.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)

    from flavor_fusion.routes import auth
    from flavor_fusion.routes import users
    from flavor_fusion.routes import food
    from flavor_fusion.routes import orders
    app.register_blueprint(auth.auth_bp)
    app.register_blueprint(users.users_bp)
    app.register_blueprint(food.food_bp)
    app.register_blueprint(orders.orders_bp)

    @app.route('/')
    def index():
        return 'FlavorFusion server is running!'

    return app
