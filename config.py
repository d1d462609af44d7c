import os
from datetime import timedelta
from urllib.parse import quote_plus
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def build_mongo_uri():
    """Atlas connection string from DB_USER / DB_PASS unless MONGO_URI is set"""
    uri = os.environ.get('MONGO_URI')
    if uri:
        return uri
    user = quote_plus(os.environ.get('DB_USER', ''))
    password = quote_plus(os.environ.get('DB_PASS', ''))
    cluster = os.environ.get('DB_CLUSTER', 'cluster0.ya8cack.mongodb.net')
    return f'mongodb+srv://{user}:{password}@{cluster}/?retryWrites=true&w=majority'


class Config:
    ENVIRONMENT = os.environ.get('NODE_ENV', 'development')
    PORT = int(os.environ.get('PORT', 5001))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database
    MONGO_URI = build_mongo_uri()
    MONGO_DB_NAME = os.environ.get('DB_NAME', 'flavor-fusion')

    # Session cookie (flask_jwt_extended)
    JWT_SECRET_KEY = os.environ.get('ACCESS_TOKEN_SECRET') or 'jwt-secret-key'
    JWT_TOKEN_LOCATION = ['cookies']
    JWT_ACCESS_COOKIE_NAME = 'token'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=2)
    JWT_COOKIE_CSRF_PROTECT = False
    JWT_SESSION_COOKIE = True
    JWT_COOKIE_SECURE = ENVIRONMENT == 'production'
    JWT_COOKIE_SAMESITE = 'None' if ENVIRONMENT == 'production' else 'Strict'

    # Front-end origins allowed to call the API with credentials
    CORS_ORIGINS = [
        'http://localhost:5173',
        'http://localhost:5174',
        'https://a11-flavor-fusion.web.app',
        'https://a11-flavor-fusion.firebaseapp.com',
    ]

    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    JWT_COOKIE_SECURE = True
    JWT_COOKIE_SAMESITE = 'None'


class TestingConfig(Config):
    TESTING = True
    ENVIRONMENT = 'testing'
    MONGO_URI = 'mongodb://localhost:27017'
    MONGO_DB_NAME = 'flavor-fusion-test'
    JWT_SECRET_KEY = 'test-secret-key'
    JWT_COOKIE_SECURE = False
    JWT_COOKIE_SAMESITE = 'Strict'


def get_config():
    """Config class for the current NODE_ENV"""
    if os.environ.get('NODE_ENV') == 'production':
        return ProductionConfig
    return DevelopmentConfig
