"""
Application Configuration

Flask, database, upload, translation and search settings. Every value can
be overridden from the environment; FLASK_ENV picks the profile.
"""

import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_float(name, default):
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return float(default)


class Config:
    """Settings shared by every profile."""

    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    PORT = int(_env_float('PORT', 3000))

    # Recipe store
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///fooddb.sqlite')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Recipe images are re-encoded to JPEG and served from here
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(BASE_DIR, 'static', 'uploads'))
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    # Google translate endpoint used when importing pasted recipes
    TRANSLATE_URL = os.environ.get('TRANSLATE_URL', 'https://translate.googleapis.com/translate_a/single')
    TRANSLATE_TIMEOUT = _env_float('TRANSLATE_TIMEOUT', 10)

    # Multi-token searches drop recipes averaging less than this per token
    SEARCH_MIN_CONFIDENCE = _env_float('SEARCH_MIN_CONFIDENCE', 20)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    """In-memory store; translation calls give up fast."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    TRANSLATE_TIMEOUT = 1


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get the settings class for env (defaults to FLASK_ENV)."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
