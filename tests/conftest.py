"""
Shared fixtures: project root on sys.path, testing config, and a Flask
test client over an in-memory SQLite database.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ['FLASK_ENV'] = 'testing'


@pytest.fixture
def flask_app(tmp_path):
    from app import app, seed_labels
    from models import db

    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    with app.app_context():
        db.drop_all()
        db.create_all()
        seed_labels()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()
