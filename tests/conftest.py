"""
Shared fixtures: an app built with TestingConfig (in-memory SQLite behind
the SQL gateway backend) and a test client.
"""

import pytest
from app import create_app
from extensions import db
from utils.security import reset_rate_limits


@pytest.fixture
def app():
    """Fresh application with a seeded content store and empty tables."""
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
    reset_rate_limits()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def owner_client(app):
    """Test client logged in as the site owner."""
    client = app.test_client()
    client.post('/login', data={'username': app.config['ADMIN_USERNAME'],
                                'password': app.config['ADMIN_PASSWORD']}, follow_redirects=True)
    return client
