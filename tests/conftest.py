import pytest

from shopfront import create_app
from shopfront.config import TestConfig


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def logged_in_client(client):
    r = client.post('/login', data={'email': 'a@example.com'})
    assert r.status_code == 200
    return client
