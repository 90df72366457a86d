import pytest

from memevote import create_app
from memevote.config import TestConfig


def _config_for(uri):
    class _Config(TestConfig):
        SQLALCHEMY_DATABASE_URI = uri

    return _Config


@pytest.fixture
def app(tmp_path):
    """App backed by a fresh SQLite file, so threads share one database."""
    app = create_app(_config_for(f"sqlite:///{tmp_path / 'votes.db'}"))
    yield app
    app.extensions["vote_store"].close()


@pytest.fixture
def unavailable_app(tmp_path):
    """App whose database file cannot be opened; the store never becomes ready."""
    app = create_app(_config_for(f"sqlite:///{tmp_path / 'missing' / 'votes.db'}"))
    yield app
    app.extensions["vote_store"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def store(app):
    return app.extensions["vote_store"]


@pytest.fixture
def vote_service(app, app_ctx):
    return app.extensions["vote_service"]


@pytest.fixture
def results_service(app, app_ctx):
    return app.extensions["results_service"]
