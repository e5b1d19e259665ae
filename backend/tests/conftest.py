import os
import sys
import pytest

# Ensure the backend root (containing the `wordtower` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordtower import create_app, socketio
from wordtower.services.towers.catalog import WordCatalog
from wordtower.services.towers.session import GameSession
from wordtower.services.towers.state import GameState, GameStateStore


TEST_WORDS = ['foo', 'bars', 'tower', 'up', 'stack', 'Foo']


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    AUTH_TOKEN = 'test-token'
    UPSTREAM_BASE_URL = 'http://upstream.test/api'
    SHUFFLE_ALLOWANCE = 3
    CORS_ORIGINS = ['http://localhost:5173']


class FakeGateway:
    """In-memory stand-in for the upstream API."""

    def __init__(self):
        self.pools = []
        self.raw_words = None
        self.round_list = None
        self.error = None
        self.calls = []
        self.on_fetch = None

    def fetch_word_pool(self):
        self.calls.append('shuffle')
        if self.on_fetch:
            self.on_fetch()
        if self.error:
            raise self.error
        return list(self.pools.pop(0)) if self.pools else ['foo', 'bars']

    def fetch_raw_words(self):
        self.calls.append('words')
        if self.error:
            raise self.error
        return self.raw_words

    def fetch_rounds(self):
        self.calls.append('rounds')
        if self.error:
            raise self.error
        return self.round_list


@pytest.fixture()
def catalog():
    return WordCatalog.from_words(TEST_WORDS)


@pytest.fixture()
def store():
    return GameStateStore(GameState(
        map_size=(30, 30, 100),
        next_turn_sec=60,
        round_ends_at=None,
        shuffle_left=3,
        turn=1,
    ))


@pytest.fixture()
def gateway():
    return FakeGateway()


@pytest.fixture()
def session(catalog, store, gateway):
    return GameSession(catalog, store, gateway)


@pytest.fixture()
def flask_app(session):
    application = create_app(TestConfig, session=session)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
