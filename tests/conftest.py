# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from feedback_api.config import Settings
from feedback_api.database.connection import close_db, create_db_engine, init_db
from feedback_api.database.store import FeedbackStore
from feedback_api.main import create_app


@pytest.fixture
def settings():
    """Testiasetukset: in-memory SQLite, oletusreitit."""
    return Settings(database_url="sqlite://")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app):
    """
    Luo testiasiakas FastAPI:lle. Context manager ajaa käynnistys- ja
    sammutuskoukut, joten jokainen testi saa oman tyhjän kannan.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    close_db(engine)


@pytest.fixture
def store(engine):
    return FeedbackStore(engine)
