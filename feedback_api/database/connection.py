import logging

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

# taulun rekisteröinti metadataan
from feedback_api.models.feedback import Feedback  # noqa: F401

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Luo prosessin ainoan tietokantamoottorin."""
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory kanta: kaikki istunnot samaan yhteyteen
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def init_db(engine: Engine) -> None:
    """Alustaa tietokannan ja luo taulut."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized (%s)", engine.url.render_as_string(hide_password=True))


def close_db(engine: Engine) -> None:
    engine.dispose()
    logger.info("Database connections closed")
