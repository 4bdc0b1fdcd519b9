"""
store.py
---------
Palautteiden tallennus ja luku tietokannasta.

SQLAlchemyn poikkeukset muunnetaan palvelun omiksi virheiksi:
- yhteysvirheet          → StoreUnavailable
- muut kirjoitusvirheet  → StoreWriteError
- muut lukuvirheet       → StoreReadError
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, DisconnectionError, OperationalError, SQLAlchemyError
from sqlmodel import Session, select

from feedback_api.errors import StoreReadError, StoreUnavailable, StoreWriteError
from feedback_api.models.feedback import Feedback

logger = logging.getLogger(__name__)


def _is_connection_error(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, (OperationalError, DisconnectionError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class FeedbackStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def insert(self, content: str) -> Feedback:
        """Tallentaa uuden palautteen ja palauttaa sen kannasta luettuna."""
        feedback = Feedback(content=content)
        try:
            with Session(self.engine) as session:
                session.add(feedback)
                session.commit()
                session.refresh(feedback)
        except SQLAlchemyError as e:
            if _is_connection_error(e):
                logger.error("Database unavailable while inserting feedback: %s", e)
                raise StoreUnavailable() from e
            logger.error("Failed to insert feedback: %s", e)
            raise StoreWriteError() from e

        logger.info("Stored feedback id=%s", feedback.id)
        return feedback

    def list_all(self) -> list[Feedback]:
        """Palauttaa kaikki palautteet uusimmasta vanhimpaan."""
        statement = select(Feedback).order_by(Feedback.created_at.desc(), Feedback.id.desc())
        try:
            with Session(self.engine) as session:
                return list(session.exec(statement).all())
        except SQLAlchemyError as e:
            if _is_connection_error(e):
                logger.error("Database unavailable while listing feedback: %s", e)
                raise StoreUnavailable() from e
            logger.error("Failed to list feedback: %s", e)
            raise StoreReadError() from e
