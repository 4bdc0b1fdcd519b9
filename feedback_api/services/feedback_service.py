"""
feedback_service.py
--------------------
Palautteiden liiketoimintalogiikka ilman riippuvuutta HTTP-kerrokseen.

Palvelu nostaa aina `ServiceError`-aliluokan:
- InvalidInput           → syöte puuttuu tai on tyhjä (kantaan ei kirjoiteta)
- Store*-virheet         → välitetään sellaisenaan
- muut poikkeukset       → UnexpectedError
"""

import logging

from feedback_api.database.store import FeedbackStore
from feedback_api.errors import InvalidInput, ServiceError, UnexpectedError, ValidationError
from feedback_api.models.feedback import Feedback

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, store: FeedbackStore):
        self.store = store

    def submit_feedback(self, raw_content: str | None) -> Feedback:
        """Validoi ja tallentaa palautteen. Yksi kirjoitus onnistunutta kutsua kohden."""
        try:
            feedback = Feedback.create(raw_content)
        except ValidationError as e:
            raise InvalidInput(str(e)) from e

        try:
            return self.store.insert(feedback.content)
        except ServiceError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while creating feedback")
            raise UnexpectedError() from e

    def list_feedback(self) -> list[Feedback]:
        """Palauttaa kaikki palautteet uusimmasta vanhimpaan."""
        try:
            return self.store.list_all()
        except ServiceError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while fetching feedback")
            raise UnexpectedError() from e
