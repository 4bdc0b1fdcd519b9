from feedback_api.database.connection import close_db, create_db_engine, init_db
from feedback_api.database.store import FeedbackStore

__all__ = ["FeedbackStore", "close_db", "create_db_engine", "init_db"]
