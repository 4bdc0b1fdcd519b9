from feedback_api.services.feedback_service import FeedbackService

__all__ = ["FeedbackService"]
