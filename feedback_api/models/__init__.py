from feedback_api.models.feedback import Feedback, FeedbackCreate, FeedbackRead

__all__ = ["Feedback", "FeedbackCreate", "FeedbackRead"]
