from feedback_api.api import health, routes

__all__ = ["health", "routes"]
