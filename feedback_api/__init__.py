"""Feedback API: palautteiden vastaanotto ja listaus (FastAPI + SQLModel)."""

__version__ = "1.0.0"
