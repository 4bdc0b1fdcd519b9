"""
responses.py
-------------
API-vastausten kuoret. Kaikissa vastauksissa on `success`-kenttä, jotta
asiakas ei joudu päättelemään tulosta pelkästä statuskoodista.
"""

from typing import Literal

from pydantic import BaseModel

from feedback_api.models.feedback import FeedbackRead


class FeedbackCreatedResponse(BaseModel):
    success: Literal[True] = True
    message: str
    data: FeedbackRead


class FeedbackListResponse(BaseModel):
    success: Literal[True] = True
    count: int
    data: list[FeedbackRead]


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
