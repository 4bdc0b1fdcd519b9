"""
routes.py
----------
Palautteiden API-päätepisteet (liitetään asetuksen FEEDBACK_MOUNT_PATH alle):
- POST <mount>  → uuden palautteen tallennus
- GET  <mount>  → kaikki palautteet uusimmasta vanhimpaan

Molemmat toimivat myös loppukauttaviivalla (<mount>/).
"""

import logging

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from feedback_api.errors import InvalidInput, ServiceError, StoreUnavailable
from feedback_api.models.feedback import FeedbackCreate, FeedbackRead
from feedback_api.models.responses import ErrorResponse, FeedbackCreatedResponse, FeedbackListResponse
from feedback_api.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Feedback"])

CREATE_ERROR_MESSAGE = "Server error while creating feedback."
LIST_ERROR_MESSAGE = "Server error while fetching feedback."

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Feedback content missing or empty"},
    500: {"model": ErrorResponse, "description": "Server error"},
}


def get_feedback_service(request: Request) -> FeedbackService:
    """Rakentaa palvelun sovelluksen yhteisen tietovaraston päälle."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailable("Feedback store has not been initialized")
    return FeedbackService(store)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


# --- PALAUTEREITIT ---
@router.post("", status_code=201, response_model=FeedbackCreatedResponse, responses=ERROR_RESPONSES)
@router.post("/", status_code=201, response_model=FeedbackCreatedResponse, include_in_schema=False)
def create_feedback(
    payload: FeedbackCreate | None = Body(default=None),
    service: FeedbackService = Depends(get_feedback_service),
):
    """Tallentaa palautteen tietokantaan."""
    content = payload.content if payload is not None else None
    try:
        feedback = service.submit_feedback(content)
    except InvalidInput as e:
        logger.info("Rejected feedback submission: %s", e)
        return error_response(400, e.public_message)
    except ServiceError as e:
        logger.error("Error creating feedback: %r", e, exc_info=e.__cause__ or e)
        return error_response(500, CREATE_ERROR_MESSAGE)

    return FeedbackCreatedResponse(
        message="Feedback submitted successfully",
        data=FeedbackRead.model_validate(feedback),
    )


@router.get("", response_model=FeedbackListResponse, responses={500: ERROR_RESPONSES[500]})
@router.get("/", response_model=FeedbackListResponse, include_in_schema=False)
def list_feedback(service: FeedbackService = Depends(get_feedback_service)):
    """Palauttaa kaikki tallennetut palautteet."""
    try:
        feedbacks = service.list_feedback()
    except ServiceError as e:
        logger.error("Error while fetching all feedback: %r", e, exc_info=e.__cause__ or e)
        return error_response(500, LIST_ERROR_MESSAGE)

    return FeedbackListResponse(
        count=len(feedbacks),
        data=[FeedbackRead.model_validate(f) for f in feedbacks],
    )
