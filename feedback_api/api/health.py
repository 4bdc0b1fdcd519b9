from datetime import datetime, timezone

from fastapi import APIRouter

from feedback_api.models.responses import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Elossaolotarkistus, ei koske tietokantaan."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(status="ok", timestamp=timestamp)
