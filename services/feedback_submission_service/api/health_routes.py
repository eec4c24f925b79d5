"""Health and metrics routes for Feedback Submission Service."""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from services.feedback_submission_service.config import settings

router = APIRouter()


@router.get("/healthz", tags=["Health"])
async def health_check() -> dict[str, str | dict]:
    """Report liveness and the configured logic service dependency."""
    return {
        "service": "feedback_submission_service",
        "status": "healthy",
        "message": "Feedback Submission Service is healthy",
        "version": "0.1.0",
        "dependencies": {
            "course_logic_service": {"url": settings.LOGIC_SERVICE_URL},
        },
    }


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
