"""Feedback Submission Service - saves moderated feedback responses.

Receives the edit-responses form of an instructor moderating another
instructor's submission and forwards it to the course logic service.
"""

from __future__ import annotations

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from feedback_service_libs.error_handling.fastapi import (
    register_error_handlers as register_fastapi_error_handlers,
)
from feedback_service_libs.logging_utils import configure_service_logging, create_service_logger

from services.feedback_submission_service.api.health_routes import router as health_router
from services.feedback_submission_service.api.v1 import router as feedback_router_v1
from services.feedback_submission_service.config import settings
from services.feedback_submission_service.di import (
    FeedbackSubmissionProvider,
    RequestContextProvider,
)
from services.feedback_submission_service.middleware import CorrelationIDMiddleware

configure_service_logging(settings.SERVICE_NAME, log_level=settings.LOG_LEVEL)
logger = create_service_logger("feedback_submission_service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="0.1.0",
        description="Feedback Submission Service - moderated feedback saves",
        docs_url="/docs" if settings.is_development() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development() else None,
    )

    register_fastapi_error_handlers(app)

    app.add_middleware(CorrelationIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(health_router)
    app.include_router(feedback_router_v1, prefix="/feedback/v1", tags=["Feedback Submission"])

    container = make_async_container(
        FeedbackSubmissionProvider(),
        RequestContextProvider(),
        FastapiProvider(),
    )
    setup_dishka(container, app)
    app.state.di_container = container

    logger.info("Feedback Submission Service configured", logic_url=settings.LOGIC_SERVICE_URL)
    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.feedback_submission_service.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
