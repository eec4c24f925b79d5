"""
FastAPI integration for FeedbackServiceError.

Registers exception handlers that translate structured errors into JSON
responses with a stable shape:

    {"error": {"code", "message", "correlation_id", "service", "operation", "details"}}
"""

from __future__ import annotations

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from feedback_common.error_enums import ErrorCode

from feedback_service_libs.error_handling.feedback_error import FeedbackServiceError
from feedback_service_libs.logging_utils import create_service_logger

logger = create_service_logger("error_handling.fastapi")

ERROR_CODE_TO_STATUS: dict[str, int] = {
    ErrorCode.VALIDATION_ERROR.value: 400,
    ErrorCode.MISSING_REQUIRED_FIELD.value: 400,
    ErrorCode.INVALID_REQUEST.value: 400,
    ErrorCode.AUTHENTICATION_ERROR.value: 401,
    ErrorCode.AUTHORIZATION_ERROR.value: 403,
    ErrorCode.RESOURCE_NOT_FOUND.value: 404,
    ErrorCode.EXTERNAL_SERVICE_ERROR.value: 502,
    ErrorCode.INVALID_RESPONSE.value: 502,
    ErrorCode.CONNECTION_ERROR.value: 503,
    ErrorCode.SERVICE_UNAVAILABLE.value: 503,
    ErrorCode.TIMEOUT.value: 504,
}


def status_code_for(error: FeedbackServiceError) -> int:
    return ERROR_CODE_TO_STATUS.get(error.error_code, 500)


def register_error_handlers(app: FastAPI) -> None:
    """Attach FeedbackServiceError and catch-all handlers to a FastAPI app."""

    @app.exception_handler(FeedbackServiceError)
    async def handle_feedback_service_error(
        request: Request, exc: FeedbackServiceError
    ) -> JSONResponse:
        status_code = status_code_for(exc)
        log = logger.warning if status_code < 500 else logger.error
        log(
            "Request failed with service error",
            error_code=exc.error_code,
            service=exc.service,
            operation=exc.operation,
            correlation_id=exc.correlation_id,
            path=request.url.path,
        )
        detail = exc.error_detail
        return JSONResponse(
            status_code=status_code,
            content={
                "error": {
                    "code": exc.error_code,
                    "message": detail.message,
                    "correlation_id": exc.correlation_id,
                    "service": detail.service,
                    "operation": detail.operation,
                    "details": detail.model_dump(mode="json")["details"],
                }
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        correlation_id = getattr(request.state, "correlation_id", None) or uuid4()
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            correlation_id=str(correlation_id),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": ErrorCode.UNKNOWN_ERROR.value,
                    "message": "Internal server error",
                    "correlation_id": str(correlation_id),
                }
            },
        )
