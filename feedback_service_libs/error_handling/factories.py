"""
Factory functions that build and raise FeedbackServiceError.

Every factory is annotated ``NoReturn`` so type checkers treat the call as a
raise statement.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from feedback_common.error_enums import ErrorCode

from feedback_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from feedback_service_libs.error_handling.feedback_error import FeedbackServiceError


def _raise(
    error_code: ErrorCode,
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    details: dict[str, Any],
) -> NoReturn:
    error_detail = create_error_detail_with_context(
        error_code=error_code,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details=details,
    )
    raise FeedbackServiceError(error_detail)


# --- Generic errors ---


def raise_unknown_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.UNKNOWN_ERROR, service, operation, message, correlation_id, additional_context
    )


def raise_validation_error(
    service: str,
    operation: str,
    field: str,
    message: str,
    correlation_id: UUID,
    value: Any = None,
    **additional_context: Any,
) -> NoReturn:
    details: dict[str, Any] = {"field": field, **additional_context}
    if value is not None:
        details["value"] = value
    _raise(ErrorCode.VALIDATION_ERROR, service, operation, message, correlation_id, details)


def raise_resource_not_found(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    details = {"resource_type": resource_type, "resource_id": resource_id, **additional_context}
    _raise(
        ErrorCode.RESOURCE_NOT_FOUND,
        service,
        operation,
        f"{resource_type} with ID '{resource_id}' not found",
        correlation_id,
        details,
    )


def raise_missing_required_field(
    service: str,
    operation: str,
    field_name: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    details = {"field_name": field_name, **additional_context}
    _raise(
        ErrorCode.MISSING_REQUIRED_FIELD,
        service,
        operation,
        f"Required field '{field_name}' is missing",
        correlation_id,
        details,
    )


def raise_invalid_request(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.INVALID_REQUEST, service, operation, message, correlation_id, additional_context
    )


def raise_invalid_response(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.INVALID_RESPONSE, service, operation, message, correlation_id, additional_context
    )


def raise_processing_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.PROCESSING_ERROR, service, operation, message, correlation_id, additional_context
    )


# --- External service errors ---


def raise_external_service_error(
    service: str,
    operation: str,
    external_service: str,
    message: str,
    correlation_id: UUID,
    status_code: int | None = None,
    **additional_context: Any,
) -> NoReturn:
    details: dict[str, Any] = {"external_service": external_service, **additional_context}
    if status_code is not None:
        details["status_code"] = status_code
    _raise(ErrorCode.EXTERNAL_SERVICE_ERROR, service, operation, message, correlation_id, details)


def raise_timeout_error(
    service: str,
    operation: str,
    timeout_seconds: float,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    details = {"timeout_seconds": timeout_seconds, **additional_context}
    _raise(ErrorCode.TIMEOUT, service, operation, message, correlation_id, details)


def raise_connection_error(
    service: str,
    operation: str,
    target: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    details = {"target": target, **additional_context}
    _raise(ErrorCode.CONNECTION_ERROR, service, operation, message, correlation_id, details)


# --- Access errors ---


def raise_authentication_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.AUTHENTICATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        additional_context,
    )


def raise_authorization_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.AUTHORIZATION_ERROR,
        service,
        operation,
        message,
        correlation_id,
        additional_context,
    )
