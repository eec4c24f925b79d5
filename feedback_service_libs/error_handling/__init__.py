"""
Structured error handling for feedback services.

Import the ``raise_*`` factories from here; FastAPI wiring lives in
``feedback_service_libs.error_handling.fastapi``.
"""

from feedback_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from feedback_service_libs.error_handling.factories import (
    raise_authentication_error,
    raise_authorization_error,
    raise_connection_error,
    raise_external_service_error,
    raise_invalid_request,
    raise_invalid_response,
    raise_missing_required_field,
    raise_processing_error,
    raise_resource_not_found,
    raise_timeout_error,
    raise_unknown_error,
    raise_validation_error,
)
from feedback_service_libs.error_handling.feedback_error import FeedbackServiceError

__all__ = [
    "FeedbackServiceError",
    "create_error_detail_with_context",
    "raise_authentication_error",
    "raise_authorization_error",
    "raise_connection_error",
    "raise_external_service_error",
    "raise_invalid_request",
    "raise_invalid_response",
    "raise_missing_required_field",
    "raise_processing_error",
    "raise_resource_not_found",
    "raise_timeout_error",
    "raise_unknown_error",
    "raise_validation_error",
]
