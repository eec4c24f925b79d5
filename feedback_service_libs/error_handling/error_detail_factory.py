"""
Factory for ErrorDetail instances with automatic context capture.
"""

from __future__ import annotations

import traceback
import uuid
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from feedback_common.error_enums import ErrorCode
from feedback_common.models.error_models import ErrorDetail
from opentelemetry import trace


def create_error_detail_with_context(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: UUID | None = None,
    details: dict[str, Any] | None = None,
    capture_stack: bool = True,
) -> ErrorDetail:
    """
    Create an ErrorDetail, filling in timestamp, correlation ID and trace context.

    Args:
        error_code: Code identifying the failure category
        message: Human-readable description
        service: Name of the service raising the error
        operation: Operation that failed
        correlation_id: Request correlation ID, generated when omitted
        details: Additional structured context
        capture_stack: Whether to attach the current stack trace

    Returns:
        A populated ErrorDetail
    """
    trace_id: str | None = None
    span_id: str | None = None
    span = trace.get_current_span()
    if span is not None and span.is_recording():
        span_context = span.get_span_context()
        trace_id = format(span_context.trace_id, "032x")
        span_id = format(span_context.span_id, "016x")

    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id or uuid.uuid4(),
        timestamp=datetime.now(timezone.utc),
        service=service,
        operation=operation,
        details=details or {},
        stack_trace="".join(traceback.format_stack()) if capture_stack else None,
        trace_id=trace_id,
        span_id=span_id,
    )
