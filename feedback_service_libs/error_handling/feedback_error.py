"""
Core exception class for feedback services.

FeedbackServiceError wraps an ErrorDetail so that the same structured payload
reaches logs, traces and HTTP error responses.
"""

from __future__ import annotations

from typing import Any

from feedback_common.models.error_models import ErrorDetail
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class FeedbackServiceError(Exception):
    """Exception carrying a structured ErrorDetail."""

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(f"[{error_detail.error_code.value}] {error_detail.message}")
        self.error_detail = error_detail
        self._record_to_span()

    def _record_to_span(self) -> None:
        span = trace.get_current_span()
        if span is None or not span.is_recording():
            return

        span.record_exception(self)
        span.set_status(Status(StatusCode.ERROR, self.error_detail.message))
        span.set_attribute("error", True)
        span.set_attribute("error.code", self.error_code)
        span.set_attribute("error.message", self.error_detail.message)
        span.set_attribute("error.service", self.service)
        span.set_attribute("error.operation", self.operation)
        span.set_attribute("correlation_id", self.correlation_id)

        for key, value in self.error_detail.details.items():
            if isinstance(value, (str, bool, int, float)):
                span.set_attribute(f"error.details.{key}", value)
            else:
                span.set_attribute(f"error.details.{key}", str(value))

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "error_detail": self.error_detail.model_dump(mode="json"),
        }

    def add_detail(self, key: str, value: Any) -> FeedbackServiceError:
        """Return a new error with an extra detail entry; this instance is left untouched."""
        details = {**self.error_detail.details, key: value}
        return FeedbackServiceError(self.error_detail.model_copy(update={"details": details}))

    def __repr__(self) -> str:
        return (
            f"FeedbackServiceError(code={self.error_code}, "
            f"message={self.error_detail.message!r}, "
            f"service={self.service}, operation={self.operation}, "
            f"correlation_id={self.correlation_id})"
        )
