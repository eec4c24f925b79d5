"""Shared service utilities for feedback services: logging, errors, configuration."""

from feedback_service_libs.logging_utils import configure_service_logging, create_service_logger

__all__ = ["configure_service_logging", "create_service_logger"]
