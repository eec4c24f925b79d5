"""Configuration utilities for feedback services."""

from .secure_base import SecureServiceSettings

__all__ = ["SecureServiceSettings"]
