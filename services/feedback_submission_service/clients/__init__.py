"""Feedback Submission Service clients module.

Contains HTTP clients for internal service communication.
"""

from services.feedback_submission_service.clients.logic_client import LogicClientImpl

__all__ = ["LogicClientImpl"]
