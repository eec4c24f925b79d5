"""Feedback Submission Service API v1 module.

Contains v1 API routes for moderated feedback submissions.
"""

from services.feedback_submission_service.api.v1.moderation_routes import router

__all__ = ["router"]
