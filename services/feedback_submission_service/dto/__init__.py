"""Feedback Submission Service DTO module.

Contains Data Transfer Objects for the submission API and for logic service
responses.
"""

from services.feedback_submission_service.dto.feedback_v1 import SubmissionResultResponseV1

__all__ = ["SubmissionResultResponseV1"]
