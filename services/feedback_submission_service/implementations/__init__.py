"""Implementations of the Feedback Submission Service protocols."""

from services.feedback_submission_service.implementations.gatekeeper_impl import GateKeeperImpl
from services.feedback_submission_service.implementations.moderated_instructor_strategy import (
    ModeratedInstructorSubmissionStrategy,
)
from services.feedback_submission_service.implementations.submission_pipeline import (
    FeedbackSubmissionSavePipeline,
)

__all__ = [
    "FeedbackSubmissionSavePipeline",
    "GateKeeperImpl",
    "ModeratedInstructorSubmissionStrategy",
]
