"""Protocol definitions for Feedback Submission Service.

Defines interfaces for the course logic client, the access-control gatekeeper
and the per-flow submission strategy used in dependency injection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from services.feedback_submission_service.dto.feedback_v1 import (
        FeedbackSessionQuestionsBundleV1,
        FeedbackSessionV1,
        InstructorV1,
        RedirectResultV1,
        SaveResponsesRequestV1,
    )
    from services.feedback_submission_service.submission_models import (
        SubmissionRequestContext,
        SubmissionState,
    )


class LogicClientProtocol(Protocol):
    """Protocol for the course logic service HTTP client."""

    async def get_instructor_for_google_id(
        self, course_id: str, google_id: str, correlation_id: UUID
    ) -> InstructorV1 | None:
        """Return the instructor of ``course_id`` linked to ``google_id``, or None."""
        ...

    async def get_instructor_for_email(
        self, course_id: str, email: str, correlation_id: UUID
    ) -> InstructorV1 | None:
        """Return the instructor of ``course_id`` with ``email``, or None."""
        ...

    async def get_feedback_session(
        self, feedback_session_name: str, course_id: str, correlation_id: UUID
    ) -> FeedbackSessionV1 | None:
        """Return the session, or None when it does not exist."""
        ...

    async def get_questions_bundle_for_instructor(
        self,
        feedback_session_name: str,
        course_id: str,
        instructor_email: str,
        correlation_id: UUID,
    ) -> FeedbackSessionQuestionsBundleV1:
        """Return the session's questions as seen by the instructor.

        Raises:
            FeedbackServiceError: RESOURCE_NOT_FOUND when the session does not exist
        """
        ...

    async def save_responses(
        self,
        feedback_session_name: str,
        course_id: str,
        request: SaveResponsesRequestV1,
        correlation_id: UUID,
    ) -> int:
        """Store the responses and return how many the giver now has for the session."""
        ...

    async def add_instructor_respondent(
        self, email: str, feedback_session_name: str, course_id: str, correlation_id: UUID
    ) -> None: ...

    async def delete_instructor_respondent(
        self, email: str, feedback_session_name: str, course_id: str, correlation_id: UUID
    ) -> None: ...


class GateKeeperProtocol(Protocol):
    """Protocol for instructor access control on feedback sessions."""

    def verify_accessible(
        self,
        instructor: InstructorV1 | None,
        feedback_session: FeedbackSessionV1 | None,
        is_section_restricted: bool,
        privilege_name: str,
        correlation_id: UUID,
    ) -> None:
        """Return normally when access is granted.

        Raises:
            FeedbackServiceError: AUTHORIZATION_ERROR on denial
        """
        ...


class SubmissionStrategyProtocol(Protocol):
    """Flow-specific behaviour plugged into the generic submission save pipeline.

    One strategy instance serves exactly one request.
    """

    async def verify_accessible(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None: ...

    async def set_additional_parameters(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None: ...

    def get_user_email_for_course(self) -> str: ...

    def get_user_team_for_course(self) -> str: ...

    def get_user_section_for_course(self) -> str: ...

    async def get_data_bundle(
        self, context: SubmissionRequestContext, state: SubmissionState, user_email: str
    ) -> FeedbackSessionQuestionsBundleV1: ...

    async def check_additional_constraints(
        self,
        context: SubmissionRequestContext,
        state: SubmissionState,
        bundle: FeedbackSessionQuestionsBundleV1,
    ) -> None: ...

    def set_status_to_admin(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None: ...

    def is_session_open(self, feedback_session: FeedbackSessionV1) -> bool: ...

    async def append_respondent(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None: ...

    async def remove_respondent(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None: ...

    def create_redirect(self, state: SubmissionState) -> RedirectResultV1: ...
