"""Access control for instructor actions on feedback sessions."""

from __future__ import annotations

from uuid import UUID

from feedback_service_libs.error_handling import raise_authorization_error
from feedback_service_libs.logging_utils import create_service_logger

from services.feedback_submission_service.dto.feedback_v1 import (
    FeedbackSessionV1,
    InstructorV1,
)

logger = create_service_logger("feedback_submission.gatekeeper")

SERVICE = "feedback_submission_service"
OPERATION = "verify_accessible"


class GateKeeperImpl:
    """Grants or denies an instructor a privilege on a feedback session.

    Course-level privileges always count. When ``is_section_restricted`` is
    set, a grant in any of the instructor's sections also satisfies the check.
    """

    def verify_accessible(
        self,
        instructor: InstructorV1 | None,
        feedback_session: FeedbackSessionV1 | None,
        is_section_restricted: bool,
        privilege_name: str,
        correlation_id: UUID,
    ) -> None:
        if instructor is None:
            raise_authorization_error(
                service=SERVICE,
                operation=OPERATION,
                message="Trying to access system using a non-existent instructor entity",
                correlation_id=correlation_id,
            )
        if feedback_session is None:
            raise_authorization_error(
                service=SERVICE,
                operation=OPERATION,
                message="Trying to access system using a non-existent feedback session entity",
                correlation_id=correlation_id,
            )

        if instructor.course_id != feedback_session.course_id:
            logger.warning(
                "Instructor accessed a session of another course",
                instructor_course_id=instructor.course_id,
                session_course_id=feedback_session.course_id,
                correlation_id=str(correlation_id),
            )
            raise_authorization_error(
                service=SERVICE,
                operation=OPERATION,
                message=(
                    f"Course [{feedback_session.course_id}] is not accessible "
                    f"to instructor [{instructor.email}]"
                ),
                correlation_id=correlation_id,
                course_id=feedback_session.course_id,
            )

        allowed = instructor.is_allowed_for_privilege(privilege_name) or (
            is_section_restricted
            and instructor.is_allowed_for_privilege_in_any_section(privilege_name)
        )
        if not allowed:
            logger.warning(
                "Instructor lacks privilege for feedback session",
                privilege=privilege_name,
                feedback_session_name=feedback_session.feedback_session_name,
                correlation_id=str(correlation_id),
            )
            raise_authorization_error(
                service=SERVICE,
                operation=OPERATION,
                message=(
                    f"Feedback session [{feedback_session.feedback_session_name}] is not "
                    f"accessible to instructor [{instructor.email}] for privilege "
                    f"[{privilege_name}]"
                ),
                correlation_id=correlation_id,
                privilege=privilege_name,
            )
