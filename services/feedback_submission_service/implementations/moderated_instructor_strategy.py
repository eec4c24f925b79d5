"""Submission strategy for an instructor saving responses on behalf of another instructor."""

from __future__ import annotations

import httpx
from feedback_common.feedback_enums import FeedbackParticipantType, StatusMessageColor
from feedback_service_libs.error_handling import (
    FeedbackServiceError,
    raise_authorization_error,
    raise_resource_not_found,
)
from feedback_service_libs.logging_utils import create_service_logger

from services.feedback_submission_service.constants import (
    DEFAULT_SECTION,
    USER_TEAM_FOR_INSTRUCTOR,
    ActionURIs,
    ParamsNames,
    StatusMessages,
)
from services.feedback_submission_service.dto.feedback_v1 import (
    FeedbackSessionQuestionsBundleV1,
    FeedbackSessionV1,
    InstructorV1,
    RedirectResultV1,
)
from services.feedback_submission_service.implementations.submission_pipeline import (
    require_param,
)
from services.feedback_submission_service.metrics import SubmissionMetrics
from services.feedback_submission_service.protocols import (
    GateKeeperProtocol,
    LogicClientProtocol,
)
from services.feedback_submission_service.submission_models import (
    SubmissionRequestContext,
    SubmissionState,
)

logger = create_service_logger("feedback_submission.moderated_instructor")

SERVICE = "feedback_submission_service"
FLOW = "moderated_instructor"


class ModeratedInstructorSubmissionStrategy:
    """Saves responses for the moderated instructor named in the request.

    The acting instructor needs the modify-session-comment privilege, and may
    only answer questions whose giver, recipient and response are all visible
    to instructors. The session's open/close window does not apply.
    """

    def __init__(
        self,
        logic_client: LogicClientProtocol,
        gatekeeper: GateKeeperProtocol,
        metrics: SubmissionMetrics,
    ) -> None:
        self._logic = logic_client
        self._gatekeeper = gatekeeper
        self._metrics = metrics
        self._moderated_instructor: InstructorV1 | None = None

    @property
    def moderated_instructor(self) -> InstructorV1:
        if self._moderated_instructor is None:
            raise RuntimeError("Moderated instructor is resolved in set_additional_parameters")
        return self._moderated_instructor

    async def _get_acting_instructor(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> InstructorV1 | None:
        return await self._logic.get_instructor_for_google_id(
            state.course_id, context.account.google_id, context.correlation_id
        )

    async def verify_accessible(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None:
        instructor = await self._get_acting_instructor(context, state)
        feedback_session = await self._logic.get_feedback_session(
            state.feedback_session_name, state.course_id, context.correlation_id
        )

        self._gatekeeper.verify_accessible(
            instructor,
            feedback_session,
            False,
            ParamsNames.INSTRUCTOR_PERMISSION_MODIFY_SESSION_COMMENT_IN_SECTIONS,
            context.correlation_id,
        )

    async def set_additional_parameters(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None:
        moderated_email = require_param(
            context,
            ParamsNames.FEEDBACK_SESSION_MODERATED_INSTRUCTOR,
            "set_additional_parameters",
        )

        moderated_instructor = await self._logic.get_instructor_for_email(
            state.course_id, moderated_email, context.correlation_id
        )
        if moderated_instructor is None:
            raise_resource_not_found(
                service=SERVICE,
                operation="set_additional_parameters",
                resource_type="Instructor",
                resource_id=moderated_email,
                correlation_id=context.correlation_id,
                course_id=state.course_id,
            )
        self._moderated_instructor = moderated_instructor

    def get_user_email_for_course(self) -> str:
        return self.moderated_instructor.email

    def get_user_team_for_course(self) -> str:
        return USER_TEAM_FOR_INSTRUCTOR

    def get_user_section_for_course(self) -> str:
        return DEFAULT_SECTION

    async def get_data_bundle(
        self, context: SubmissionRequestContext, state: SubmissionState, user_email: str
    ) -> FeedbackSessionQuestionsBundleV1:
        return await self._logic.get_questions_bundle_for_instructor(
            state.feedback_session_name, state.course_id, user_email, context.correlation_id
        )

    async def check_additional_constraints(
        self,
        context: SubmissionRequestContext,
        state: SubmissionState,
        bundle: FeedbackSessionQuestionsBundleV1,
    ) -> None:
        """Reject answers to questions the moderator should not be able to see.

        Ids that no longer resolve are reported to the user and skipped; a
        resolvable question that is not fully visible to instructors aborts
        the request.
        """
        instructor = await self._get_acting_instructor(context, state)
        acting_email = instructor.email if instructor else context.account.email

        for question_index in range(1, bundle.question_count + 1):
            question_id = context.get_param(f"{ParamsNames.FEEDBACK_QUESTION_ID}-{question_index}")

            if question_id is None:
                # question was not on the page the moderator edited
                continue

            question = bundle.get_question_attributes(question_id)

            if question is None:
                state.add_status(
                    StatusMessages.FEEDBACK_QUESTIONS_CHANGED, StatusMessageColor.WARNING
                )
                state.is_error = True
                self._metrics.unresolved_questions_total.labels(flow=FLOW).inc()
                logger.warning(
                    "Question not found. (deleted or invalid id passed?)",
                    question_id=question_id,
                    question_index=question_index,
                    correlation_id=str(context.correlation_id),
                )
                continue

            if not question.is_fully_visible_to(FeedbackParticipantType.INSTRUCTORS):
                state.is_error = True
                raise_authorization_error(
                    service=SERVICE,
                    operation="check_additional_constraints",
                    message=(
                        f"Feedback session [{state.feedback_session_name}] question "
                        f"[{question.question_id}] is not accessible to instructor "
                        f"[{acting_email}]"
                    ),
                    correlation_id=context.correlation_id,
                    question_id=question.question_id,
                )

    def set_status_to_admin(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None:
        moderated = self.moderated_instructor
        state.status_to_admin = (
            "Instructor moderated instructor session<br>"
            f"Instructor: {context.account.email}<br>"
            f"Moderated Instructor: {moderated.email}<br>"
            f"Session Name: {state.feedback_session_name}<br>"
            f"Course ID: {state.course_id}"
        )
        logger.info(
            "Instructor moderated instructor session",
            instructor_email=context.account.email,
            moderated_instructor_email=moderated.email,
            feedback_session_name=state.feedback_session_name,
            course_id=state.course_id,
            correlation_id=str(context.correlation_id),
        )

    def is_session_open(self, feedback_session: FeedbackSessionV1) -> bool:
        # Instructors can moderate at any time, regardless of the closing date
        return True

    async def append_respondent(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None:
        try:
            await self._logic.add_instructor_respondent(
                self.get_user_email_for_course(),
                state.feedback_session_name,
                state.course_id,
                context.correlation_id,
            )
        except (FeedbackServiceError, httpx.HTTPError) as e:
            self._record_respondent_failure("append", e, context)

    async def remove_respondent(
        self, context: SubmissionRequestContext, state: SubmissionState
    ) -> None:
        try:
            await self._logic.delete_instructor_respondent(
                self.get_user_email_for_course(),
                state.feedback_session_name,
                state.course_id,
                context.correlation_id,
            )
        except (FeedbackServiceError, httpx.HTTPError) as e:
            self._record_respondent_failure("remove", e, context)

    def _record_respondent_failure(
        self, operation: str, error: Exception, context: SubmissionRequestContext
    ) -> None:
        # responses are already stored; the respondent record is best effort
        self._metrics.respondent_update_failures_total.labels(operation=operation).inc()
        logger.error(
            f"Fail to {operation} instructor respondent",
            error_code=getattr(error, "error_code", None),
            error_type=type(error).__name__,
            error=str(error),
            correlation_id=str(context.correlation_id),
        )

    def create_redirect(self, state: SubmissionState) -> RedirectResultV1:
        moderated = self.moderated_instructor
        return RedirectResultV1(
            uri=ActionURIs.INSTRUCTOR_EDIT_INSTRUCTOR_FEEDBACK_PAGE,
            response_params={
                ParamsNames.COURSE_ID: moderated.course_id,
                ParamsNames.FEEDBACK_SESSION_NAME: state.feedback_session_name,
                ParamsNames.FEEDBACK_SESSION_MODERATED_STUDENT: moderated.email,
            },
        )
