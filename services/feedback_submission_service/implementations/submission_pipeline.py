"""Generic save pipeline for feedback session submissions.

The pipeline owns the steps every submission flow shares: reading the course
and session parameters, parsing the submitted responses, persisting them and
maintaining the respondent record. Flow-specific decisions are delegated to a
SubmissionStrategyProtocol supplied per request.
"""

from __future__ import annotations

from feedback_common.feedback_enums import StatusMessageColor
from feedback_service_libs.error_handling import (
    raise_missing_required_field,
    raise_validation_error,
)
from feedback_service_libs.logging_utils import create_service_logger

from services.feedback_submission_service.config import settings
from services.feedback_submission_service.constants import ParamsNames, StatusMessages
from services.feedback_submission_service.dto.feedback_v1 import (
    FeedbackSessionQuestionsBundleV1,
    SaveResponsesRequestV1,
    SubmissionResultResponseV1,
    SubmittedResponseV1,
)
from services.feedback_submission_service.metrics import SubmissionMetrics
from services.feedback_submission_service.protocols import (
    LogicClientProtocol,
    SubmissionStrategyProtocol,
)
from services.feedback_submission_service.submission_models import (
    ResponseBundle,
    SubmissionRequestContext,
    SubmissionState,
)

logger = create_service_logger("feedback_submission.pipeline")

SERVICE = "feedback_submission_service"


def require_param(context: SubmissionRequestContext, name: str, operation: str) -> str:
    """Return a posted parameter, failing the request when it is absent."""
    value = context.get_param(name)
    if value is None:
        raise_missing_required_field(
            service=SERVICE,
            operation=operation,
            field_name=name,
            correlation_id=context.correlation_id,
        )
    return value


class FeedbackSubmissionSavePipeline:
    """Runs one submission save request from authorization to redirect."""

    def __init__(
        self,
        logic_client: LogicClientProtocol,
        metrics: SubmissionMetrics,
        max_responses_per_question: int = settings.MAX_RESPONSES_PER_QUESTION,
    ) -> None:
        self._logic = logic_client
        self._metrics = metrics
        self._max_responses_per_question = max_responses_per_question

    async def execute(
        self,
        context: SubmissionRequestContext,
        strategy: SubmissionStrategyProtocol,
        flow: str,
    ) -> SubmissionResultResponseV1:
        state = SubmissionState(
            course_id=require_param(context, ParamsNames.COURSE_ID, "execute"),
            feedback_session_name=require_param(
                context, ParamsNames.FEEDBACK_SESSION_NAME, "execute"
            ),
        )

        await strategy.verify_accessible(context, state)
        await strategy.set_additional_parameters(context, state)

        user_email = strategy.get_user_email_for_course()
        bundle = await strategy.get_data_bundle(context, state, user_email)
        strategy.set_status_to_admin(context, state)

        if not strategy.is_session_open(bundle.feedback_session):
            state.is_error = True
            state.add_status(
                StatusMessages.FEEDBACK_SUBMISSIONS_NOT_OPEN, StatusMessageColor.WARNING
            )
            self._metrics.submissions_total.labels(flow=flow, outcome="session_closed").inc()
            return self._build_result(strategy, state)

        await strategy.check_additional_constraints(context, state, bundle)

        responses = self.extract_responses(context, state, bundle)
        stored_count = await self._logic.save_responses(
            state.feedback_session_name,
            state.course_id,
            SaveResponsesRequestV1(
                giver_email=user_email,
                giver_team=strategy.get_user_team_for_course(),
                giver_section=strategy.get_user_section_for_course(),
                responses=responses.responses,
                deleted_response_ids=responses.deleted_response_ids,
            ),
            context.correlation_id,
        )

        if not state.is_error:
            state.add_status(StatusMessages.FEEDBACK_RESPONSES_SAVED, StatusMessageColor.SUCCESS)

        if stored_count > 0:
            await strategy.append_respondent(context, state)
        else:
            await strategy.remove_respondent(context, state)

        outcome = "saved_with_errors" if state.is_error else "saved"
        self._metrics.submissions_total.labels(flow=flow, outcome=outcome).inc()
        logger.info(
            "Feedback submission saved",
            flow=flow,
            course_id=state.course_id,
            feedback_session_name=state.feedback_session_name,
            submitted_count=responses.response_count,
            stored_count=stored_count,
            is_error=state.is_error,
        )
        return self._build_result(strategy, state)

    def extract_responses(
        self,
        context: SubmissionRequestContext,
        state: SubmissionState,
        bundle: FeedbackSessionQuestionsBundleV1,
    ) -> ResponseBundle:
        """Collect the posted responses of every question that still exists in the session.

        Blank answers delete the stored response they refer to, if any.
        """
        result = ResponseBundle()

        for question_index in range(1, bundle.question_count + 1):
            question_id = context.get_param(f"{ParamsNames.FEEDBACK_QUESTION_ID}-{question_index}")
            if question_id is None:
                continue
            question = bundle.get_question_attributes(question_id)
            if question is None:
                continue

            total = self._response_total(context, question_index)
            for response_index in range(total):
                suffix = f"{question_index}-{response_index}"
                answer = context.get_param(f"{ParamsNames.FEEDBACK_RESPONSE_TEXT}-{suffix}") or ""
                recipient = context.get_param(f"{ParamsNames.FEEDBACK_RESPONSE_RECIPIENT}-{suffix}")
                response_id = context.get_param(f"{ParamsNames.FEEDBACK_RESPONSE_ID}-{suffix}")

                if not answer.strip():
                    if response_id:
                        result.deleted_response_ids.append(response_id)
                    continue

                if not recipient:
                    state.is_error = True
                    state.add_status(
                        f"Recipient for question {question.question_number} "
                        f"response {response_index + 1} is missing.",
                        StatusMessageColor.DANGER,
                    )
                    continue

                result.add(
                    SubmittedResponseV1(
                        question_id=question_id,
                        recipient_email=recipient,
                        answer=answer,
                        response_id=response_id or None,
                    )
                )

        return result

    def _response_total(self, context: SubmissionRequestContext, question_index: int) -> int:
        name = f"{ParamsNames.FEEDBACK_RESPONSE_TOTAL}-{question_index}"
        raw = context.get_param(name)
        if raw is None:
            return 0
        try:
            total = int(raw)
        except ValueError:
            total = -1
        if total < 0:
            raise_validation_error(
                service=SERVICE,
                operation="extract_responses",
                field=name,
                message="Response total must be a non-negative integer",
                correlation_id=context.correlation_id,
                value=raw,
            )
        if total > self._max_responses_per_question:
            raise_validation_error(
                service=SERVICE,
                operation="extract_responses",
                field=name,
                message=(
                    "Response total exceeds the limit of "
                    f"{self._max_responses_per_question} per question"
                ),
                correlation_id=context.correlation_id,
                value=raw,
                max_responses_per_question=self._max_responses_per_question,
            )
        return total

    def _build_result(
        self, strategy: SubmissionStrategyProtocol, state: SubmissionState
    ) -> SubmissionResultResponseV1:
        return SubmissionResultResponseV1(
            redirect=strategy.create_redirect(state),
            status_to_user=state.status_to_user,
            is_error=state.is_error,
        )
