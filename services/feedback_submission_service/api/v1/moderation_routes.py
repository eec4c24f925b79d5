"""Moderation API v1 routes.

Endpoints used by the instructor "edit responses of another participant" page.
"""

from __future__ import annotations

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Request
from feedback_service_libs.error_handling import raise_connection_error, raise_timeout_error
from feedback_service_libs.logging_utils import create_service_logger
from httpx import ConnectError, TimeoutException

from services.feedback_submission_service.config import FeedbackSubmissionSettings
from services.feedback_submission_service.dto.feedback_v1 import (
    AccountV1,
    SubmissionResultResponseV1,
)
from services.feedback_submission_service.implementations.moderated_instructor_strategy import (
    FLOW,
    ModeratedInstructorSubmissionStrategy,
)
from services.feedback_submission_service.implementations.submission_pipeline import (
    FeedbackSubmissionSavePipeline,
)
from services.feedback_submission_service.submission_models import SubmissionRequestContext

router = APIRouter()
logger = create_service_logger("feedback_submission.moderation_routes")


async def read_request_params(request: Request) -> dict[str, list[str]]:
    """Return posted form fields as name -> list of values."""
    form = await request.form()
    return {key: [str(value) for value in form.getlist(key)] for key in form.keys()}


@router.post("/instructor/moderation/responses", response_model=SubmissionResultResponseV1)
@inject
async def save_moderated_instructor_responses(
    request: Request,
    pipeline: FromDishka[FeedbackSubmissionSavePipeline],
    strategy: FromDishka[ModeratedInstructorSubmissionStrategy],
    account: FromDishka[AccountV1],
    correlation_id: FromDishka[UUID],
    config: FromDishka[FeedbackSubmissionSettings],
) -> SubmissionResultResponseV1:
    """Save responses an instructor entered on behalf of another instructor.

    Form fields: ``courseid``, ``fsname``, ``moderatedinstructor`` and, per
    question index ``i``, ``questionid-i``, ``questionresponsetotal-i`` plus
    ``responserecipient-i-j`` / ``responsetext-i-j`` / ``responseid-i-j``.
    """
    context = SubmissionRequestContext(
        account=account,
        params=await read_request_params(request),
        correlation_id=correlation_id,
    )

    try:
        return await pipeline.execute(context, strategy, flow=FLOW)
    except TimeoutException as e:
        logger.error(
            "Logic service timeout",
            error=str(e),
            correlation_id=str(correlation_id),
        )
        raise_timeout_error(
            service="feedback_submission_service",
            operation="save_moderated_instructor_responses",
            timeout_seconds=config.HTTP_CLIENT_TIMEOUT_SECONDS,
            message="Logic service request timed out",
            correlation_id=correlation_id,
        )
    except ConnectError as e:
        logger.error(
            "Logic service connection error",
            error=str(e),
            correlation_id=str(correlation_id),
        )
        raise_connection_error(
            service="feedback_submission_service",
            operation="save_moderated_instructor_responses",
            target="course_logic_service",
            message="Failed to connect to logic service",
            correlation_id=correlation_id,
        )
