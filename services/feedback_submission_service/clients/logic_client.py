"""Course logic service HTTP client."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote
from uuid import UUID

import httpx
from feedback_service_libs.error_handling import (
    raise_authorization_error,
    raise_external_service_error,
    raise_invalid_request,
    raise_invalid_response,
    raise_resource_not_found,
)
from feedback_service_libs.logging_utils import create_service_logger
from pydantic import ValidationError

from services.feedback_submission_service.clients._utils import build_internal_auth_headers
from services.feedback_submission_service.config import settings
from services.feedback_submission_service.dto.feedback_v1 import (
    FeedbackSessionQuestionsBundleV1,
    FeedbackSessionV1,
    InstructorV1,
    SaveResponsesRequestV1,
    SaveResponsesResultV1,
)

logger = create_service_logger("feedback_submission.logic_client")

SERVICE = "feedback_submission_service"
EXTERNAL_SERVICE = "course_logic_service"


def _segment(value: str) -> str:
    return quote(value, safe="")


class LogicClientImpl:
    """HTTP client for the course logic service internal API.

    Lookups that may legitimately find nothing return None on 404; every
    other non-success status is translated into a FeedbackServiceError.
    Connection failures and timeouts propagate as httpx exceptions.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
        """
        self._client = http_client

    def _course_url(self, course_id: str) -> str:
        return f"{settings.LOGIC_SERVICE_URL}/internal/v1/courses/{_segment(course_id)}"

    def _session_url(self, course_id: str, feedback_session_name: str) -> str:
        return f"{self._course_url(course_id)}/sessions/{_segment(feedback_session_name)}"

    def _check_response(
        self,
        response: httpx.Response,
        operation: str,
        resource_type: str,
        resource_id: str,
        correlation_id: UUID,
    ) -> None:
        status_code = response.status_code
        if status_code < 400:
            return

        logger.warning(
            "Logic service request failed",
            operation=operation,
            status_code=status_code,
            correlation_id=str(correlation_id),
        )
        if status_code == 404:
            raise_resource_not_found(
                service=SERVICE,
                operation=operation,
                resource_type=resource_type,
                resource_id=resource_id,
                correlation_id=correlation_id,
            )
        if status_code in (400, 422):
            raise_invalid_request(
                service=SERVICE,
                operation=operation,
                message=f"Logic service rejected parameters for {resource_type} '{resource_id}'",
                correlation_id=correlation_id,
                status_code=status_code,
            )
        if status_code == 403:
            raise_authorization_error(
                service=SERVICE,
                operation=operation,
                message=f"Logic service denied access to {resource_type} '{resource_id}'",
                correlation_id=correlation_id,
            )
        raise_external_service_error(
            service=SERVICE,
            operation=operation,
            external_service=EXTERNAL_SERVICE,
            message=f"Logic service returned HTTP {status_code}",
            correlation_id=correlation_id,
            status_code=status_code,
        )

    def _parse(
        self, response: httpx.Response, model: type[Any], operation: str, correlation_id: UUID
    ) -> Any:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise_invalid_response(
                service=SERVICE,
                operation=operation,
                message=f"Malformed {model.__name__} from logic service: {e}",
                correlation_id=correlation_id,
            )

    async def _get_optional(
        self,
        url: str,
        model: type[Any],
        operation: str,
        resource_type: str,
        resource_id: str,
        correlation_id: UUID,
        params: dict[str, str] | None = None,
    ) -> Any:
        response = await self._client.get(
            url, params=params, headers=build_internal_auth_headers(correlation_id)
        )
        if response.status_code == 404:
            logger.debug(
                f"{resource_type} not found in logic service",
                resource_id=resource_id,
                correlation_id=str(correlation_id),
            )
            return None
        self._check_response(response, operation, resource_type, resource_id, correlation_id)
        return self._parse(response, model, operation, correlation_id)

    async def get_instructor_for_google_id(
        self, course_id: str, google_id: str, correlation_id: UUID
    ) -> InstructorV1 | None:
        url = f"{self._course_url(course_id)}/instructors/by-google-id/{_segment(google_id)}"
        return await self._get_optional(
            url,
            InstructorV1,
            "get_instructor_for_google_id",
            "Instructor",
            google_id,
            correlation_id,
        )

    async def get_instructor_for_email(
        self, course_id: str, email: str, correlation_id: UUID
    ) -> InstructorV1 | None:
        url = f"{self._course_url(course_id)}/instructors/by-email"
        return await self._get_optional(
            url,
            InstructorV1,
            "get_instructor_for_email",
            "Instructor",
            email,
            correlation_id,
            params={"email": email},
        )

    async def get_feedback_session(
        self, feedback_session_name: str, course_id: str, correlation_id: UUID
    ) -> FeedbackSessionV1 | None:
        return await self._get_optional(
            self._session_url(course_id, feedback_session_name),
            FeedbackSessionV1,
            "get_feedback_session",
            "FeedbackSession",
            feedback_session_name,
            correlation_id,
        )

    async def get_questions_bundle_for_instructor(
        self,
        feedback_session_name: str,
        course_id: str,
        instructor_email: str,
        correlation_id: UUID,
    ) -> FeedbackSessionQuestionsBundleV1:
        operation = "get_questions_bundle_for_instructor"
        url = f"{self._session_url(course_id, feedback_session_name)}/questions-bundle"

        response = await self._client.get(
            url,
            params={"instructor_email": instructor_email},
            headers=build_internal_auth_headers(correlation_id),
        )
        self._check_response(
            response, operation, "FeedbackSession", feedback_session_name, correlation_id
        )
        bundle = self._parse(response, FeedbackSessionQuestionsBundleV1, operation, correlation_id)

        logger.info(
            "Fetched questions bundle from logic service",
            feedback_session_name=feedback_session_name,
            course_id=course_id,
            question_count=bundle.question_count,
            correlation_id=str(correlation_id),
        )
        return bundle

    async def save_responses(
        self,
        feedback_session_name: str,
        course_id: str,
        request: SaveResponsesRequestV1,
        correlation_id: UUID,
    ) -> int:
        operation = "save_responses"
        url = f"{self._session_url(course_id, feedback_session_name)}/responses"

        response = await self._client.post(
            url,
            json=request.model_dump(mode="json"),
            headers=build_internal_auth_headers(correlation_id),
        )
        self._check_response(
            response, operation, "FeedbackSession", feedback_session_name, correlation_id
        )
        result = self._parse(response, SaveResponsesResultV1, operation, correlation_id)

        logger.info(
            "Saved feedback responses",
            feedback_session_name=feedback_session_name,
            course_id=course_id,
            submitted_count=sum(len(items) for items in request.responses.values()),
            deleted_count=len(request.deleted_response_ids),
            stored_count=result.stored_response_count,
            correlation_id=str(correlation_id),
        )
        return result.stored_response_count

    async def add_instructor_respondent(
        self, email: str, feedback_session_name: str, course_id: str, correlation_id: UUID
    ) -> None:
        url = f"{self._session_url(course_id, feedback_session_name)}/respondents/instructors"
        response = await self._client.post(
            url, json={"email": email}, headers=build_internal_auth_headers(correlation_id)
        )
        self._check_response(
            response,
            "add_instructor_respondent",
            "FeedbackSession",
            feedback_session_name,
            correlation_id,
        )

    async def delete_instructor_respondent(
        self, email: str, feedback_session_name: str, course_id: str, correlation_id: UUID
    ) -> None:
        url = (
            f"{self._session_url(course_id, feedback_session_name)}"
            f"/respondents/instructors/{_segment(email)}"
        )
        response = await self._client.delete(
            url, headers=build_internal_auth_headers(correlation_id)
        )
        self._check_response(
            response,
            "delete_instructor_respondent",
            "FeedbackSession",
            feedback_session_name,
            correlation_id,
        )
