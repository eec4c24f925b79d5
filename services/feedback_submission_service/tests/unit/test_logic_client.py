"""Unit tests for the course logic service client."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from urllib.parse import quote
from uuid import uuid4

import httpx
import pytest
from feedback_common.error_enums import ErrorCode
from feedback_service_libs.error_handling import FeedbackServiceError
from respx import MockRouter

from services.feedback_submission_service.clients.logic_client import LogicClientImpl
from services.feedback_submission_service.config import settings
from services.feedback_submission_service.dto.feedback_v1 import (
    SaveResponsesRequestV1,
    SubmittedResponseV1,
)
from services.feedback_submission_service.tests.builders import (
    ACTING_GOOGLE_ID,
    COURSE_ID,
    MODERATED_EMAIL,
    SESSION_NAME,
    bundle_json,
    instructor_json,
    question_json,
    session_json,
)

CORRELATION_ID = uuid4()
COURSE_URL = f"{settings.LOGIC_SERVICE_URL}/internal/v1/courses/{quote(COURSE_ID, safe='')}"
SESSION_URL = f"{COURSE_URL}/sessions/{quote(SESSION_NAME, safe='')}"


@pytest.fixture
async def logic_client() -> AsyncIterator[LogicClientImpl]:
    """Create logic client with real httpx client for respx mocking."""
    async with httpx.AsyncClient() as http_client:
        yield LogicClientImpl(http_client)


@pytest.mark.asyncio
async def test_get_instructor_for_google_id_success(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test instructor lookup sends internal auth headers and parses the body."""
    route = respx_mock.get(f"{COURSE_URL}/instructors/by-google-id/{ACTING_GOOGLE_ID}").mock(
        return_value=httpx.Response(200, json=instructor_json())
    )

    instructor = await logic_client.get_instructor_for_google_id(
        COURSE_ID, ACTING_GOOGLE_ID, CORRELATION_ID
    )

    assert instructor is not None
    assert instructor.google_id == ACTING_GOOGLE_ID
    headers = route.calls.last.request.headers
    assert headers["X-Correlation-ID"] == str(CORRELATION_ID)
    assert headers["X-Service-ID"] == settings.SERVICE_NAME
    assert "X-Internal-API-Key" in headers


@pytest.mark.asyncio
async def test_get_instructor_for_email_not_found_returns_none(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test a 404 on an optional lookup is reported as absence."""
    respx_mock.get(f"{COURSE_URL}/instructors/by-email?email={MODERATED_EMAIL}").mock(
        return_value=httpx.Response(404, json={"error": "not found"})
    )

    instructor = await logic_client.get_instructor_for_email(
        COURSE_ID, MODERATED_EMAIL, CORRELATION_ID
    )

    assert instructor is None


@pytest.mark.asyncio
async def test_get_feedback_session_success(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test session names are URL-quoted into the path."""
    respx_mock.get(SESSION_URL).mock(return_value=httpx.Response(200, json=session_json()))

    feedback_session = await logic_client.get_feedback_session(
        SESSION_NAME, COURSE_ID, CORRELATION_ID
    )

    assert feedback_session is not None
    assert feedback_session.feedback_session_name == SESSION_NAME
    assert feedback_session.course_id == COURSE_ID


@pytest.mark.asyncio
async def test_get_questions_bundle_success(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test bundle retrieval for the instructor whose answers are being edited."""
    respx_mock.get(f"{SESSION_URL}/questions-bundle?instructor_email={MODERATED_EMAIL}").mock(
        return_value=httpx.Response(
            200, json=bundle_json(question_json("q-1", 1), question_json("q-2", 2))
        )
    )

    bundle = await logic_client.get_questions_bundle_for_instructor(
        SESSION_NAME, COURSE_ID, MODERATED_EMAIL, CORRELATION_ID
    )

    assert bundle.question_count == 2
    assert bundle.get_question_attributes("q-2") is not None
    assert bundle.get_question_attributes("missing") is None


@pytest.mark.asyncio
async def test_get_questions_bundle_not_found_raises(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test a missing session surfaces as RESOURCE_NOT_FOUND."""
    respx_mock.get(f"{SESSION_URL}/questions-bundle?instructor_email={MODERATED_EMAIL}").mock(
        return_value=httpx.Response(404)
    )

    with pytest.raises(FeedbackServiceError) as exc_info:
        await logic_client.get_questions_bundle_for_instructor(
            SESSION_NAME, COURSE_ID, MODERATED_EMAIL, CORRELATION_ID
        )

    assert exc_info.value.error_code == ErrorCode.RESOURCE_NOT_FOUND.value
    assert exc_info.value.error_detail.details["resource_id"] == SESSION_NAME


@pytest.mark.asyncio
async def test_save_responses_returns_stored_count(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test the save payload and the stored response count."""
    route = respx_mock.post(f"{SESSION_URL}/responses").mock(
        return_value=httpx.Response(200, json={"stored_response_count": 3})
    )
    request = SaveResponsesRequestV1(
        giver_email=MODERATED_EMAIL,
        giver_team="Instructors",
        giver_section="None",
        responses={
            "q-1": [
                SubmittedResponseV1(
                    question_id="q-1", recipient_email="alice@school.edu", answer="Good"
                )
            ]
        },
        deleted_response_ids=["r-9"],
    )

    stored = await logic_client.save_responses(SESSION_NAME, COURSE_ID, request, CORRELATION_ID)

    assert stored == 3
    body = route.calls.last.request.read()
    assert SaveResponsesRequestV1.model_validate_json(body) == request


@pytest.mark.asyncio
async def test_save_responses_malformed_body_raises_invalid_response(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test a non-JSON success body is rejected."""
    respx_mock.post(f"{SESSION_URL}/responses").mock(
        return_value=httpx.Response(200, text="<html>oops</html>")
    )
    request = SaveResponsesRequestV1(
        giver_email=MODERATED_EMAIL, giver_team="Instructors", giver_section="None"
    )

    with pytest.raises(FeedbackServiceError) as exc_info:
        await logic_client.save_responses(SESSION_NAME, COURSE_ID, request, CORRELATION_ID)

    assert exc_info.value.error_code == ErrorCode.INVALID_RESPONSE.value


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, expected_code",
    [
        (400, ErrorCode.INVALID_REQUEST),
        (422, ErrorCode.INVALID_REQUEST),
        (403, ErrorCode.AUTHORIZATION_ERROR),
        (500, ErrorCode.EXTERNAL_SERVICE_ERROR),
        (503, ErrorCode.EXTERNAL_SERVICE_ERROR),
    ],
)
async def test_add_instructor_respondent_error_translation(
    logic_client: LogicClientImpl,
    respx_mock: MockRouter,
    status_code: int,
    expected_code: ErrorCode,
) -> None:
    """Test non-success statuses map onto service error codes."""
    respx_mock.post(f"{SESSION_URL}/respondents/instructors").mock(
        return_value=httpx.Response(status_code)
    )

    with pytest.raises(FeedbackServiceError) as exc_info:
        await logic_client.add_instructor_respondent(
            MODERATED_EMAIL, SESSION_NAME, COURSE_ID, CORRELATION_ID
        )

    assert exc_info.value.error_code == expected_code.value


@pytest.mark.asyncio
async def test_add_instructor_respondent_success(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test the respondent email is posted as JSON."""
    route = respx_mock.post(f"{SESSION_URL}/respondents/instructors").mock(
        return_value=httpx.Response(204)
    )

    await logic_client.add_instructor_respondent(
        MODERATED_EMAIL, SESSION_NAME, COURSE_ID, CORRELATION_ID
    )

    assert json.loads(route.calls.last.request.content) == {"email": MODERATED_EMAIL}


@pytest.mark.asyncio
async def test_delete_instructor_respondent_success(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test respondent removal addresses the instructor by email in the path."""
    route = respx_mock.delete(
        f"{SESSION_URL}/respondents/instructors/{quote(MODERATED_EMAIL, safe='')}"
    ).mock(return_value=httpx.Response(204))

    await logic_client.delete_instructor_respondent(
        MODERATED_EMAIL, SESSION_NAME, COURSE_ID, CORRELATION_ID
    )

    assert route.called


@pytest.mark.asyncio
async def test_connection_failure_propagates(
    logic_client: LogicClientImpl, respx_mock: MockRouter
) -> None:
    """Test transport failures are left for the route to translate."""
    respx_mock.get(SESSION_URL).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(httpx.ConnectError):
        await logic_client.get_feedback_session(SESSION_NAME, COURSE_ID, CORRELATION_ID)
