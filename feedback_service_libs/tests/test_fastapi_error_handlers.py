"""Tests for the FastAPI exception handlers."""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
from fastapi import FastAPI
from feedback_common.error_enums import ErrorCode
from feedback_service_libs.error_handling import (
    raise_authorization_error,
    raise_external_service_error,
    raise_missing_required_field,
    raise_processing_error,
)
from feedback_service_libs.error_handling.fastapi import (
    ERROR_CODE_TO_STATUS,
    register_error_handlers,
)
from httpx import ASGITransport, AsyncClient

CORRELATION_ID = uuid4()


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/forbidden")
    async def forbidden() -> None:
        raise_authorization_error(
            service="test_service",
            operation="forbidden",
            message="Not for you",
            correlation_id=CORRELATION_ID,
            privilege="canmodifysession",
        )

    @app.get("/missing")
    async def missing() -> None:
        raise_missing_required_field(
            service="test_service",
            operation="missing",
            field_name="courseid",
            correlation_id=CORRELATION_ID,
        )

    @app.get("/upstream")
    async def upstream() -> None:
        raise_external_service_error(
            service="test_service",
            operation="upstream",
            external_service="course_logic_service",
            message="Upstream failed",
            correlation_id=CORRELATION_ID,
            status_code=500,
        )

    @app.get("/processing")
    async def processing() -> None:
        raise_processing_error(
            service="test_service",
            operation="processing",
            message="Unexpected state",
            correlation_id=CORRELATION_ID,
        )

    return app


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=_build_app()), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_error_body_shape(client: AsyncClient) -> None:
    """Test the structured error body returned for a service error."""
    response = await client.get("/forbidden")

    assert response.status_code == 403
    assert response.json() == {
        "error": {
            "code": "AUTHORIZATION_ERROR",
            "message": "Not for you",
            "correlation_id": str(CORRELATION_ID),
            "service": "test_service",
            "operation": "forbidden",
            "details": {"privilege": "canmodifysession"},
        }
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, expected_status",
    [("/missing", 400), ("/upstream", 502), ("/processing", 500)],
)
async def test_status_mapping(client: AsyncClient, path: str, expected_status: int) -> None:
    response = await client.get(path)

    assert response.status_code == expected_status


def test_every_client_error_code_is_mapped() -> None:
    for code in (
        ErrorCode.VALIDATION_ERROR,
        ErrorCode.MISSING_REQUIRED_FIELD,
        ErrorCode.INVALID_REQUEST,
        ErrorCode.AUTHENTICATION_ERROR,
        ErrorCode.AUTHORIZATION_ERROR,
        ErrorCode.RESOURCE_NOT_FOUND,
    ):
        assert 400 <= ERROR_CODE_TO_STATUS[code.value] < 500
