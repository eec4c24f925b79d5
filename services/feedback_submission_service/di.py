"""Dependency Injection providers for Feedback Submission Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, from_context, provide
from fastapi import Request
from feedback_service_libs.error_handling import raise_authentication_error
from feedback_service_libs.logging_utils import create_service_logger
from prometheus_client import REGISTRY

from services.feedback_submission_service.clients.logic_client import LogicClientImpl
from services.feedback_submission_service.config import FeedbackSubmissionSettings, settings
from services.feedback_submission_service.dto.feedback_v1 import AccountV1
from services.feedback_submission_service.implementations.gatekeeper_impl import GateKeeperImpl
from services.feedback_submission_service.implementations.moderated_instructor_strategy import (
    ModeratedInstructorSubmissionStrategy,
)
from services.feedback_submission_service.implementations.submission_pipeline import (
    FeedbackSubmissionSavePipeline,
)
from services.feedback_submission_service.metrics import SubmissionMetrics
from services.feedback_submission_service.protocols import GateKeeperProtocol, LogicClientProtocol

logger = create_service_logger("feedback_submission.di")


class FeedbackSubmissionProvider(Provider):
    """Infrastructure provider for Feedback Submission Service.

    Provides APP-scoped dependencies: config, HTTP client, logic client,
    gatekeeper, pipeline and metrics; the per-request strategy is REQUEST-scoped.
    """

    scope = Scope.APP

    @provide
    def get_config(self) -> FeedbackSubmissionSettings:
        """Provide settings singleton."""
        return settings

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, config: FeedbackSubmissionSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            )
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_logic_client(self, http_client: httpx.AsyncClient) -> LogicClientProtocol:
        return LogicClientImpl(http_client)

    @provide(scope=Scope.APP)
    def provide_gatekeeper(self) -> GateKeeperProtocol:
        return GateKeeperImpl()

    @provide(scope=Scope.APP)
    def provide_metrics(self) -> SubmissionMetrics:
        return SubmissionMetrics(registry=REGISTRY)

    @provide(scope=Scope.APP)
    def provide_pipeline(
        self,
        logic_client: LogicClientProtocol,
        metrics: SubmissionMetrics,
        config: FeedbackSubmissionSettings,
    ) -> FeedbackSubmissionSavePipeline:
        return FeedbackSubmissionSavePipeline(
            logic_client,
            metrics,
            max_responses_per_question=config.MAX_RESPONSES_PER_QUESTION,
        )

    @provide(scope=Scope.REQUEST)
    def provide_moderated_instructor_strategy(
        self,
        logic_client: LogicClientProtocol,
        gatekeeper: GateKeeperProtocol,
        metrics: SubmissionMetrics,
    ) -> ModeratedInstructorSubmissionStrategy:
        """Fresh strategy per request; it holds the moderated instructor it resolves."""
        return ModeratedInstructorSubmissionStrategy(logic_client, gatekeeper, metrics)


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation and identity context.

    Reads the account from X-User-ID (google id) and X-User-Email headers
    injected by the API gateway, and correlation_id from request state (set
    by CorrelationIDMiddleware).
    """

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state."""
        return getattr(request.state, "correlation_id", uuid4())

    @provide(scope=Scope.REQUEST)
    def provide_account(self, request: Request, correlation_id: UUID) -> AccountV1:
        """Provide the logged-in account from gateway identity headers.

        Requests without these headers are rejected as unauthenticated.
        """
        google_id = request.headers.get("X-User-ID")
        email = request.headers.get("X-User-Email")
        if not google_id or not email:
            logger.error("Missing identity headers - request bypassed gateway auth")
            raise_authentication_error(
                service="feedback_submission_service",
                operation="provide_account",
                message="Missing X-User-ID or X-User-Email header - authentication required",
                correlation_id=correlation_id,
            )
        return AccountV1(google_id=google_id, email=email)
