"""Test providers for Feedback Submission Service tests.

Provides Dishka DI test providers replacing gateway identity and the
Prometheus default registry.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from unittest.mock import Mock
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, provide
from fastapi import Request
from prometheus_client import CollectorRegistry

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


class AuthTestProvider(Provider):
    """Test authentication provider for mock account and correlation_id.

    Replaces RequestContextProvider in tests.
    """

    def __init__(
        self,
        google_id: str = "acting.instructor",
        email: str = "acting@school.edu",
        correlation_id: UUID | None = None,
    ):
        super().__init__()
        self.account = AccountV1(google_id=google_id, email=email)
        self.correlation_id = correlation_id or uuid4()

    @provide(scope=Scope.REQUEST)
    def provide_mock_request(self) -> Request:
        """Provide mock request with correlation_id in state."""
        mock_request = Mock(spec=Request)
        mock_request.state.correlation_id = self.correlation_id
        mock_request.headers = {
            "X-User-ID": self.account.google_id,
            "X-User-Email": self.account.email,
        }
        return mock_request

    @provide(scope=Scope.REQUEST)
    def provide_account(self) -> AccountV1:
        return self.account

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self) -> UUID:
        return self.correlation_id


class InfrastructureTestProvider(Provider):
    """Test provider for service infrastructure.

    Provides a real httpx.AsyncClient for respx mocking and a private metrics
    registry so containers can be rebuilt per test.
    """

    scope = Scope.APP

    @provide
    def get_config(self) -> FeedbackSubmissionSettings:
        return settings

    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Provide real HTTP client for respx mocking."""
        async with httpx.AsyncClient() as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_logic_client(self, http_client: httpx.AsyncClient) -> LogicClientProtocol:
        return LogicClientImpl(http_client)

    @provide(scope=Scope.APP)
    def provide_gatekeeper(self) -> GateKeeperProtocol:
        return GateKeeperImpl()

    @provide(scope=Scope.APP)
    def provide_metrics(self) -> SubmissionMetrics:
        return SubmissionMetrics(registry=CollectorRegistry())

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
    def provide_strategy(
        self,
        logic_client: LogicClientProtocol,
        gatekeeper: GateKeeperProtocol,
        metrics: SubmissionMetrics,
    ) -> ModeratedInstructorSubmissionStrategy:
        return ModeratedInstructorSubmissionStrategy(logic_client, gatekeeper, metrics)
