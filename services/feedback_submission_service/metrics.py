"""Metrics definitions for the Feedback Submission Service."""

from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter


class SubmissionMetrics:
    """A container for all Prometheus metrics for the service."""

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.submissions_total = Counter(
            "fss_submissions_total",
            "Total number of feedback save requests that reached the save stage.",
            ["flow", "outcome"],
            registry=registry,
        )
        self.unresolved_questions_total = Counter(
            "fss_unresolved_questions_total",
            "Submitted question ids that no longer exist in the session.",
            ["flow"],
            registry=registry,
        )
        self.respondent_update_failures_total = Counter(
            "fss_respondent_update_failures_total",
            "Failed best-effort respondent record updates.",
            ["operation"],
            registry=registry,
        )
