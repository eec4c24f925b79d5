"""Request-scoped values passed through the submission save pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from uuid import UUID

from feedback_common.feedback_enums import StatusMessageColor

from services.feedback_submission_service.dto.feedback_v1 import (
    AccountV1,
    StatusMessageV1,
    SubmittedResponseV1,
)


@dataclass(frozen=True)
class SubmissionRequestContext:
    """Everything a save request carries in: who is acting and what was posted."""

    account: AccountV1
    params: Mapping[str, list[str]]
    correlation_id: UUID

    def get_param(self, name: str) -> str | None:
        values = self.params.get(name)
        if not values:
            return None
        return values[0]


@dataclass
class SubmissionState:
    """Mutable outcome of one save request."""

    course_id: str
    feedback_session_name: str
    status_to_user: list[StatusMessageV1] = field(default_factory=list)
    is_error: bool = False
    status_to_admin: str = ""

    def add_status(self, text: str, color: StatusMessageColor) -> None:
        self.status_to_user.append(StatusMessageV1(text=text, color=color))


@dataclass
class ResponseBundle:
    """Responses parsed from one request, keyed by question id."""

    responses: dict[str, list[SubmittedResponseV1]] = field(default_factory=dict)
    deleted_response_ids: list[str] = field(default_factory=list)

    def add(self, response: SubmittedResponseV1) -> None:
        self.responses.setdefault(response.question_id, []).append(response)

    @property
    def response_count(self) -> int:
        return sum(len(items) for items in self.responses.values())
