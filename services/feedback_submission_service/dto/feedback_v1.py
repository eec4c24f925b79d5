"""Feedback submission v1 DTOs.

Two groups of models live here: the client-facing result of a save request,
and the internal models used to deserialize course logic service responses.

DTOs use feedback_common enums for consistency with backend services.
"""

from __future__ import annotations

from datetime import datetime

from feedback_common.feedback_enums import FeedbackParticipantType, StatusMessageColor
from pydantic import BaseModel, Field

# --- Client-facing models ---


class StatusMessageV1(BaseModel):
    """Message shown to the user after the save completes."""

    text: str
    color: StatusMessageColor


class RedirectResultV1(BaseModel):
    """Page the frontend should navigate to, with its query parameters."""

    uri: str
    response_params: dict[str, str] = Field(default_factory=dict)


class SubmissionResultResponseV1(BaseModel):
    """Result of a moderated feedback save."""

    redirect: RedirectResultV1
    status_to_user: list[StatusMessageV1] = Field(default_factory=list)
    is_error: bool = False


# --- Internal models for logic service deserialization ---


class AccountV1(BaseModel):
    """Logged-in account, taken from gateway identity headers."""

    google_id: str
    email: str


class InstructorV1(BaseModel):
    """Instructor of a course, with course-level and per-section privileges."""

    course_id: str
    email: str
    name: str = ""
    google_id: str | None = None
    role: str | None = None
    privileges: dict[str, bool] = Field(default_factory=dict)
    section_privileges: dict[str, dict[str, bool]] = Field(default_factory=dict)

    def is_allowed_for_privilege(self, privilege_name: str) -> bool:
        return self.privileges.get(privilege_name, False)

    def is_allowed_for_privilege_in_any_section(self, privilege_name: str) -> bool:
        return any(
            section.get(privilege_name, False) for section in self.section_privileges.values()
        )


class FeedbackSessionV1(BaseModel):
    """Feedback session summary from GET /internal/v1/courses/{c}/sessions/{s}."""

    feedback_session_name: str
    course_id: str
    creator_email: str = ""
    start_time: datetime | None = None
    end_time: datetime | None = None


class FeedbackQuestionV1(BaseModel):
    """Question of a session, with its visibility settings."""

    question_id: str
    question_number: int
    question_text: str = ""
    question_type: str = "TEXT"
    giver_type: FeedbackParticipantType = FeedbackParticipantType.INSTRUCTORS
    recipient_type: FeedbackParticipantType = FeedbackParticipantType.NONE
    show_responses_to: list[FeedbackParticipantType] = Field(default_factory=list)
    show_giver_name_to: list[FeedbackParticipantType] = Field(default_factory=list)
    show_recipient_name_to: list[FeedbackParticipantType] = Field(default_factory=list)

    def is_fully_visible_to(self, participant: FeedbackParticipantType) -> bool:
        """Whether giver name, recipient name and response are all shown to ``participant``."""
        return (
            participant in self.show_giver_name_to
            and participant in self.show_recipient_name_to
            and participant in self.show_responses_to
        )


class FeedbackResponseV1(BaseModel):
    """Response already stored for a question."""

    response_id: str
    question_id: str
    giver_email: str
    recipient_email: str
    answer: str = ""


class QuestionWithResponsesV1(BaseModel):
    """A question together with the giver's existing responses and valid recipients."""

    question: FeedbackQuestionV1
    responses: list[FeedbackResponseV1] = Field(default_factory=list)
    recipients: dict[str, str] = Field(
        default_factory=dict, description="Recipient email to display name"
    )


class FeedbackSessionQuestionsBundleV1(BaseModel):
    """Session plus the questions a given user is expected to answer."""

    feedback_session: FeedbackSessionV1
    questions: list[QuestionWithResponsesV1] = Field(default_factory=list)

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def get_question_attributes(self, question_id: str) -> FeedbackQuestionV1 | None:
        for entry in self.questions:
            if entry.question.question_id == question_id:
                return entry.question
        return None


class SubmittedResponseV1(BaseModel):
    """Response parsed from the submitted form, sent to the logic service for storage."""

    question_id: str
    recipient_email: str
    answer: str
    response_id: str | None = None


class SaveResponsesRequestV1(BaseModel):
    """Body of POST /internal/v1/courses/{c}/sessions/{s}/responses."""

    giver_email: str
    giver_team: str
    giver_section: str
    responses: dict[str, list[SubmittedResponseV1]] = Field(default_factory=dict)
    deleted_response_ids: list[str] = Field(default_factory=list)


class SaveResponsesResultV1(BaseModel):
    """Logic service answer to a save: how many responses the giver now has stored."""

    stored_response_count: int = 0
