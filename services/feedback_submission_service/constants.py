"""Request parameter names, page URIs and fixed values shared with the web frontend."""

from __future__ import annotations


class ParamsNames:
    COURSE_ID = "courseid"
    FEEDBACK_SESSION_NAME = "fsname"
    FEEDBACK_SESSION_MODERATED_INSTRUCTOR = "moderatedinstructor"
    FEEDBACK_SESSION_MODERATED_STUDENT = "moderatedstudent"

    FEEDBACK_QUESTION_ID = "questionid"
    FEEDBACK_RESPONSE_TOTAL = "questionresponsetotal"
    FEEDBACK_RESPONSE_ID = "responseid"
    FEEDBACK_RESPONSE_RECIPIENT = "responserecipient"
    FEEDBACK_RESPONSE_TEXT = "responsetext"

    INSTRUCTOR_PERMISSION_MODIFY_SESSION_COMMENT_IN_SECTIONS = "canmodifysessioncommentinsection"


class ActionURIs:
    INSTRUCTOR_EDIT_INSTRUCTOR_FEEDBACK_PAGE = "/page/instructorEditInstructorFeedbackPage"


class StatusMessages:
    FEEDBACK_RESPONSES_SAVED = "All responses submitted successfully!"
    FEEDBACK_SUBMISSIONS_NOT_OPEN = (
        "This feedback session is not yet opened for submissions or has already closed."
    )
    FEEDBACK_QUESTIONS_CHANGED = (
        "The feedback session or questions may have changed while you were submitting. "
        "Please check your responses to make sure they are saved correctly."
    )


USER_TEAM_FOR_INSTRUCTOR = "Instructors"
DEFAULT_SECTION = "None"
