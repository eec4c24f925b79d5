"""
feedback_common.feedback_enums - Enums shared by feedback session services.

Values match the wire format used by the course logic service.
"""

from __future__ import annotations

from enum import Enum


class FeedbackParticipantType(str, Enum):
    """Roles that can give, receive or see feedback responses."""

    SELF = "SELF"
    STUDENTS = "STUDENTS"
    INSTRUCTORS = "INSTRUCTORS"
    TEAMS = "TEAMS"
    OWN_TEAM = "OWN_TEAM"
    OWN_TEAM_MEMBERS = "OWN_TEAM_MEMBERS"
    OWN_TEAM_MEMBERS_INCLUDING_SELF = "OWN_TEAM_MEMBERS_INCLUDING_SELF"
    RECEIVER = "RECEIVER"
    RECEIVER_TEAM_MEMBERS = "RECEIVER_TEAM_MEMBERS"
    NONE = "NONE"


class StatusMessageColor(str, Enum):
    """Display colour of a status message shown to the user."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
