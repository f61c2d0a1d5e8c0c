from enum import Enum


class EngagementMethod(str, Enum):
    SESSION_BASED = "session_based"
    ACTIVITY_BASED = "activity_based"
    RETENTION_BASED = "retention_based"


# Actions that count a user as engaged for the activity-based ratio
ENGAGEMENT_ACTIONS = [
    "submitted_feedback",
    "created_profile",
    "uploaded_content",
]
