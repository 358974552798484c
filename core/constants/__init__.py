"""Constants package for core application."""

from core.constants.http import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SLOW_REQUEST_THRESHOLD,
)
from core.constants.limits import (
    AI_DESCRIPTION_MIN_LENGTH,
    AI_MAX_SUGGESTIONS,
    COMMENT_BODY_MAX_LENGTH,
    NOTIFICATION_PAGE_SIZE,
    PASSWORD_MIN_LENGTH,
    REVIEW_BODY_MAX_LENGTH,
    USER_SEARCH_LIMIT,
    USER_SEARCH_MIN_QUERY_LENGTH,
)

__all__ = [
    "AI_DESCRIPTION_MIN_LENGTH",
    "AI_MAX_SUGGESTIONS",
    "COMMENT_BODY_MAX_LENGTH",
    "NOTIFICATION_PAGE_SIZE",
    "PASSWORD_MIN_LENGTH",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "REVIEW_BODY_MAX_LENGTH",
    "SLOW_REQUEST_THRESHOLD",
    "USER_SEARCH_LIMIT",
    "USER_SEARCH_MIN_QUERY_LENGTH",
]
