"""Size limits applied to listings and user input."""

# Inbox page size; the client polls roughly every 30 seconds
NOTIFICATION_PAGE_SIZE = 50

USER_SEARCH_MIN_QUERY_LENGTH = 2
USER_SEARCH_LIMIT = 20

REVIEW_BODY_MAX_LENGTH = 2000
COMMENT_BODY_MAX_LENGTH = 2000

PASSWORD_MIN_LENGTH = 6

AI_DESCRIPTION_MIN_LENGTH = 3
AI_MAX_SUGGESTIONS = 5
