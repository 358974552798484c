"""Comment request schemas."""

from core.schemas.comment.request.comment_request import CommentRequest

__all__ = ["CommentRequest"]
