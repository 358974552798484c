"""Comment schemas."""

from core.schemas.comment.request import CommentRequest
from core.schemas.comment.response import CommentListResponse, CommentResponse

__all__ = ["CommentListResponse", "CommentRequest", "CommentResponse"]
