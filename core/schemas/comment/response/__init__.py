"""Comment response schemas."""

from core.schemas.comment.response.comment_list_response import CommentListResponse
from core.schemas.comment.response.comment_response import CommentResponse

__all__ = ["CommentListResponse", "CommentResponse"]
