# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/services/__init__.py
"""

from .comment_service import (
    CommentService,
    MSG_COMMENT_SAVED,
    MSG_COMMENT_UPDATED,
    MSG_COMMENT_DELETED,
)

__all__ = [
    "CommentService",
    "MSG_COMMENT_SAVED",
    "MSG_COMMENT_UPDATED",
    "MSG_COMMENT_DELETED",
]
