# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/schemas/__init__.py
"""

from .comment_schemas import MAX_COMMENT_LENGTH, CommentRequest, CommentRead

__all__ = ["MAX_COMMENT_LENGTH", "CommentRequest", "CommentRead"]
