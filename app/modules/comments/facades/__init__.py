# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/facades/__init__.py
"""

from .errors import CommentNotFound, InvalidCommentContent, PermissionDenied, ProjectNotFound
from .comment_facade import CommentFacade, normalize_content

__all__ = [
    "CommentNotFound",
    "InvalidCommentContent",
    "PermissionDenied",
    "ProjectNotFound",
    "CommentFacade",
    "normalize_content",
]
