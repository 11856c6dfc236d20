# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/models/__init__.py
"""

from .comment_models import Comment

__all__ = ["Comment"]
