# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/repositories/__init__.py
"""

from . import comment_repository

__all__ = ["comment_repository"]
