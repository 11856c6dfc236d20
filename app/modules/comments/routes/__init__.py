# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/routes/__init__.py

Router del módulo de comentarios (prefijo /comments).
"""
from fastapi import APIRouter

from .comments_routes import router as comments_router


def get_comments_router() -> APIRouter:
    return comments_router


__all__ = ["get_comments_router"]
