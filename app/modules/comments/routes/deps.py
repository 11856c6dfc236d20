# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/routes/deps.py

Dependencias y traducción de errores de las rutas de comentarios.
"""

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_db
from app.shared.utils.http_exceptions import (
    ForbiddenException,
    NotFoundException,
    UnprocessableEntityException,
)
from app.modules.comments.facades import (
    CommentNotFound,
    InvalidCommentContent,
    PermissionDenied,
    ProjectNotFound,
)
from app.modules.comments.services import CommentService

COMMENT_DOMAIN_ERRORS = (CommentNotFound, InvalidCommentContent, PermissionDenied, ProjectNotFound)


async def get_comment_service(db: AsyncSession = Depends(get_db)) -> CommentService:
    return CommentService(db)


def http_error_from(exc: Exception) -> HTTPException:
    if isinstance(exc, ProjectNotFound):
        return NotFoundException(detail="Proyecto no encontrado")
    if isinstance(exc, CommentNotFound):
        return NotFoundException(detail="Comentario no encontrado")
    if isinstance(exc, PermissionDenied):
        return ForbiddenException(detail="No eres el autor del comentario")
    if isinstance(exc, InvalidCommentContent):
        return UnprocessableEntityException(detail=str(exc))
    raise TypeError(f"Error de dominio no mapeado: {type(exc).__name__}")
