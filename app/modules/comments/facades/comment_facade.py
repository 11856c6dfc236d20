# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/facades/comment_facade.py

Facade de comentarios: publicar, listar (slice), editar y eliminar.

Reglas:
- Publicar exige que el proyecto exista y contenido no vacío
- Editar / eliminar buscan el comentario dentro del proyecto del path
  y solo el autor puede hacerlo

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.utils.pagination import PageRequest
from app.modules.comments.models import Comment
from app.modules.comments.repositories import comment_repository
from app.modules.comments.schemas import MAX_COMMENT_LENGTH
from app.modules.projects.facades.base import Clock, commit_or_raise, is_owner, now_utc
from app.modules.projects.repositories import project_repository

from .errors import CommentNotFound, InvalidCommentContent, PermissionDenied, ProjectNotFound

logger = logging.getLogger(__name__)


def normalize_content(content: str) -> str:
    """Recorta espacios y valida longitud."""
    text = (content or "").strip()
    if not text:
        raise InvalidCommentContent("El comentario no puede estar vacío")
    if len(text) > MAX_COMMENT_LENGTH:
        raise InvalidCommentContent(f"El comentario excede {MAX_COMMENT_LENGTH} caracteres")
    return text


class CommentFacade:
    def __init__(self, db: AsyncSession, clock: Clock = now_utc):
        self.db = db
        self.clock = clock

    async def _get_writable(self, project_id: int, comment_id: int, user_id: int) -> Comment:
        comment = await comment_repository.get_project_comment(self.db, project_id, comment_id)
        if comment is None:
            raise CommentNotFound(project_id, comment_id)
        if not is_owner(comment.user_id, user_id):
            raise PermissionDenied(f"Usuario {user_id} no es autor del comentario {comment_id}")
        return comment

    async def post(self, project_id: int, content: str, *, user_id: int) -> Comment:
        text = normalize_content(content)

        async def _work() -> Comment:
            if not await project_repository.project_exists(self.db, project_id):
                raise ProjectNotFound(project_id)
            now = self.clock()
            comment = Comment(
                project_id=project_id,
                user_id=user_id,
                content=text,
                created_at=now,
                updated_at=now,
            )
            self.db.add(comment)
            await self.db.flush()
            return comment

        comment = await commit_or_raise(self.db, _work)
        logger.info("comment_posted project_id=%s comment_id=%s", project_id, comment.comment_id)
        return comment

    async def list_slice(self, project_id: int, page: PageRequest) -> Tuple[List[Comment], bool]:
        """
        Devuelve (comentarios de la página, has_next). Pide un elemento extra
        para saber si hay página siguiente sin contar el total.
        """
        rows = await comment_repository.list_project_comments(
            self.db, project_id, offset=page.offset, limit=page.size + 1
        )
        return rows[: page.size], len(rows) > page.size

    async def update(self, project_id: int, comment_id: int, content: str, *, user_id: int) -> Comment:
        text = normalize_content(content)

        async def _work() -> Comment:
            comment = await self._get_writable(project_id, comment_id, user_id)
            comment.content = text
            comment.updated_at = self.clock()
            return comment

        return await commit_or_raise(self.db, _work)

    async def delete(self, project_id: int, comment_id: int, *, user_id: int) -> bool:
        async def _work() -> bool:
            comment = await self._get_writable(project_id, comment_id, user_id)
            await self.db.delete(comment)
            return True

        deleted = await commit_or_raise(self.db, _work)
        logger.info("comment_deleted project_id=%s comment_id=%s", project_id, comment_id)
        return deleted


__all__ = ["CommentFacade", "normalize_content"]
# Fin del archivo backend/app/modules/comments/facades/comment_facade.py
