# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/services/comment_service.py

Capa de aplicación de comentarios. Orquesta CommentFacade y arma las
respuestas (mensajes de confirmación y slice de lectura).
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.utils.api_responses import SliceApiResponse
from app.shared.utils.pagination import PageRequest
from app.modules.comments.facades import CommentFacade
from app.modules.comments.schemas import CommentRead, CommentRequest
from app.modules.projects.facades.base import Clock, now_utc

MSG_COMMENT_SAVED = "Comentario guardado"
MSG_COMMENT_UPDATED = "Comentario actualizado"
MSG_COMMENT_DELETED = "Comentario eliminado"


class CommentService:
    def __init__(self, db: AsyncSession, clock: Clock = now_utc):
        self.db = db
        self.facade = CommentFacade(db, clock)

    async def post_comment(self, project_id: int, content: str, *, user_id: int) -> str:
        await self.facade.post(project_id, content, user_id=user_id)
        return MSG_COMMENT_SAVED

    async def get_comments(
        self,
        project_id: int,
        *,
        page: int = 0,
        size: Optional[int] = None,
    ) -> SliceApiResponse[CommentRead]:
        request = PageRequest.of(
            page,
            size,
            default_size=settings.page_size_default,
            max_size=settings.page_size_max,
        )
        rows, has_next = await self.facade.list_slice(project_id, request)
        return SliceApiResponse[CommentRead](
            data=[CommentRead.model_validate(c) for c in rows],
            page=request.page,
            size=request.size,
            has_next=has_next,
        )

    async def update_comment(self, project_id: int, request: CommentRequest, *, user_id: int) -> str:
        await self.facade.update(project_id, request.comment_id, request.content, user_id=user_id)
        return MSG_COMMENT_UPDATED

    async def delete_comment(self, project_id: int, comment_id: int, *, user_id: int) -> str:
        await self.facade.delete(project_id, comment_id, user_id=user_id)
        return MSG_COMMENT_DELETED
# Fin del archivo backend/app/modules/comments/services/comment_service.py
