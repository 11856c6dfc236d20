# -*- coding: utf-8 -*-
"""
backend/app/modules/comments/repositories/comment_repository.py

Acceso a datos de comentarios. Sin commit: lo hace el facade.

Autor: Equipo Colabora
Fecha: 2026-03-02
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.comments.models import Comment


async def get_project_comment(db: AsyncSession, project_id: int, comment_id: int) -> Optional[Comment]:
    """Busca el comentario dentro del proyecto indicado."""
    stmt = select(Comment).where(Comment.project_id == project_id, Comment.comment_id == comment_id)
    return (await db.execute(stmt)).scalar_one_or_none()


async def list_project_comments(
    db: AsyncSession,
    project_id: int,
    *,
    offset: int = 0,
    limit: int = 10,
) -> List[Comment]:
    """Comentarios del proyecto, más antiguos primero."""
    stmt = (
        select(Comment)
        .where(Comment.project_id == project_id)
        .order_by(Comment.created_at.asc(), Comment.comment_id.asc())
        .offset(offset)
        .limit(limit)
    )
    return list((await db.execute(stmt)).scalars().all())


__all__ = ["get_project_comment", "list_project_comments"]
